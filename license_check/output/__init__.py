"""Output formatters for license-check."""

from license_check.output.notice import NoticeFormatter
from license_check.output.terminal import TerminalFormatter

__all__ = [
    "NoticeFormatter",
    "TerminalFormatter",
]
