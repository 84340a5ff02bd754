"""Custom exceptions for license-check."""
from __future__ import annotations

from typing import Any, Optional


class LicenseCheckError(Exception):
    """Base exception for all license-check errors."""

    pass


class InvalidInputError(LicenseCheckError):
    """Exception raised when a request violates a structural precondition.

    Raised before any processing happens, so no partial results exist.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LicenseCheckError):
    """Exception raised when configuration is invalid."""

    pass
