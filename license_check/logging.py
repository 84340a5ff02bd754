"""Structured logging for license-check.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable output, colored on a TTY.
- **JSON** (``json_log=True``): one JSON object per line.

Both modes write to stderr so stdout stays clean for piped output
(e.g., ``license-check detect deps.json --format json | jq``).

The ``LICENSE_CHECK_LOG_LEVEL`` environment variable (debug, info,
warning, error) overrides the level derived from the arguments.

Usage::

    from license_check.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.info('detection finished', detected=3)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

import structlog

LOG_LEVEL_ENV_VAR = "LICENSE_CHECK_LOG_LEVEL"

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_log_level(
    *,
    verbose: bool = False,
    quiet: bool = False,
    default: Optional[str] = None,
) -> int:
    """Work out the effective log level.

    Precedence: ``LICENSE_CHECK_LOG_LEVEL``, then --quiet/--verbose, then
    the configured default, then WARNING.

    Args:
        verbose: Enable debug-level output.
        quiet: Only errors.
        default: Level name from the configuration file.

    Returns:
        A :mod:`logging` level number.
    """
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().lower()
    if env_level in _LEVELS:
        return _LEVELS[env_level]
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    if default and default.lower() in _LEVELS:
        return _LEVELS[default.lower()]
    return logging.WARNING


def _configure_defaults() -> None:
    """Send logs through stdlib logging until configure_logging() runs.

    The stdlib root logger then decides what is emitted, so importing the
    package as a library prints nothing below WARNING and never writes to
    stdout. An existing structlog configuration is left alone.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    default_level: Optional[str] = None,
) -> None:
    """Configure structlog for license-check.

    Should be called once at startup, before any logging calls.

    Args:
        verbose: Enable debug-level output.
        quiet: Suppress everything below error level.
        json_log: Use JSON output instead of console output.
        default_level: Level name used when no flag or env var applies.
    """
    level = resolve_log_level(verbose=verbose, quiet=quiet, default=default_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderers: list[Any]
    if json_log:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderers,
        ],
    )
    for handler in logging.getLogger().handlers:
        handler.setFormatter(formatter)


def get_logger(name: Optional[str] = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


_configure_defaults()
