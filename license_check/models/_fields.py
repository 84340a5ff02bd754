"""Shared field validators for license-check models."""
from __future__ import annotations


def require_text(value: str) -> str:
    """Reject empty or whitespace-only strings.

    Args:
        value: The string to check.

    Returns:
        The value unchanged.

    Raises:
        ValueError: If the value is blank.
    """
    if not value.strip():
        raise ValueError("must not be blank")
    return value
