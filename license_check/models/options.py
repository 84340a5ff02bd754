"""Output option models for the command line interface."""
from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class OutputOptions(BaseModel):
    """Options controlling how a command renders its result."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "json"] = Field(
        default="terminal",
        description="Output format",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )
