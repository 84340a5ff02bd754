"""Configuration Pydantic models for license-check."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from license_check.models.policy import Policy


class CheckConfig(BaseModel):
    """Configuration for license-check.

    All fields are optional with None defaults to allow partial configuration.
    """

    model_config = {"extra": "forbid"}

    policy: Optional[Policy] = Field(
        default=None,
        description="Default policy for compatibility checks. "
        "Command line options override individual fields.",
    )
    project_name: Optional[str] = Field(
        default=None,
        description="Project name used in NOTICE file headers.",
    )
    log_level: Optional[Literal["debug", "info", "warning", "error"]] = Field(
        default=None,
        description="Log level when neither --verbose nor --quiet is given.",
    )
