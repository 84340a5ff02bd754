"""NOTICE generation Pydantic models."""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from license_check.models._fields import require_text


class PackageLicense(BaseModel):
    """A third-party component listed in a NOTICE file."""

    model_config = {"extra": "forbid"}

    name: str = Field(description="Package name")
    version: Optional[str] = Field(default=None, description="Package version")
    license_id: str = Field(description="SPDX license identifier")
    copyright: Optional[str] = Field(default=None, description="Copyright line")
    url: Optional[str] = Field(default=None, description="Project URL")

    @field_validator("name", "license_id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        """Reject blank names and license identifiers."""
        return require_text(value)

    @field_validator("url")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        """Accept only absolute http(s) URLs."""
        if value is None:
            return None
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return value


class NoticeRequest(BaseModel):
    """Input for NOTICE generation."""

    model_config = {"extra": "forbid"}

    licenses: list[PackageLicense] = Field(
        min_length=1, description="Components to list"
    )
    project_name: Optional[str] = Field(
        default=None, description="Project name for the header"
    )


class NoticeResult(BaseModel):
    """Rendered NOTICE file."""

    model_config = {"extra": "forbid"}

    notice_text: str = Field(description="Formatted NOTICE file content")
    warnings: list[str] = Field(default_factory=list, description="Review notices")
