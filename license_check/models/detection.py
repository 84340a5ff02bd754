"""Detection-related Pydantic models."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from license_check.constants import UNKNOWN_LICENSE
from license_check.models._fields import require_text


class Confidence(str, Enum):
    """Detector's self-reported reliability of a license determination."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DependencyInput(BaseModel):
    """A dependency whose license should be determined."""

    model_config = {"extra": "forbid"}

    name: str = Field(description="Package name")
    version: Optional[str] = Field(default=None, description="Package version")
    license_text: Optional[str] = Field(
        default=None, description="Raw license text shipped with the package"
    )
    license_id: Optional[str] = Field(
        default=None, description="License identifier or alias from package metadata"
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        """Reject blank package names."""
        return require_text(value)

    @property
    def display_name(self) -> str:
        """Package name with version suffix when known (e.g. "lodash@4.17.21")."""
        return f"{self.name}@{self.version}" if self.version else self.name


class FileInput(BaseModel):
    """A license file (LICENSE, COPYING, ...) to analyze."""

    model_config = {"extra": "forbid"}

    filename: str = Field(description="File name, used as the subject name")
    content: str = Field(description="File content")

    @field_validator("filename", "content")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        """Reject blank filenames and empty file content."""
        return require_text(value)


class DetectRequest(BaseModel):
    """Input for license detection.

    At least one of dependencies or files must be a non-empty list; the
    detector enforces this before processing.
    """

    model_config = {"extra": "forbid"}

    dependencies: Optional[list[DependencyInput]] = Field(
        default=None, description="Dependencies to resolve licenses for"
    )
    files: Optional[list[FileInput]] = Field(
        default=None, description="License files to analyze"
    )


class DetectedLicense(BaseModel):
    """License determination for a single dependency or file."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Dependency name or filename")
    version: Optional[str] = Field(default=None, description="Dependency version")
    license_id: str = Field(
        description="Canonical SPDX identifier, pass-through identifier, or UNKNOWN"
    )
    confidence: Confidence = Field(description="Reliability of the determination")
    source: str = Field(description="How the license was determined")


class DetectionResult(BaseModel):
    """Result of a detection run."""

    model_config = {"extra": "forbid"}

    detected: list[DetectedLicense] = Field(
        default_factory=list, description="One record per input dependency or file"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Non-blocking notices about the run"
    )

    @property
    def unknown_count(self) -> int:
        """Number of records whose license could not be determined."""
        return sum(1 for item in self.detected if item.license_id == UNKNOWN_LICENSE)
