"""Policy-related Pydantic models for license-check."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from license_check.models._fields import require_text


class LicenseInfo(BaseModel):
    """A license to evaluate against a policy."""

    model_config = {"extra": "forbid"}

    name: Optional[str] = Field(default=None, description="Package name")
    license_id: str = Field(description="License identifier (may be UNKNOWN)")

    @field_validator("license_id")
    @classmethod
    def check_license_id(cls, value: str) -> str:
        """Reject blank license identifiers."""
        return require_text(value)

    @property
    def display_name(self) -> str:
        """Package name, or a placeholder for unnamed entries."""
        return self.name if self.name is not None else "unnamed package"


class Policy(BaseModel):
    """License policy rules.

    An empty or missing allowed list means "allow anything not denied".
    copyleft_ok only restricts copyleft licenses when explicitly False.
    """

    model_config = {"extra": "forbid", "frozen": True}

    allowed: Optional[list[str]] = Field(
        default=None,
        description="Whitelist of permitted license identifiers",
    )
    denied: Optional[list[str]] = Field(
        default=None,
        description="Blacklist of forbidden license identifiers",
    )
    copyleft_ok: Optional[bool] = Field(
        default=None,
        description="If False, copyleft licenses violate the policy",
    )
    required_attribution: Optional[list[str]] = Field(
        default=None,
        description="Informational list of licenses needing attribution; not enforced",
    )

    @property
    def has_allow_list(self) -> bool:
        """True if a non-empty allowed list is configured."""
        return bool(self.allowed)

    def merged_with(self, other: Policy) -> Policy:
        """Return a policy where fields set on other replace fields set here."""
        return Policy(
            allowed=other.allowed if other.allowed is not None else self.allowed,
            denied=other.denied if other.denied is not None else self.denied,
            copyleft_ok=(
                other.copyleft_ok if other.copyleft_ok is not None else self.copyleft_ok
            ),
            required_attribution=(
                other.required_attribution
                if other.required_attribution is not None
                else self.required_attribution
            ),
        )


class Violation(BaseModel):
    """A policy breach for a single license."""

    model_config = {"extra": "forbid", "frozen": True}

    name: Optional[str] = Field(default=None, description="Package name")
    license_id: str = Field(description="The offending license identifier")
    reason: str = Field(description="Why this is a violation")


class CompatibilityRequest(BaseModel):
    """Input for a policy compatibility check."""

    model_config = {"extra": "forbid"}

    licenses: list[LicenseInfo] = Field(description="Licenses to check")
    policy: Policy = Field(default_factory=Policy, description="Policy rules")


class CompatibilityResult(BaseModel):
    """Result of evaluating licenses against a policy."""

    model_config = {"extra": "forbid"}

    violations: list[Violation] = Field(
        default_factory=list, description="Policy breaches, at most one per license"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Advisory notices that never block"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def compatible(self) -> bool:
        """True if no license violates the policy."""
        return not self.violations
