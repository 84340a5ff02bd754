"""Tests for policy models."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from license_check.models import (
    CompatibilityRequest,
    CompatibilityResult,
    LicenseInfo,
    Policy,
    Violation,
)


class TestLicenseInfo:
    """Tests for LicenseInfo model."""

    def test_name_is_optional(self) -> None:
        """Test that name may be omitted."""
        info = LicenseInfo(license_id="MIT")
        assert info.name is None
        assert info.display_name == "unnamed package"

    def test_blank_license_id_rejected(self) -> None:
        """Test that a blank license_id is rejected."""
        with pytest.raises(ValidationError):
            LicenseInfo(name="x", license_id="  ")


class TestPolicy:
    """Tests for Policy model."""

    def test_defaults(self) -> None:
        """Test that all policy fields default to None."""
        policy = Policy()
        assert policy.allowed is None
        assert policy.denied is None
        assert policy.copyleft_ok is None
        assert policy.has_allow_list is False

    def test_has_allow_list(self) -> None:
        """Test that only a non-empty allow-list counts."""
        assert Policy(allowed=["MIT"]).has_allow_list is True
        assert Policy(allowed=[]).has_allow_list is False

    def test_rejects_unknown_fields(self) -> None:
        """Test that misspelled policy keys are rejected."""
        with pytest.raises(ValidationError):
            Policy.model_validate({"allow": ["MIT"]})

    def test_merged_with_prefers_other(self) -> None:
        """Test that fields set on the other policy win."""
        base = Policy(allowed=["MIT"], denied=["GPL-3.0"], copyleft_ok=True)
        override = Policy(denied=["AGPL-3.0"], copyleft_ok=False)

        merged = base.merged_with(override)

        assert merged.allowed == ["MIT"]
        assert merged.denied == ["AGPL-3.0"]
        assert merged.copyleft_ok is False

    def test_merged_with_empty_keeps_base(self) -> None:
        """Test that merging an empty policy changes nothing."""
        base = Policy(allowed=["MIT"], copyleft_ok=False)
        assert base.merged_with(Policy()) == base

    def test_accepts_required_attribution(self) -> None:
        """Test that the informational required_attribution list is accepted."""
        policy = Policy.model_validate({"required_attribution": ["MIT", "Apache-2.0"]})

        assert policy.required_attribution == ["MIT", "Apache-2.0"]
        assert Policy().merged_with(policy).required_attribution == ["MIT", "Apache-2.0"]


class TestCompatibilityModels:
    """Tests for CompatibilityRequest and CompatibilityResult."""

    def test_request_defaults_policy(self) -> None:
        """Test that policy defaults to an empty policy."""
        request = CompatibilityRequest.model_validate(
            {"licenses": [{"license_id": "MIT"}]}
        )
        assert request.policy == Policy()

    def test_result_compatible_is_computed(self) -> None:
        """Test that compatible reflects the violations list."""
        assert CompatibilityResult().compatible is True

        result = CompatibilityResult(
            violations=[Violation(name="x", license_id="GPL-3.0-only", reason="r")]
        )
        assert result.compatible is False

    def test_result_dump_includes_compatible(self) -> None:
        """Test that the computed verdict is serialized."""
        data = CompatibilityResult(warnings=["w"]).model_dump(mode="json")
        assert data == {"violations": [], "warnings": ["w"], "compatible": True}
