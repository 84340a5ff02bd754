"""Tests for the static license registry."""
from __future__ import annotations

import pytest

from license_check.registry import (
    ATTRIBUTION_REQUIRED_LICENSES,
    COPYLEFT_LICENSES,
    LICENSE_ALIASES,
    LICENSE_FULL_NAMES,
    SPDX_LICENSE_IDS,
    canonical_license_id,
    is_copyleft,
    is_registered,
    license_full_name,
    requires_attribution,
)


class TestRegistryData:
    """Consistency checks between the registry tables."""

    def test_alias_targets_are_registered(self) -> None:
        """Test that every alias maps to a registered canonical id."""
        for alias, target in LICENSE_ALIASES.items():
            assert target in SPDX_LICENSE_IDS, alias

    def test_copyleft_set_is_registered(self) -> None:
        """Test that every copyleft license is registered."""
        assert COPYLEFT_LICENSES <= set(SPDX_LICENSE_IDS)

    def test_attribution_set_is_registered(self) -> None:
        """Test that every attribution-required license is registered."""
        assert ATTRIBUTION_REQUIRED_LICENSES <= set(SPDX_LICENSE_IDS)

    def test_every_license_has_a_full_name(self) -> None:
        """Test that NOTICE rendering has a name for each registered id."""
        assert set(LICENSE_FULL_NAMES) == set(SPDX_LICENSE_IDS)

    def test_ids_are_unique_ignoring_case(self) -> None:
        """Test that no two canonical ids differ only by case."""
        upper = [license_id.upper() for license_id in SPDX_LICENSE_IDS]
        assert len(upper) == len(set(upper))

    def test_tables_are_read_only(self) -> None:
        """Test that the alias table cannot be modified."""
        with pytest.raises(TypeError):
            LICENSE_ALIASES["Foo"] = "MIT"  # type: ignore[index]


class TestCanonicalLicenseId:
    """Tests for canonical_license_id and is_registered."""

    def test_returns_canonical_casing(self) -> None:
        """Test that lookups return the stored casing."""
        assert canonical_license_id("apache-2.0") == "Apache-2.0"
        assert canonical_license_id("UNLICENSE") == "Unlicense"

    def test_unknown_returns_none(self) -> None:
        """Test that unregistered ids give None."""
        assert canonical_license_id("Foo-1.0") is None
        assert canonical_license_id(None) is None
        assert canonical_license_id("") is None

    def test_is_registered_is_case_insensitive(self) -> None:
        """Test that registration checks ignore case."""
        assert is_registered("MIT")
        assert is_registered("mit")
        assert not is_registered("MIT License")
        assert not is_registered("UNKNOWN")


class TestPredicates:
    """Tests for is_copyleft, requires_attribution and license_full_name."""

    @pytest.mark.parametrize(
        "license_id", ["GPL-3.0-only", "LGPL-2.1-or-later", "MPL-2.0", "CC-BY-SA-4.0"]
    )
    def test_copyleft_licenses(self, license_id: str) -> None:
        """Test that copyleft licenses are recognized."""
        assert is_copyleft(license_id)

    @pytest.mark.parametrize("license_id", ["MIT", "Apache-2.0", "Unlicense", "UNKNOWN"])
    def test_permissive_licenses_are_not_copyleft(self, license_id: str) -> None:
        """Test that permissive licenses are not copyleft."""
        assert not is_copyleft(license_id)

    def test_requires_attribution(self) -> None:
        """Test attribution-required membership."""
        assert requires_attribution("MIT")
        assert requires_attribution("BSD-3-Clause")
        assert not requires_attribution("CC0-1.0")
        assert not requires_attribution("GPL-3.0-only")

    def test_full_name_falls_back_to_id(self) -> None:
        """Test that unnamed ids render as themselves."""
        assert license_full_name("MIT") == "MIT License"
        assert license_full_name("UNKNOWN") == "UNKNOWN"
