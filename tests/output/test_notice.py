"""Tests for NOTICE file formatter."""
from __future__ import annotations

from datetime import date

from license_check.models.notice import NoticeRequest, PackageLicense
from license_check.output.notice import RULE_WIDTH, NoticeFormatter

_GENERATED = date(2024, 5, 1)


def _render(request: NoticeRequest) -> list[str]:
    result = NoticeFormatter().format_notice(request, generated_on=_GENERATED)
    return result.notice_text.split("\n")


class TestNoticeFormatter:
    """Tests for NoticeFormatter."""

    def test_header_with_project_name(self) -> None:
        """Test that the header names the project and date."""
        lines = _render(
            NoticeRequest(
                project_name="MyProject",
                licenses=[PackageLicense(name="x", license_id="MIT")],
            )
        )

        assert lines[0] == "=" * RULE_WIDTH
        assert lines[1] == "NOTICE file for MyProject"
        assert lines[2] == "Generated on: 2024-05-01"
        assert lines[3] == "=" * RULE_WIDTH

    def test_header_without_project_name(self) -> None:
        """Test the generic header title."""
        lines = _render(NoticeRequest(licenses=[PackageLicense(name="x", license_id="MIT")]))

        assert lines[1] == "NOTICE file"

    def test_groups_sorted_by_license_id(self) -> None:
        """Test that license sections are ordered by identifier."""
        lines = _render(
            NoticeRequest(
                licenses=[
                    PackageLicense(name="a", license_id="MIT"),
                    PackageLicense(name="b", license_id="Apache-2.0"),
                    PackageLicense(name="c", license_id="BSD-3-Clause"),
                ]
            )
        )

        headings = [line for line in lines if line.startswith("License: ")]
        assert headings == [
            "License: Apache License 2.0 (Apache-2.0)",
            'License: BSD 3-Clause "New" or "Revised" License (BSD-3-Clause)',
            "License: MIT License (MIT)",
        ]

    def test_packages_sorted_case_insensitively(self) -> None:
        """Test that packages within a group are sorted by name."""
        lines = _render(
            NoticeRequest(
                licenses=[
                    PackageLicense(name="zeta", license_id="MIT"),
                    PackageLicense(name="Alpha", license_id="MIT", version="1.0"),
                    PackageLicense(name="beta", license_id="MIT"),
                ]
            )
        )

        entries = [line for line in lines if line.startswith("  * ")]
        assert entries == ["  * Alpha@1.0", "  * beta", "  * zeta"]

    def test_package_details(self) -> None:
        """Test that copyright and URL lines follow the package entry."""
        text = NoticeFormatter().format_notice(
            NoticeRequest(
                licenses=[
                    PackageLicense(
                        name="requests",
                        version="2.31.0",
                        license_id="Apache-2.0",
                        copyright="Copyright 2019 Kenneth Reitz",
                        url="https://requests.readthedocs.io",
                    )
                ]
            ),
            generated_on=_GENERATED,
        ).notice_text

        assert (
            "  * requests@2.31.0\n"
            "    Copyright: Copyright 2019 Kenneth Reitz\n"
            "    URL: https://requests.readthedocs.io\n"
        ) in text

    def test_section_layout(self) -> None:
        """Test the rules and intro line around a license section."""
        lines = _render(NoticeRequest(licenses=[PackageLicense(name="x", license_id="MIT")]))

        index = lines.index("License: MIT License (MIT)")
        assert lines[index - 1] == "-" * RULE_WIDTH
        assert lines[index + 1] == "-" * RULE_WIDTH
        assert lines[index + 2] == ""
        assert lines[index + 3] == (
            "The following components are licensed under this license:"
        )

    def test_footer(self) -> None:
        """Test that the file ends with the end marker."""
        lines = _render(NoticeRequest(licenses=[PackageLicense(name="x", license_id="MIT")]))

        assert lines[-3:] == ["=" * RULE_WIDTH, "END OF NOTICE FILE", "=" * RULE_WIDTH]

    def test_unregistered_license_uses_id_as_name(self) -> None:
        """Test the heading for licenses without a known full name."""
        lines = _render(
            NoticeRequest(licenses=[PackageLicense(name="x", license_id="Custom-1.0")])
        )

        assert "License: Custom-1.0 (Custom-1.0)" in lines

    def test_unknown_license_warns(self) -> None:
        """Test that UNKNOWN packages produce a review warning."""
        result = NoticeFormatter().format_notice(
            NoticeRequest(
                licenses=[
                    PackageLicense(name="mystery", license_id="UNKNOWN"),
                    PackageLicense(name="x", license_id="MIT"),
                ]
            )
        )

        assert result.warnings == [
            'Package "mystery" has unknown license - manual review required'
        ]

    def test_defaults_to_today(self) -> None:
        """Test that the generation date defaults to today."""
        result = NoticeFormatter().format_notice(
            NoticeRequest(licenses=[PackageLicense(name="x", license_id="MIT")])
        )

        assert f"Generated on: {date.today().isoformat()}" in result.notice_text
