"""NOTICE file formatter for license-check."""
from __future__ import annotations

from datetime import date
from typing import Optional

from license_check.constants import UNKNOWN_LICENSE
from license_check.models.notice import NoticeRequest, NoticeResult, PackageLicense
from license_check.registry import license_full_name

RULE_WIDTH = 78

NOTICE_INTRO = (
    "This project includes software developed by third parties. "
    "The following is a list of all third-party components and their licenses."
)


class NoticeFormatter:
    """Render a NOTICE file summarizing third-party licenses.

    Output layout:
    - Header with project name and generation date
    - One section per license, sorted by SPDX identifier, showing the
      full license name and the identifier
    - Packages sorted by name with version, copyright and URL when known
    - Footer with end marker
    """

    def format_notice(
        self, request: NoticeRequest, generated_on: Optional[date] = None
    ) -> NoticeResult:
        """Render NOTICE text for the given packages.

        Args:
            request: Packages to list and optional project name.
            generated_on: Date for the header. Defaults to today.

        Returns:
            NoticeResult with the text and a warning per UNKNOWN package.
        """
        generated = generated_on or date.today()
        lines: list[str] = []
        warnings: list[str] = []

        lines.extend(self._header(request.project_name, generated))

        for license_id, packages in self._group_by_license(request.licenses):
            lines.append("-" * RULE_WIDTH)
            lines.append(f"License: {license_full_name(license_id)} ({license_id})")
            lines.append("-" * RULE_WIDTH)
            lines.append("")
            lines.append("The following components are licensed under this license:")
            lines.append("")

            for pkg in sorted(packages, key=lambda p: p.name.lower()):
                lines.extend(self._package_lines(pkg))
                if license_id == UNKNOWN_LICENSE:
                    warnings.append(
                        f'Package "{pkg.name}" has unknown license - '
                        "manual review required"
                    )

            lines.append("")

        lines.append("=" * RULE_WIDTH)
        lines.append("END OF NOTICE FILE")
        lines.append("=" * RULE_WIDTH)

        return NoticeResult(notice_text="\n".join(lines), warnings=warnings)

    def _header(self, project_name: Optional[str], generated: date) -> list[str]:
        title = f"NOTICE file for {project_name}" if project_name else "NOTICE file"
        return [
            "=" * RULE_WIDTH,
            title,
            f"Generated on: {generated.isoformat()}",
            "=" * RULE_WIDTH,
            "",
            NOTICE_INTRO,
            "",
        ]

    def _group_by_license(
        self, packages: list[PackageLicense]
    ) -> list[tuple[str, list[PackageLicense]]]:
        """Group packages by license identifier, sorted by identifier."""
        groups: dict[str, list[PackageLicense]] = {}
        for pkg in packages:
            groups.setdefault(pkg.license_id, []).append(pkg)
        return sorted(groups.items())

    def _package_lines(self, pkg: PackageLicense) -> list[str]:
        version = f"@{pkg.version}" if pkg.version else ""
        lines = [f"  * {pkg.name}{version}"]
        if pkg.copyright:
            lines.append(f"    Copyright: {pkg.copyright}")
        if pkg.url:
            lines.append(f"    URL: {pkg.url}")
        return lines
