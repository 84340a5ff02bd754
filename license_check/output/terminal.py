"""Terminal output formatter using Rich."""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_check.constants import LEGAL_DISCLAIMER_SHORT, UNKNOWN_LICENSE
from license_check.models.detection import Confidence, DetectionResult
from license_check.models.options import Verbosity
from license_check.models.policy import CompatibilityResult

_CONFIDENCE_STYLES = {
    Confidence.HIGH: "green",
    Confidence.MEDIUM: "yellow",
    Confidence.LOW: "red",
}


class TerminalFormatter:
    """Format license-check results for terminal display using Rich.

    Detection results are shown as a table color coded by confidence;
    compatibility results as a status panel plus a violations table.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_detection_result(self, result: DetectionResult) -> None:
        """Display detected licenses as a Rich table.

        Args:
            result: The detection result to display.
        """
        unknown = result.unknown_count

        if self._verbosity == Verbosity.QUIET:
            if unknown:
                self._console.print(
                    f"[red]ISSUES FOUND[/red] - {unknown} license(s) could not be detected"
                )
                for item in result.detected:
                    if item.license_id == UNKNOWN_LICENSE:
                        self._console.print(f"  - {escape(item.name)}")
            else:
                self._console.print(
                    f"[green]PASS[/green] - All {len(result.detected)} licenses detected"
                )
            return

        self._print_disclaimer()

        table = Table(title="Detected Licenses")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("License")
        table.add_column("Confidence")
        if self._verbosity == Verbosity.VERBOSE:
            table.add_column("Source", style="dim")

        for item in result.detected:
            style = _CONFIDENCE_STYLES[item.confidence]
            license_display = (
                f"[yellow]{UNKNOWN_LICENSE}[/yellow]"
                if item.license_id == UNKNOWN_LICENSE
                else escape(item.license_id)
            )
            row = [
                escape(item.name),
                escape(item.version or "-"),
                license_display,
                f"[{style}]{item.confidence.value}[/{style}]",
            ]
            if self._verbosity == Verbosity.VERBOSE:
                row.append(escape(item.source))
            table.add_row(*row)

        self._console.print(table)
        self._print_warnings(result.warnings)

        self._console.print(f"\n[bold]Total:[/bold] {len(result.detected)}")
        self._console.print(f"[bold]Undetected:[/bold] {unknown}")

    def format_compatibility_result(self, result: CompatibilityResult) -> None:
        """Display a policy compatibility verdict.

        Args:
            result: The compatibility result to display.
        """
        if self._verbosity == Verbosity.QUIET:
            if result.compatible:
                self._console.print("[green]COMPATIBLE[/green]")
            else:
                self._console.print(
                    f"[red]INCOMPATIBLE[/red] - "
                    f"{len(result.violations)} violation(s) found"
                )
                for violation in result.violations:
                    name = escape(violation.name or "unnamed package")
                    self._console.print(f"  - {name}: [red]{escape(violation.reason)}[/red]")
            return

        if result.compatible:
            status, color = "COMPATIBLE", "green"
            message = "All licenses satisfy the policy"
        else:
            status, color = "INCOMPATIBLE", "red"
            message = f"{len(result.violations)} violation(s) require attention"

        panel = Panel(
            f"Status: [{color}]{status}[/{color}]\n[{color}]{message}[/{color}]",
            title="[bold]POLICY CHECK[/bold]",
            border_style=color,
        )
        self._console.print(panel)
        self._print_disclaimer()

        if result.violations:
            table = Table(title="Policy Violations")
            table.add_column("Name", style="cyan", no_wrap=True)
            table.add_column("License", style="magenta")
            table.add_column("Reason", style="red")
            for violation in result.violations:
                table.add_row(
                    escape(violation.name or "-"),
                    escape(violation.license_id),
                    escape(violation.reason),
                )
            self._console.print(table)

        self._print_warnings(result.warnings)

    def _print_warnings(self, warnings: list[str]) -> None:
        if not warnings:
            return
        self._console.print("\n[bold yellow]Warnings:[/bold yellow]")
        for warning in warnings:
            self._console.print(f"  - [yellow]{escape(warning)}[/yellow]")

    def _print_disclaimer(self) -> None:
        """Print legal disclaimer panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")
