"""CLI entry point for license-check."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO, Any, Literal, Optional, cast

import click
from rich.console import Console
from rich.markup import escape

from license_check import __version__
from license_check.config import CheckConfig, layered_policy, load_config
from license_check.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_check.exceptions import ConfigurationError, LicenseCheckError
from license_check.logging import configure_logging
from license_check.models.detection import DetectionResult
from license_check.models.envelope import ApiResponse
from license_check.models.notice import NoticeResult
from license_check.models.options import OutputOptions, Verbosity
from license_check.models.policy import CompatibilityResult, Policy
from license_check.output.terminal import TerminalFormatter
from license_check.tools import (
    TOOL_DEFINITIONS,
    check_compatibility_tool,
    detect_licenses_tool,
    generate_notice_tool,
)

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


def _common_options(func: Any) -> Any:
    """Attach the options shared by every analysis command."""
    options = [
        click.option(
            "--format",
            "output_format",
            type=click.Choice(["terminal", "json"], case_sensitive=False),
            default="terminal",
            help="Output format (default: terminal).",
        ),
        click.option(
            "--output",
            "-o",
            "output_path",
            type=click.Path(dir_okay=False),
            default=None,
            help="Write report to file instead of stdout.",
        ),
        click.option(
            "--verbose",
            "-v",
            "verbose_flag",
            is_flag=True,
            default=False,
            help="Show detailed information and debug logs.",
        ),
        click.option(
            "--quiet",
            "-q",
            "quiet_flag",
            is_flag=True,
            default=False,
            help="Suppress non-essential output.",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="Path to configuration file.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Check - Detect licenses and check them against a policy.

    Normalizes license identifiers, detects licenses from license text,
    evaluates allow/deny/copyleft policies and renders NOTICE files.
    Inputs are JSON documents read from a file or stdin ("-").

    \b
    Examples:
        license-check detect deps.json
        license-check detect --license-file LICENSE
        license-check check licenses.json --deny GPL-3.0 --no-copyleft
        license-check notice packages.json --project-name MyProject
    """
    pass


@main.command()
@click.argument("input_file", type=click.File("r"), required=False)
@click.option(
    "--license-file",
    "license_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="License file to analyze (repeatable).",
)
@_common_options
def detect(
    input_file: Optional[IO[str]],
    license_files: tuple[Path, ...],
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
) -> None:
    """Detect licenses for dependencies and license files.

    INPUT_FILE holds {"dependencies": [...], "files": [...]}.

    \b
    Examples:
        license-check detect deps.json
        license-check detect deps.json --format json
        license-check detect --license-file LICENSE --license-file COPYING
        cat deps.json | license-check detect -
    """
    options = _prepare(output_format, verbose_flag, quiet_flag)

    try:
        _load_config(config_path, options)
        payload = _read_payload(input_file) if input_file is not None else {}
        if license_files:
            payload = _with_license_files(payload, license_files)

        response = detect_licenses_tool(payload)
        _display_response(response, options, output_path)

        result = cast(DetectionResult, response.result)
        sys.exit(EXIT_ISSUES if result.unknown_count else EXIT_SUCCESS)

    except LicenseCheckError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("input_file", type=click.File("r"))
@click.option(
    "--allow",
    "allowed",
    multiple=True,
    help="Allowed license identifier (repeatable). Replaces the configured list.",
)
@click.option(
    "--deny",
    "denied",
    multiple=True,
    help="Denied license identifier (repeatable). Replaces the configured list.",
)
@click.option(
    "--copyleft/--no-copyleft",
    "copyleft_ok",
    default=None,
    help="Permit or forbid copyleft licenses.",
)
@_common_options
def check(
    input_file: IO[str],
    allowed: tuple[str, ...],
    denied: tuple[str, ...],
    copyleft_ok: Optional[bool],
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
) -> None:
    """Check licenses against an allow/deny/copyleft policy.

    INPUT_FILE holds {"licenses": [...], "policy": {...}}. A bare list of
    licenses, or the JSON output of "detect", is accepted as well. The
    policy is built from the configuration file, then the input's policy,
    then the command line options.

    \b
    Examples:
        license-check check licenses.json
        license-check check licenses.json --allow MIT --allow Apache-2.0
        license-check check licenses.json --deny GPL-3.0 --no-copyleft
        license-check detect deps.json --format json | license-check check -
    """
    options = _prepare(output_format, verbose_flag, quiet_flag)

    try:
        config = _load_config(config_path, options)
        payload = _compatibility_payload(_read_payload(input_file))

        cli_policy = Policy(
            allowed=list(allowed) if allowed else None,
            denied=list(denied) if denied else None,
            copyleft_ok=copyleft_ok,
        )
        payload["policy"] = _merge_policy(config, payload.get("policy"), cli_policy)

        response = check_compatibility_tool(payload)
        _display_response(response, options, output_path)

        result = cast(CompatibilityResult, response.result)
        sys.exit(EXIT_SUCCESS if result.compatible else EXIT_ISSUES)

    except LicenseCheckError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("input_file", type=click.File("r"))
@click.option(
    "--project-name",
    default=None,
    help="Project name for the NOTICE header.",
)
@_common_options
def notice(
    input_file: IO[str],
    project_name: Optional[str],
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
) -> None:
    """Generate a NOTICE file listing third-party licenses.

    INPUT_FILE holds {"licenses": [...], "project_name": "..."}.

    \b
    Examples:
        license-check notice packages.json
        license-check notice packages.json --project-name MyProject -o NOTICE
    """
    options = _prepare(output_format, verbose_flag, quiet_flag)

    try:
        config = _load_config(config_path, options)
        payload = _read_payload(input_file)
        if not isinstance(payload, dict):
            raise click.BadParameter("expected a JSON object", param_hint="INPUT_FILE")

        name = project_name or payload.get("project_name") or config.project_name
        if name:
            payload["project_name"] = name

        response = generate_notice_tool(payload)
        _display_response(response, options, output_path)
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command(name="tools")
def list_tools() -> None:
    """List the available tools and their descriptions."""
    for tool in TOOL_DEFINITIONS:
        _console.print(f"[bold cyan]{tool.name}[/bold cyan]")
        _console.print(tool.description, markup=False, highlight=False)
        _console.print("")


def _prepare(output_format: str, verbose_flag: bool, quiet_flag: bool) -> OutputOptions:
    """Validate flags, configure logging and build output options."""
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    configure_logging(verbose=verbose_flag, quiet=quiet_flag)

    format_value = cast(Literal["terminal", "json"], output_format.lower())
    return OutputOptions(format=format_value, verbosity=verbosity)


def _load_config(config_path: str | None, options: OutputOptions) -> CheckConfig:
    """Load configuration and apply its log level when no flag overrides it."""
    config = load_config(config_path)
    if config.log_level and options.verbosity == Verbosity.NORMAL:
        configure_logging(default_level=config.log_level)
    return config


def _read_payload(input_file: IO[str]) -> Any:
    """Decode the JSON document in an input file.

    Raises:
        ConfigurationError: If the content is not valid JSON.
    """
    content = input_file.read()
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        name = getattr(input_file, "name", "<input>")
        raise ConfigurationError(f"Invalid JSON in '{name}': {e}") from e


def _with_license_files(payload: Any, paths: tuple[Path, ...]) -> Any:
    """Add license files read from disk to a detect payload."""
    if not isinstance(payload, dict):
        return payload

    files = list(payload.get("files") or [])
    for path in paths:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ConfigurationError(f"Cannot read license file '{path}': {e}") from e
        files.append({"filename": path.name, "content": content})

    return {**payload, "files": files}


def _compatibility_payload(payload: Any) -> dict[str, Any]:
    """Normalize the accepted check input shapes to a request payload."""
    if isinstance(payload, list):
        return {"licenses": payload}
    if not isinstance(payload, dict):
        raise click.BadParameter("expected a JSON object or list", param_hint="INPUT_FILE")

    # Envelope from "detect --format json"
    if "ok" in payload and isinstance(payload.get("data"), dict):
        detected = payload["data"].get("detected") or []
        return {
            "licenses": [
                {"name": item.get("name"), "license_id": item.get("license_id")}
                for item in detected
            ]
        }

    return dict(payload)


def _merge_policy(
    config: CheckConfig, payload_policy: Any, cli_policy: Policy
) -> Any:
    """Layer config, input and command line policies.

    An invalid input policy is returned untouched so that validation reports it.
    """
    if payload_policy is not None and not isinstance(payload_policy, dict):
        return payload_policy

    input_policy = None
    if payload_policy:
        try:
            input_policy = Policy.model_validate(payload_policy)
        except ValueError:
            return payload_policy
    return layered_policy(config, input_policy, cli_policy).model_dump(exclude_none=True)


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {path}[/green]")


def _display_response(
    response: ApiResponse, options: OutputOptions, output_path: str | None = None
) -> None:
    """Display a tool response in the requested format.

    Failed responses are written to stderr and end the command with
    EXIT_ERROR.
    """
    if not response.ok:
        if options.format == "json":
            click.echo(response.to_json(), err=True)
        elif response.error is not None:
            error = response.error
            _error_console.print(
                f"[red bold]Error: {error.code.value}: {escape(error.message)}[/red bold]"
            )
            for item in (error.details or {}).get("errors", []):
                _error_console.print(f"  - {item['loc']}: {item['msg']}", markup=False)
        else:
            _error_console.print("[red bold]Error: request failed[/red bold]")
        sys.exit(EXIT_ERROR)

    if options.format == "json":
        content = response.to_json()
    elif isinstance(response.result, NoticeResult):
        content = response.result.notice_text
        if options.verbosity != Verbosity.QUIET:
            for warning in response.warnings:
                _error_console.print(f"[yellow]Warning: {escape(warning)}[/yellow]")
    elif output_path:
        # Terminal format to file uses JSON instead
        content = response.to_json()
    else:
        _render_terminal(response, options)
        return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _render_terminal(response: ApiResponse, options: OutputOptions) -> None:
    formatter = TerminalFormatter(console=_console, verbosity=options.verbosity)
    result = response.result
    if isinstance(result, DetectionResult):
        formatter.format_detection_result(result)
    elif isinstance(result, CompatibilityResult):
        formatter.format_compatibility_result(result)


def _display_error(error: LicenseCheckError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]", markup=True)
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
