"""Tool handlers wrapping the core operations in the response envelope.

Each handler accepts an untrusted payload (decoded JSON), validates it,
runs the core operation and returns an :class:`ApiResponse`. Handlers never
raise: validation problems become ``INVALID_INPUT`` responses and any other
failure becomes an ``INTERNAL_ERROR`` response.
"""
from __future__ import annotations

from typing import Any, Callable, NamedTuple, TypeVar

from pydantic import BaseModel, ValidationError

from license_check.analysis.detector import detect_licenses
from license_check.analysis.policy import evaluate_policy
from license_check.exceptions import InvalidInputError
from license_check.logging import get_logger
from license_check.models.detection import DetectRequest
from license_check.models.envelope import ApiResponse, ErrorCode
from license_check.models.notice import NoticeRequest
from license_check.models.policy import CompatibilityRequest
from license_check.output.notice import NoticeFormatter

log = get_logger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

# Operation result: (JSON-ready data, warnings, typed result)
ToolOutput = tuple[dict[str, Any], list[str], BaseModel]


class ToolDefinition(NamedTuple):
    """A callable tool with its input model and description."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], ApiResponse]


def validation_error_details(error: ValidationError) -> dict[str, Any]:
    """Flatten pydantic validation errors for the error envelope.

    Args:
        error: The pydantic ValidationError.

    Returns:
        ``{"errors": [{"loc": "dependencies.0.name", "msg": "..."}]}``
    """
    errors = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        errors.append({"loc": loc, "msg": err["msg"]})
    return {"errors": errors}


def _run_tool(
    name: str,
    model: type[RequestT],
    payload: Any,
    operation: Callable[[RequestT], ToolOutput],
) -> ApiResponse:
    try:
        request = model.model_validate(payload)
    except ValidationError as e:
        return ApiResponse.failure(
            ErrorCode.INVALID_INPUT,
            f"Invalid input for {name}",
            validation_error_details(e),
        )

    try:
        data, warnings, result = operation(request)
    except InvalidInputError as e:
        return ApiResponse.failure(
            ErrorCode.INVALID_INPUT,
            f"Invalid input for {name}",
            {"errors": [{"loc": "root", "msg": str(e)}], **e.details},
        )
    except Exception as e:  # noqa: BLE001 - reported as INTERNAL_ERROR
        log.exception("tool failed", tool=name)
        return ApiResponse.failure(
            ErrorCode.INTERNAL_ERROR,
            str(e) or f"Unknown error during {name}",
            {"type": type(e).__name__},
        )

    return ApiResponse.success(data, warnings, result)


def _detect(request: DetectRequest) -> ToolOutput:
    result = detect_licenses(request)
    data = result.model_dump(mode="json", include={"detected"})
    return data, result.warnings, result


def _check(request: CompatibilityRequest) -> ToolOutput:
    result = evaluate_policy(request.licenses, request.policy)
    return result.model_dump(mode="json"), result.warnings, result


def _notice(request: NoticeRequest) -> ToolOutput:
    result = NoticeFormatter().format_notice(request)
    data = result.model_dump(mode="json", include={"notice_text"})
    return data, result.warnings, result


def detect_licenses_tool(payload: Any) -> ApiResponse:
    """Detect licenses from a dependencies list and/or file contents."""
    return _run_tool("detect_licenses", DetectRequest, payload, _detect)


def check_compatibility_tool(payload: Any) -> ApiResponse:
    """Check licenses against an allow/deny/copyleft policy."""
    return _run_tool("check_compatibility", CompatibilityRequest, payload, _check)


def generate_notice_tool(payload: Any) -> ApiResponse:
    """Render a NOTICE file for a list of packages."""
    return _run_tool("generate_notice", NoticeRequest, payload, _notice)


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="detect_licenses",
        description="""Detect licenses from dependencies list or file contents.

INPUT OPTIONS:
- dependencies: Array of { name, version?, license_text?, license_id? }
  - If license_id is provided, it will be normalized to SPDX format
  - If license_text is provided, pattern matching will detect the license
- files: Array of { filename, content } to analyze LICENSE/COPYING files

OUTPUT:
- detected: Array of { name, version?, license_id, confidence, source }
  - confidence: "high" | "medium" | "low"
  - source: "dependency_metadata" | "license_text_analysis" | "no_data" | "file:{filename}"

LIMITATIONS:
- Uses heuristic pattern matching, not authoritative license verification
- May not detect modified or non-standard license text
- SPDX compound expressions (e.g., "MIT OR Apache-2.0") are not parsed""",
        input_model=DetectRequest,
        handler=detect_licenses_tool,
    ),
    ToolDefinition(
        name="check_compatibility",
        description="""Check if detected licenses are compatible with a target policy.

INPUT:
- licenses: Array of { name?, license_id } to check
- policy: {
    allowed?: string[]     - Whitelist of permitted licenses (if set, only these are allowed)
    denied?: string[]      - Blacklist of forbidden licenses
    copyleft_ok?: boolean  - If false, copyleft licenses (GPL, LGPL, AGPL, etc.) violate policy
  }

OUTPUT:
- compatible: boolean - true if no violations found
- violations: Array of { name?, license_id, reason } describing policy breaches
- warnings: Array of strings with non-blocking notices

LIMITATIONS:
- Does NOT perform full license compatibility analysis between licenses
- Does NOT parse SPDX expression operators (OR, AND, WITH)
- UNKNOWN licenses are violations when using allowed list""",
        input_model=CompatibilityRequest,
        handler=check_compatibility_tool,
    ),
    ToolDefinition(
        name="generate_notice",
        description="""Generate a NOTICE file content summarizing all licenses and attributions.

INPUT:
- licenses: Array of { name, version?, license_id, copyright?, url? }
- project_name?: string - Name to include in header

OUTPUT:
- notice_text: Formatted NOTICE file content""",
        input_model=NoticeRequest,
        handler=generate_notice_tool,
    ),
)


def get_tool(name: str) -> ToolDefinition:
    """Look up a tool definition by name.

    Raises:
        KeyError: If no tool has that name.
    """
    for tool in TOOL_DEFINITIONS:
        if tool.name == name:
            return tool
    raise KeyError(name)


def call_tool(name: str, payload: Any) -> ApiResponse:
    """Invoke a tool by name.

    Args:
        name: Tool name (see TOOL_DEFINITIONS).
        payload: Decoded JSON payload.

    Raises:
        KeyError: If no tool has that name.
    """
    return get_tool(name).handler(payload)
