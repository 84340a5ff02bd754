"""Response envelope models shared by all tool handlers."""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr

from license_check.constants import RESPONSE_SOURCE


class ErrorCode(str, Enum):
    """Error codes reported in failed responses."""

    INVALID_INPUT = "INVALID_INPUT"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    TIMEOUT = "TIMEOUT"
    PARSE_ERROR = "PARSE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorInfo(BaseModel):
    """Details of a failed call."""

    model_config = {"extra": "forbid"}

    code: ErrorCode = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None, description="Structured error details"
    )


class Pagination(BaseModel):
    """Pagination cursor; results are never paginated."""

    model_config = {"extra": "forbid"}

    next_cursor: Optional[str] = None


class ResponseMeta(BaseModel):
    """Metadata attached to every response."""

    model_config = {"extra": "forbid"}

    source: Optional[str] = Field(default=None, description="Producing service")
    retrieved_at: str = Field(description="ISO-8601 UTC timestamp")
    pagination: Optional[Pagination] = None
    warnings: Optional[list[str]] = Field(
        default=None, description="Non-blocking notices (None when there are none)"
    )


class ApiResponse(BaseModel):
    """Response envelope: either ok with data, or failed with an error."""

    model_config = {"extra": "forbid"}

    ok: bool
    data: Optional[dict[str, Any]] = None
    error: Optional[ErrorInfo] = None
    meta: ResponseMeta

    # Typed result behind data, for callers rendering it; never serialized
    _result: Optional[BaseModel] = PrivateAttr(default=None)

    @classmethod
    def success(
        cls,
        data: dict[str, Any],
        warnings: Optional[list[str]] = None,
        result: Optional[BaseModel] = None,
    ) -> ApiResponse:
        """Build a successful response.

        Args:
            data: JSON-ready result payload.
            warnings: Advisory notices; an empty list is reported as None.
            result: The typed result data was built from.

        Returns:
            ApiResponse with ok=True.
        """
        response = cls(
            ok=True,
            data=data,
            meta=ResponseMeta(
                source=RESPONSE_SOURCE,
                retrieved_at=_utc_timestamp(),
                pagination=Pagination(),
                warnings=list(warnings) if warnings else None,
            ),
        )
        response._result = result
        return response

    @classmethod
    def failure(
        cls,
        code: ErrorCode,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> ApiResponse:
        """Build a failed response.

        Args:
            code: Error code.
            message: Human-readable message.
            details: Optional structured details.

        Returns:
            ApiResponse with ok=False.
        """
        return cls(
            ok=False,
            error=ErrorInfo(code=code, message=message, details=details),
            meta=ResponseMeta(retrieved_at=_utc_timestamp()),
        )

    @property
    def result(self) -> Optional[BaseModel]:
        """Typed result of a successful call (None for failures)."""
        return self._result

    @property
    def warnings(self) -> list[str]:
        """Warnings from the metadata, or an empty list."""
        return self.meta.warnings or []

    def to_json(self) -> str:
        """Serialize the envelope as indented JSON."""
        return self.model_dump_json(indent=2)


def _utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
