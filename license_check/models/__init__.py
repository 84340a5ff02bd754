"""Pydantic data models for license-check."""

from license_check.models.config import CheckConfig
from license_check.models.detection import (
    Confidence,
    DependencyInput,
    DetectedLicense,
    DetectionResult,
    DetectRequest,
    FileInput,
)
from license_check.models.envelope import (
    ApiResponse,
    ErrorCode,
    ErrorInfo,
    Pagination,
    ResponseMeta,
)
from license_check.models.notice import NoticeRequest, NoticeResult, PackageLicense
from license_check.models.options import OutputOptions, Verbosity
from license_check.models.policy import (
    CompatibilityRequest,
    CompatibilityResult,
    LicenseInfo,
    Policy,
    Violation,
)

__all__ = [
    "ApiResponse",
    "CheckConfig",
    "CompatibilityRequest",
    "CompatibilityResult",
    "Confidence",
    "DependencyInput",
    "DetectRequest",
    "DetectedLicense",
    "DetectionResult",
    "ErrorCode",
    "ErrorInfo",
    "FileInput",
    "LicenseInfo",
    "NoticeRequest",
    "NoticeResult",
    "OutputOptions",
    "PackageLicense",
    "Pagination",
    "Policy",
    "ResponseMeta",
    "Verbosity",
    "Violation",
]
