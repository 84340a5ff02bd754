"""License analysis logic for license-check."""
from license_check.analysis.detector import (
    LICENSE_SIGNATURES,
    Signature,
    TextMatch,
    detect_from_text,
    detect_licenses,
    normalize_license_id,
)
from license_check.analysis.policy import (
    POLICY_RULES,
    RuleOutcome,
    evaluate_license,
    evaluate_policy,
    license_variants,
    matches_license_list,
)

__all__ = [
    "LICENSE_SIGNATURES",
    "POLICY_RULES",
    "RuleOutcome",
    "Signature",
    "TextMatch",
    "detect_from_text",
    "detect_licenses",
    "evaluate_license",
    "evaluate_policy",
    "license_variants",
    "matches_license_list",
    "normalize_license_id",
]
