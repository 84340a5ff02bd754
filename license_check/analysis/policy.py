"""License policy evaluation for allow/deny/copyleft rules.

Each license runs through a fixed chain of rules. The first rule that
produces an outcome decides that license, so a license yields at most one
violation (e.g. a deny-listed copyleft license reports only the deny reason).

Rule order:

1. UNKNOWN license: violation with an allow-list, otherwise a review warning.
2. Deny-list match: violation.
3. Allow-list miss: violation.
4. Registered copyleft id while ``copyleft_ok`` is False: violation.
5. Attribution-required license: warning.

Limitations: no license-pair compatibility analysis (e.g. GPL + MIT
interaction) and no SPDX expression operators (OR, AND, WITH).
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Sequence

from license_check.constants import UNKNOWN_LICENSE
from license_check.exceptions import InvalidInputError
from license_check.logging import get_logger
from license_check.models.policy import (
    CompatibilityResult,
    LicenseInfo,
    Policy,
    Violation,
)
from license_check.registry import is_copyleft, requires_attribution

log = get_logger(__name__)

# License families whose -only / -or-later / bare forms are interchangeable
_VARIANT_FAMILIES = ("GPL-", "LGPL-", "AGPL-")
_ONLY_SUFFIX = "-only"
_OR_LATER_SUFFIX = "-or-later"


class RuleOutcome(NamedTuple):
    """Decision of a policy rule: exactly one of violation or warning is set."""

    violation: Optional[Violation] = None
    warning: Optional[str] = None


PolicyRule = Callable[[LicenseInfo, Policy], Optional[RuleOutcome]]


def license_variants(license_id: str) -> list[str]:
    """List identifiers considered equal to a license for list matching.

    GPL-family identifiers ending in ``-only`` also match the bare base,
    ``-or-later`` ones also match ``<base>+``, and bare ones also match
    their ``-only`` form.

    Args:
        license_id: License identifier.

    Returns:
        The identifier followed by its family variants.
    """
    variants = [license_id]
    upper = license_id.upper()

    if not upper.startswith(_VARIANT_FAMILIES):
        return variants

    if upper.endswith(_ONLY_SUFFIX.upper()):
        variants.append(license_id[: -len(_ONLY_SUFFIX)])
    elif upper.endswith(_OR_LATER_SUFFIX.upper()):
        variants.append(f"{license_id[: -len(_OR_LATER_SUFFIX)]}+")
    else:
        variants.append(f"{license_id}{_ONLY_SUFFIX}")

    return variants


def matches_license_list(license_id: str, licenses: Sequence[str]) -> bool:
    """Check if a license matches any entry of a policy list.

    Comparison is case-insensitive and considers family variants.
    """
    listed = {entry.strip().upper() for entry in licenses}
    return any(variant.upper() in listed for variant in license_variants(license_id))


def _check_unknown(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    if item.license_id != UNKNOWN_LICENSE:
        return None
    if policy.has_allow_list:
        return RuleOutcome(
            violation=Violation(
                name=item.name,
                license_id=item.license_id,
                reason="Unknown license cannot be verified against allowed list",
            )
        )
    return RuleOutcome(
        warning=(
            f"License for {item.display_name} is UNKNOWN - manual review recommended"
        )
    )


def _check_denied(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    if not policy.denied or not matches_license_list(item.license_id, policy.denied):
        return None
    return RuleOutcome(
        violation=Violation(
            name=item.name,
            license_id=item.license_id,
            reason=f'License "{item.license_id}" is in the denied list',
        )
    )


def _check_allowed(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    if not policy.allowed or matches_license_list(item.license_id, policy.allowed):
        return None
    return RuleOutcome(
        violation=Violation(
            name=item.name,
            license_id=item.license_id,
            reason=f'License "{item.license_id}" is not in the allowed list',
        )
    )


def _check_copyleft(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    # None means "not specified"; only an explicit False restricts copyleft.
    # Exact canonical ids only: a bare "GPL-3.0" is not flagged.
    if policy.copyleft_ok is not False or not is_copyleft(item.license_id):
        return None
    return RuleOutcome(
        violation=Violation(
            name=item.name,
            license_id=item.license_id,
            reason=(
                f'License "{item.license_id}" is a copyleft license '
                "and copyleft_ok is false"
            ),
        )
    )


def _check_attribution(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    if not requires_attribution(item.license_id):
        return None
    return RuleOutcome(
        warning=(
            f'License "{item.license_id}" for {item.display_name} '
            "requires attribution"
        )
    )


# Evaluated in order, first outcome wins
POLICY_RULES: tuple[PolicyRule, ...] = (
    _check_unknown,
    _check_denied,
    _check_allowed,
    _check_copyleft,
    _check_attribution,
)


def evaluate_license(item: LicenseInfo, policy: Policy) -> Optional[RuleOutcome]:
    """Run one license through the rule chain.

    Args:
        item: License to evaluate.
        policy: Policy rules.

    Returns:
        Outcome of the first applicable rule, or None if no rule applies.
    """
    for rule in POLICY_RULES:
        outcome = rule(item, policy)
        if outcome is not None:
            return outcome
    return None


def evaluate_policy(
    licenses: Sequence[LicenseInfo],
    policy: Policy,
) -> CompatibilityResult:
    """Check licenses against a policy.

    Args:
        licenses: Licenses to check (typically detection output).
        policy: Allow/deny/copyleft rules.

    Returns:
        CompatibilityResult; compatible is True when there are no violations.
        Warnings never affect the verdict.

    Raises:
        InvalidInputError: If no licenses are given.
    """
    if not licenses:
        raise InvalidInputError("At least one license is required")

    violations: list[Violation] = []
    warnings: list[str] = []

    for item in licenses:
        outcome = evaluate_license(item, policy)
        if outcome is None:
            continue
        if outcome.violation is not None:
            log.debug(
                "policy violation",
                subject=item.name,
                license_id=item.license_id,
                reason=outcome.violation.reason,
            )
            violations.append(outcome.violation)
        if outcome.warning is not None:
            warnings.append(outcome.warning)

    return CompatibilityResult(violations=violations, warnings=warnings)
