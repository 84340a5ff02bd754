"""License detection for license-check.

Resolves a license for each dependency or license file:

- Explicit identifiers are normalized through the alias table and the
  canonical registry.
- Free text is matched against an ordered list of license signatures,
  falling back to whole-word scans for canonical ids and aliases.

Heuristics and limitations:

- Signatures are literal phrases from standard license texts; modified or
  non-standard license text may go undetected.
- Compound expressions (e.g. "MIT OR Apache-2.0") are not parsed; an
  explicit compound identifier is passed through unchanged.
- Confidence levels: ``high`` when a full header or text signature matched
  (or a registered id was asserted), ``medium`` for partial phrases or
  unregistered asserted ids, ``low`` when only a name was mentioned.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from license_check.constants import (
    SOURCE_DEPENDENCY_METADATA,
    SOURCE_FILE_PREFIX,
    SOURCE_LICENSE_TEXT,
    SOURCE_NO_DATA,
    UNKNOWN_LICENSE,
)
from license_check.exceptions import InvalidInputError
from license_check.logging import get_logger
from license_check.models.detection import (
    Confidence,
    DependencyInput,
    DetectedLicense,
    DetectionResult,
    DetectRequest,
    FileInput,
)
from license_check.registry import (
    LICENSE_ALIASES,
    SPDX_LICENSE_IDS,
    canonical_license_id,
    is_registered,
)

log = get_logger(__name__)

# Case-insensitive; "." spans newlines so multi-line headers match
_SIGNATURE_FLAGS = re.IGNORECASE | re.DOTALL


class Signature(NamedTuple):
    """A text pattern that identifies a license."""

    pattern: re.Pattern[str]
    license_id: str
    confidence: Confidence


class TextMatch(NamedTuple):
    """Outcome of a successful text detection."""

    license_id: str
    confidence: Confidence


def _signature(pattern: str, license_id: str, confidence: Confidence) -> Signature:
    return Signature(re.compile(pattern, _SIGNATURE_FLAGS), license_id, confidence)


# Evaluated in order, first match wins. A signature must come before any
# later signature that would also match the text it identifies.
LICENSE_SIGNATURES: tuple[Signature, ...] = (
    # MIT
    _signature(r"Permission is hereby granted,?\s+free of charge", "MIT", Confidence.HIGH),
    _signature(r"MIT License", "MIT", Confidence.HIGH),
    # Apache-2.0
    _signature(r"Apache License[,\s]+Version 2\.0", "Apache-2.0", Confidence.HIGH),
    _signature(r"Licensed under the Apache License", "Apache-2.0", Confidence.MEDIUM),
    # BSD-3-Clause shares the BSD-2-Clause preamble and first two clauses
    _signature(r"BSD 3-Clause License", "BSD-3-Clause", Confidence.HIGH),
    _signature(
        r"Redistribution and use in source and binary forms"
        r".*?3\.\s*(?:Neither the name|The name)",
        "BSD-3-Clause",
        Confidence.HIGH,
    ),
    # BSD-2-Clause
    _signature(r"BSD 2-Clause License", "BSD-2-Clause", Confidence.HIGH),
    _signature(
        r"Redistribution and use in source and binary forms"
        r".*?2\.\s*Redistributions in binary form",
        "BSD-2-Clause",
        Confidence.HIGH,
    ),
    # 0BSD reuses the ISC permission sentence
    _signature(r"BSD Zero Clause License", "0BSD", Confidence.HIGH),
    # ISC
    _signature(r"ISC License", "ISC", Confidence.HIGH),
    _signature(
        r"Permission to use, copy, modify, and/or distribute this software",
        "ISC",
        Confidence.MEDIUM,
    ),
    # AGPL and LGPL texts also mention the GNU General Public License
    _signature(
        r"GNU AFFERO GENERAL PUBLIC LICENSE\s+Version 3", "AGPL-3.0-only", Confidence.HIGH
    ),
    _signature(
        r"GNU LESSER GENERAL PUBLIC LICENSE\s+Version 2\.1",
        "LGPL-2.1-only",
        Confidence.HIGH,
    ),
    _signature(
        r"GNU LESSER GENERAL PUBLIC LICENSE\s+Version 3", "LGPL-3.0-only", Confidence.HIGH
    ),
    # GPL
    _signature(
        r"GNU GENERAL PUBLIC LICENSE\s+Version 2,?\s", "GPL-2.0-only", Confidence.HIGH
    ),
    _signature(
        r"GNU GENERAL PUBLIC LICENSE\s+Version 3,?\s", "GPL-3.0-only", Confidence.HIGH
    ),
    # GNU notice headers ("either version 3 of the License"); only the first
    # "version" after the license name counts
    _signature(
        r"GNU Affero\s+General\s+Public\s+License(?:(?!version).)*?version 3\b",
        "AGPL-3.0-only",
        Confidence.HIGH,
    ),
    _signature(
        r"GNU Lesser\s+General\s+Public\s+License(?:(?!version).)*?version 2\.1\b",
        "LGPL-2.1-only",
        Confidence.HIGH,
    ),
    _signature(
        r"GNU Lesser\s+General\s+Public\s+License(?:(?!version).)*?version 3\b",
        "LGPL-3.0-only",
        Confidence.HIGH,
    ),
    _signature(
        r"GNU General\s+Public\s+License(?:(?!version).)*?version 2\b",
        "GPL-2.0-only",
        Confidence.HIGH,
    ),
    _signature(
        r"GNU General\s+Public\s+License(?:(?!version).)*?version 3\b",
        "GPL-3.0-only",
        Confidence.HIGH,
    ),
    # MPL-2.0
    _signature(r"Mozilla Public License[,\s]+Version 2\.0", "MPL-2.0", Confidence.HIGH),
    # Public domain dedications
    _signature(
        r"This is free and unencumbered software released into the public domain",
        "Unlicense",
        Confidence.HIGH,
    ),
    _signature(r"CC0 1\.0 Universal", "CC0-1.0", Confidence.HIGH),
    # Creative Commons (ShareAlike first)
    _signature(
        r"Attribution-ShareAlike 4\.0 International", "CC-BY-SA-4.0", Confidence.HIGH
    ),
    _signature(r"Attribution 4\.0 International", "CC-BY-4.0", Confidence.HIGH),
    # Others
    _signature(r"The Artistic License 2\.0", "Artistic-2.0", Confidence.HIGH),
    _signature(r"DO WHAT THE FUCK YOU WANT TO PUBLIC LICENSE", "WTFPL", Confidence.HIGH),
    _signature(r"zlib License", "Zlib", Confidence.HIGH),
    _signature(r"Boost Software License[,\s-]+Version 1\.0", "BSL-1.0", Confidence.HIGH),
    _signature(
        r"Eclipse Public License[,\s-]+v(?:ersion)?\s*2\.0", "EPL-2.0", Confidence.HIGH
    ),
    _signature(
        r"COMMON DEVELOPMENT AND DISTRIBUTION LICENSE.*?Version 1\.0",
        "CDDL-1.0",
        Confidence.HIGH,
    ),
)


def _word_pattern(token: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(token)}\b", re.IGNORECASE)


# Whole-word scanners for the low-confidence fallbacks, in registry order
_CANONICAL_ID_SCANNERS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (_word_pattern(license_id), license_id) for license_id in SPDX_LICENSE_IDS
)
_ALIAS_SCANNERS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (_word_pattern(alias), license_id) for alias, license_id in LICENSE_ALIASES.items()
)


def normalize_license_id(license_id: str) -> str:
    """Normalize a license identifier to its SPDX form.

    Tries an exact alias-table match first, then a case-insensitive match
    against the canonical registry. Anything else is returned trimmed but
    otherwise unchanged. Normalizing twice gives the same result.

    Args:
        license_id: License identifier, alias, or arbitrary license name.

    Returns:
        Canonical SPDX identifier, or the trimmed input if unrecognized.
    """
    trimmed = license_id.strip()

    alias_target = LICENSE_ALIASES.get(trimmed)
    if alias_target is not None:
        return alias_target

    canonical = canonical_license_id(trimmed)
    if canonical is not None:
        return canonical

    return trimmed


def detect_from_text(text: str) -> Optional[TextMatch]:
    """Detect a license from text content.

    Args:
        text: License text, file content, or any text mentioning a license.

    Returns:
        TextMatch with license id and confidence, or None if nothing matched.
    """
    for signature in LICENSE_SIGNATURES:
        if signature.pattern.search(text):
            return TextMatch(signature.license_id, signature.confidence)

    # Fallback: SPDX identifier mentioned as a word
    for pattern, license_id in _CANONICAL_ID_SCANNERS:
        if pattern.search(text):
            return TextMatch(license_id, Confidence.LOW)

    # Fallback: alias mentioned as a word
    for pattern, license_id in _ALIAS_SCANNERS:
        if pattern.search(text):
            return TextMatch(license_id, Confidence.LOW)

    return None


def _resolve_dependency(dep: DependencyInput) -> tuple[DetectedLicense, Optional[str]]:
    """Resolve the license of one dependency.

    Returns:
        The detected license record and an optional warning.
    """
    if dep.license_id and dep.license_id.strip():
        normalized = normalize_license_id(dep.license_id)
        confidence = Confidence.HIGH if is_registered(normalized) else Confidence.MEDIUM
        record = DetectedLicense(
            name=dep.name,
            version=dep.version,
            license_id=normalized,
            confidence=confidence,
            source=SOURCE_DEPENDENCY_METADATA,
        )
        return record, None

    if dep.license_text:
        match = detect_from_text(dep.license_text)
        if match is not None:
            record = DetectedLicense(
                name=dep.name,
                version=dep.version,
                license_id=match.license_id,
                confidence=match.confidence,
                source=SOURCE_LICENSE_TEXT,
            )
            return record, None

        record = DetectedLicense(
            name=dep.name,
            version=dep.version,
            license_id=UNKNOWN_LICENSE,
            confidence=Confidence.LOW,
            source=SOURCE_LICENSE_TEXT,
        )
        return record, (
            f"Could not detect license for {dep.display_name} from provided text"
        )

    record = DetectedLicense(
        name=dep.name,
        version=dep.version,
        license_id=UNKNOWN_LICENSE,
        confidence=Confidence.LOW,
        source=SOURCE_NO_DATA,
    )
    return record, f"No license information provided for {dep.display_name}"


def _resolve_file(file: FileInput) -> tuple[DetectedLicense, Optional[str]]:
    """Resolve the license declared by one license file."""
    source = f"{SOURCE_FILE_PREFIX}{file.filename}"
    match = detect_from_text(file.content)
    if match is not None:
        record = DetectedLicense(
            name=file.filename,
            license_id=match.license_id,
            confidence=match.confidence,
            source=source,
        )
        return record, None

    record = DetectedLicense(
        name=file.filename,
        license_id=UNKNOWN_LICENSE,
        confidence=Confidence.LOW,
        source=source,
    )
    return record, f"Could not detect license from file: {file.filename}"


def detect_licenses(request: DetectRequest) -> DetectionResult:
    """Detect licenses for dependencies and license files.

    Dependencies are processed before files; records keep input order.

    Args:
        request: Dependencies and/or files to analyze.

    Returns:
        DetectionResult with one record per input item and any warnings.

    Raises:
        InvalidInputError: If neither dependencies nor files are provided.
    """
    if not request.dependencies and not request.files:
        raise InvalidInputError("Either dependencies or files must be provided")

    detected: list[DetectedLicense] = []
    warnings: list[str] = []

    resolved = [_resolve_dependency(dep) for dep in request.dependencies or []]
    resolved += [_resolve_file(file) for file in request.files or []]

    for record, warning in resolved:
        log.debug(
            "license resolved",
            subject=record.name,
            license_id=record.license_id,
            confidence=record.confidence.value,
            source=record.source,
        )
        detected.append(record)
        if warning is not None:
            warnings.append(warning)

    return DetectionResult(detected=detected, warnings=warnings)
