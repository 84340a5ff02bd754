"""Static license reference data for license-check.

Holds the canonical SPDX identifiers the tool recognizes, the alias table
used to normalize free-form license names, and the copyleft and
attribution-required sets. Everything here is built once on import and is
read-only afterwards.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

# Canonical SPDX identifiers, in the order fallback text scanning tries them
SPDX_LICENSE_IDS: tuple[str, ...] = (
    "MIT",
    "Apache-2.0",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "GPL-2.0-only",
    "GPL-2.0-or-later",
    "GPL-3.0-only",
    "GPL-3.0-or-later",
    "LGPL-2.1-only",
    "LGPL-2.1-or-later",
    "LGPL-3.0-only",
    "LGPL-3.0-or-later",
    "ISC",
    "MPL-2.0",
    "AGPL-3.0-only",
    "AGPL-3.0-or-later",
    "Unlicense",
    "CC0-1.0",
    "CC-BY-4.0",
    "CC-BY-SA-4.0",
    "Artistic-2.0",
    "WTFPL",
    "Zlib",
    "BSL-1.0",
    "EPL-2.0",
    "CDDL-1.0",
    "0BSD",
)

# Free-form license names mapped to canonical identifiers (keys are case-sensitive)
LICENSE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "MIT License": "MIT",
        "The MIT License": "MIT",
        "Apache License 2.0": "Apache-2.0",
        "Apache License, Version 2.0": "Apache-2.0",
        "Apache-2": "Apache-2.0",
        "Apache 2.0": "Apache-2.0",
        "BSD-2": "BSD-2-Clause",
        "BSD 2-Clause": "BSD-2-Clause",
        "Simplified BSD License": "BSD-2-Clause",
        "BSD-3": "BSD-3-Clause",
        "BSD 3-Clause": "BSD-3-Clause",
        "New BSD License": "BSD-3-Clause",
        "Modified BSD License": "BSD-3-Clause",
        "GPL-2.0": "GPL-2.0-only",
        "GPLv2": "GPL-2.0-only",
        "GNU GPL v2": "GPL-2.0-only",
        "GPL-3.0": "GPL-3.0-only",
        "GPLv3": "GPL-3.0-only",
        "GNU GPL v3": "GPL-3.0-only",
        "LGPL-2.1": "LGPL-2.1-only",
        "LGPLv2.1": "LGPL-2.1-only",
        "LGPL-3.0": "LGPL-3.0-only",
        "LGPLv3": "LGPL-3.0-only",
        "MPL 2.0": "MPL-2.0",
        "Mozilla Public License 2.0": "MPL-2.0",
        "AGPL-3.0": "AGPL-3.0-only",
        "AGPLv3": "AGPL-3.0-only",
        "Public Domain": "Unlicense",
        "CC0": "CC0-1.0",
        "Creative Commons Zero": "CC0-1.0",
    }
)

# Licenses requiring derivative works to use the same (or compatible) terms
COPYLEFT_LICENSES: frozenset[str] = frozenset(
    {
        # Strong copyleft - GPL/AGPL variants
        "GPL-2.0-only",
        "GPL-2.0-or-later",
        "GPL-3.0-only",
        "GPL-3.0-or-later",
        "AGPL-3.0-only",
        "AGPL-3.0-or-later",
        # Weak copyleft
        "LGPL-2.1-only",
        "LGPL-2.1-or-later",
        "LGPL-3.0-only",
        "LGPL-3.0-or-later",
        "MPL-2.0",
        "EPL-2.0",
        "CDDL-1.0",
        # Share-alike content license
        "CC-BY-SA-4.0",
    }
)

# Licenses requiring attribution in derived works
ATTRIBUTION_REQUIRED_LICENSES: frozenset[str] = frozenset(
    {
        "MIT",
        "Apache-2.0",
        "BSD-2-Clause",
        "BSD-3-Clause",
        "ISC",
        "CC-BY-4.0",
        "CC-BY-SA-4.0",
        "BSL-1.0",
        "Artistic-2.0",
        "Zlib",
    }
)

# Human-readable names used when rendering NOTICE files
LICENSE_FULL_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "MIT": "MIT License",
        "Apache-2.0": "Apache License 2.0",
        "BSD-2-Clause": 'BSD 2-Clause "Simplified" License',
        "BSD-3-Clause": 'BSD 3-Clause "New" or "Revised" License',
        "ISC": "ISC License",
        "GPL-2.0-only": "GNU General Public License v2.0 only",
        "GPL-2.0-or-later": "GNU General Public License v2.0 or later",
        "GPL-3.0-only": "GNU General Public License v3.0 only",
        "GPL-3.0-or-later": "GNU General Public License v3.0 or later",
        "LGPL-2.1-only": "GNU Lesser General Public License v2.1 only",
        "LGPL-2.1-or-later": "GNU Lesser General Public License v2.1 or later",
        "LGPL-3.0-only": "GNU Lesser General Public License v3.0 only",
        "LGPL-3.0-or-later": "GNU Lesser General Public License v3.0 or later",
        "AGPL-3.0-only": "GNU Affero General Public License v3.0 only",
        "AGPL-3.0-or-later": "GNU Affero General Public License v3.0 or later",
        "MPL-2.0": "Mozilla Public License 2.0",
        "Unlicense": "The Unlicense",
        "CC0-1.0": "Creative Commons Zero v1.0 Universal",
        "CC-BY-4.0": "Creative Commons Attribution 4.0 International",
        "CC-BY-SA-4.0": "Creative Commons Attribution-ShareAlike 4.0 International",
        "BSL-1.0": "Boost Software License 1.0",
        "EPL-2.0": "Eclipse Public License 2.0",
        "CDDL-1.0": "Common Development and Distribution License 1.0",
        "Artistic-2.0": "Artistic License 2.0",
        "WTFPL": "Do What The F*ck You Want To Public License",
        "Zlib": "zlib License",
        "0BSD": "BSD Zero Clause License",
    }
)

# Upper-cased canonical id -> canonical id, for case-insensitive lookups
_CANONICAL_BY_UPPER: Mapping[str, str] = MappingProxyType(
    {license_id.upper(): license_id for license_id in SPDX_LICENSE_IDS}
)


def canonical_license_id(license_id: Optional[str]) -> Optional[str]:
    """Return the canonical casing of a registered license identifier.

    Args:
        license_id: License identifier in any casing, or None.

    Returns:
        The registered identifier (e.g. "Apache-2.0" for "apache-2.0"),
        or None if the identifier is not registered.
    """
    if not license_id:
        return None
    return _CANONICAL_BY_UPPER.get(license_id.strip().upper())


def is_registered(license_id: Optional[str]) -> bool:
    """Check if a license identifier is a registered canonical id.

    Comparison is case-insensitive; the registry stores canonical casing.
    """
    return canonical_license_id(license_id) is not None


def is_copyleft(license_id: Optional[str]) -> bool:
    """Check if a license identifier is in the copyleft set."""
    return license_id in COPYLEFT_LICENSES


def requires_attribution(license_id: Optional[str]) -> bool:
    """Check if a license identifier requires attribution."""
    return license_id in ATTRIBUTION_REQUIRED_LICENSES


def license_full_name(license_id: str) -> str:
    """Get the human-readable name for a license identifier.

    Args:
        license_id: SPDX license identifier.

    Returns:
        Full license name, or the identifier itself when no name is known.
    """
    return LICENSE_FULL_NAMES.get(license_id, license_id)
