"""Constants for license-check."""

# Exit codes
EXIT_SUCCESS = 0  # No issues found
EXIT_ISSUES = 1  # Policy violations or undetected licenses
EXIT_ERROR = 2  # Invalid input or internal failure

# Identifier recorded when no license could be determined
UNKNOWN_LICENSE = "UNKNOWN"

# Source tag reported in response metadata
RESPONSE_SOURCE = "license-check"

# Provenance tags for detected licenses
SOURCE_DEPENDENCY_METADATA = "dependency_metadata"
SOURCE_LICENSE_TEXT = "license_text_analysis"
SOURCE_NO_DATA = "no_data"
SOURCE_FILE_PREFIX = "file:"

# Legal disclaimer for terminal display
LEGAL_DISCLAIMER_SHORT = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice."
)
