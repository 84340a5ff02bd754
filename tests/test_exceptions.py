"""Tests for custom exceptions."""

import pytest

from license_check.exceptions import (
    ConfigurationError,
    InvalidInputError,
    LicenseCheckError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_license_check_error_is_exception(self) -> None:
        """Test that LicenseCheckError inherits from Exception."""
        assert issubclass(LicenseCheckError, Exception)

    def test_invalid_input_error_inherits_from_base(self) -> None:
        """Test that InvalidInputError inherits from LicenseCheckError."""
        assert issubclass(InvalidInputError, LicenseCheckError)

    def test_configuration_error_inherits_from_base(self) -> None:
        """Test that ConfigurationError inherits from LicenseCheckError."""
        assert issubclass(ConfigurationError, LicenseCheckError)

    def test_configuration_error_can_be_raised(self) -> None:
        """Test that ConfigurationError can be raised with a message."""
        with pytest.raises(LicenseCheckError, match="Invalid config file"):
            raise ConfigurationError("Invalid config file")


class TestInvalidInputError:
    """Tests for InvalidInputError details."""

    def test_details_default_to_empty(self) -> None:
        """Test that details default to an empty dict."""
        error = InvalidInputError("At least one license is required")

        assert str(error) == "At least one license is required"
        assert error.details == {}

    def test_details_are_kept(self) -> None:
        """Test that structured details are stored."""
        error = InvalidInputError("bad", {"field": "licenses"})

        assert error.details == {"field": "licenses"}
