"""Basic package tests for license-check."""


def test_package_imports() -> None:
    """Test that the main package can be imported."""
    import license_check

    assert license_check.__version__ == "0.1.0"


def test_cli_imports() -> None:
    """Test that the CLI module can be imported."""
    from license_check.cli import main

    assert main is not None


def test_subpackages_import() -> None:
    """Test that all subpackages can be imported."""
    import license_check.analysis
    import license_check.config
    import license_check.models
    import license_check.output

    assert license_check.analysis is not None
    assert license_check.config is not None
    assert license_check.models is not None
    assert license_check.output is not None
