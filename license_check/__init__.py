"""License detection and policy compatibility checking."""

__version__ = "0.1.0"
