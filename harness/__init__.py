"""Configuration resolution for a test-execution harness."""

__version__ = "0.1.0"
