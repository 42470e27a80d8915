"""Constants for the configuration module."""

from typing import Final


# Canonical raw configuration keys
KEY_PRESET = "preset"
KEY_ENVIRONMENT = "environment"
KEY_TEST_EXCLUSIONS = "testExclusions"
KEY_COVERAGE_EXCLUSIONS = "coverageExclusions"

# Keys accepted for configs written against the JavaScript test runner
KEY_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    KEY_PRESET: (),
    KEY_ENVIRONMENT: ("testEnvironment",),
    KEY_TEST_EXCLUSIONS: ("testPathIgnorePatterns",),
    KEY_COVERAGE_EXCLUSIONS: ("coveragePathIgnorePatterns",),
}

# Pseudo field names used in error locations
FIELD_ROOT = "<root>"
FIELD_FILE = "<file>"

# Validation result values
VALIDATION_PASSED = "PASSED"
VALIDATION_FAILED = "FAILED"

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"
COMPONENT_PLANNER = "planner"

# Supported config file suffixes
YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)
