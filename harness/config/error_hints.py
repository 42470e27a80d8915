"""Error hints for configuration errors.

Provides user-friendly hints with actionable remediation steps
for common configuration errors.
"""

from typing import Final

from harness.config.defaults import BUILTIN_DEFAULTS


# Mapping of error types to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    # Resolution errors (ConfigErrorKind values)
    "UnknownEnvironment": (
        "Use one of the recognized environments: "
        + ", ".join(BUILTIN_DEFAULTS.sorted_environments())
        + "."
    ),
    "InvalidPattern": (
        "Check the glob syntax: close every '[' with ']' and balance '{' and '}'."
    ),
    "MalformedField": "Check the value's type against the documented shape.",
    # File errors
    "file_not_found": "The file does not exist. Check the file path.",
    "yaml_parse_error": "Invalid YAML syntax. Check for proper indentation and formatting.",
    "json_parse_error": "Invalid JSON syntax. Check for missing commas or quotes.",
    "file_read_error": "The file could not be read. Check its permissions and that it is UTF-8 text.",
}

# Field-specific hints for more context
FIELD_HINTS: Final[dict[str, str]] = {
    "preset": "Must be a non-empty name without whitespace (e.g., 'ts-jest').",
    "environment": "Must be a string naming a recognized environment (e.g., 'node').",
    "testEnvironment": "Must be a string naming a recognized environment (e.g., 'node').",
    "testExclusions": "Must be a list of glob patterns (e.g., ['**/dist/**']).",
    "testPathIgnorePatterns": "Must be a list of path fragments or globs (e.g., ['/dist/']).",
    "coverageExclusions": "Must be a list of glob patterns (e.g., ['**/vendor/**']).",
    "coveragePathIgnorePatterns": "Must be a list of path fragments or globs (e.g., ['/vendor/']).",
    "<root>": "The configuration must be a mapping of option names to values.",
    "<file>": "Use a .yaml, .yml or .json configuration file.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a configuration error.

    Malformed fields get a field-specific hint; other error types are
    specific enough on their own.

    Args:
        error_type: The error kind or file error type (e.g., 'InvalidPattern').
        field_name: Optional field location (e.g., 'testExclusions.2').

    Returns:
        A user-friendly hint string.
    """
    if field_name and error_type == "MalformedField":
        # 'testExclusions.2' -> 'testExclusions'
        simple_field = field_name.split(".")[0]
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(
        error_type, "Check the configuration documentation for valid values."
    )


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a configuration error with optional hint.

    Args:
        location: The error location (e.g., 'testExclusions.0').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
