"""Error types for configuration resolution."""

from enum import Enum


class ConfigErrorKind(str, Enum):
    """Classification of configuration errors.

    - UNKNOWN_ENVIRONMENT: environment not in the recognized enumeration
    - INVALID_PATTERN: a glob pattern fails syntax validation
    - MALFORMED_FIELD: a field has the wrong shape
    """

    UNKNOWN_ENVIRONMENT = "UnknownEnvironment"
    INVALID_PATTERN = "InvalidPattern"
    MALFORMED_FIELD = "MalformedField"


class ConfigError(Exception):
    """Base exception for configuration errors.

    Provides structured error information for logging and CLI reporting.
    """

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        field: str,
        details: dict[str, str | int | None] | None = None,
    ) -> None:
        """Initialize the configuration error.

        Args:
            kind: Classification of the error.
            message: Human-readable error message.
            field: Raw configuration key the error relates to.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field
        self.details = details or {}

    @property
    def location(self) -> str:
        """Dotted location of the error (e.g. 'testExclusions.2')."""
        return self.field

    def to_dict(self) -> dict[str, str | dict[str, str | int | None]]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field": self.field,
            "details": self.details,
        }


class UnknownEnvironmentError(ConfigError):
    """Raised when the configured environment is not recognized."""

    def __init__(self, value: str, field: str, allowed: list[str]) -> None:
        """Initialize the error.

        Args:
            value: The unrecognized environment value.
            field: Raw key the value was read from.
            allowed: Recognized environment names.
        """
        super().__init__(
            ConfigErrorKind.UNKNOWN_ENVIRONMENT,
            f"Unknown environment '{value}' (expected one of: {', '.join(allowed)})",
            field=field,
            details={"value": value},
        )
        self.value = value
        self.allowed = allowed


class InvalidPatternError(ConfigError):
    """Raised when an exclusion pattern is not a valid glob."""

    def __init__(self, pattern: str, index: int, field: str, reason: str) -> None:
        """Initialize the error.

        Args:
            pattern: The offending pattern (repr for non-string entries).
            index: Position of the pattern in the input sequence.
            field: Raw key of the exclusion list.
            reason: Why the pattern was rejected.
        """
        super().__init__(
            ConfigErrorKind.INVALID_PATTERN,
            f"Invalid pattern {pattern!r} at {field}[{index}]: {reason}",
            field=field,
            details={"pattern": pattern, "index": index, "reason": reason},
        )
        self.pattern = pattern
        self.index = index
        self.reason = reason

    @property
    def location(self) -> str:
        """Dotted location including the pattern index."""
        return f"{self.field}.{self.index}"


class MalformedFieldError(ConfigError):
    """Raised when a field has the wrong shape."""

    def __init__(self, field: str, reason: str) -> None:
        """Initialize the error.

        Args:
            field: Raw key of the malformed field.
            reason: Description of the expected shape.
        """
        super().__init__(
            ConfigErrorKind.MALFORMED_FIELD,
            f"Malformed field '{field}': {reason}",
            field=field,
            details={"reason": reason},
        )
        self.reason = reason
