"""Built-in default tables for configuration resolution."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EnvironmentName(str, Enum):
    """Execution environments recognized by the harness.

    - NODE: server-process-like runtime
    - JSDOM: browser-like DOM emulation
    - BUN: lightweight runtime
    """

    NODE = "node"
    JSDOM = "jsdom"
    BUN = "bun"


# Dependency directory and build-output directory trees
DEFAULT_EXCLUSIONS: tuple[str, ...] = ("**/node_modules/**", "**/lib/**")


class HarnessDefaults(BaseModel):
    """Immutable defaults and enumerations used by the resolver.

    Attributes:
        environments: Recognized environment names.
        default_environment: Environment used when none is configured.
        default_preset: Preset used when none is configured (None = identity).
        default_test_exclusions: Fallback test-discovery exclusion patterns.
        default_coverage_exclusions: Fallback coverage exclusion patterns.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    environments: Annotated[frozenset[str], Field(min_length=1)] = frozenset(
        env.value for env in EnvironmentName
    )
    default_environment: str = EnvironmentName.NODE.value
    default_preset: str | None = None
    default_test_exclusions: tuple[str, ...] = DEFAULT_EXCLUSIONS
    default_coverage_exclusions: tuple[str, ...] = DEFAULT_EXCLUSIONS

    @model_validator(mode="after")
    def validate_default_environment(self) -> "HarnessDefaults":
        """Ensure the default environment is one of the recognized values."""
        if self.default_environment not in self.environments:
            msg = (
                f"Default environment '{self.default_environment}' "
                "is not a recognized environment"
            )
            raise ValueError(msg)
        return self

    def sorted_environments(self) -> list[str]:
        """Get recognized environments in stable order."""
        return sorted(self.environments)


BUILTIN_DEFAULTS = HarnessDefaults()
