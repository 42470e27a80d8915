"""Execution environment descriptors."""

from typing import Final

from pydantic import BaseModel, ConfigDict

from harness.config.defaults import BUILTIN_DEFAULTS, EnvironmentName, HarnessDefaults
from harness.config.resolved import ResolvedConfig


class ExecutionEnvironment(BaseModel):
    """Simulated runtime context a test file executes under.

    Attributes:
        name: Environment name as it appears in configuration.
        description: Human-readable description.
        provides_dom: Whether a browser-like DOM is available to tests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    provides_dom: bool = False


BUILTIN_ENVIRONMENTS: Final[dict[str, ExecutionEnvironment]] = {
    EnvironmentName.NODE.value: ExecutionEnvironment(
        name=EnvironmentName.NODE.value,
        description="Server-process runtime",
    ),
    EnvironmentName.JSDOM.value: ExecutionEnvironment(
        name=EnvironmentName.JSDOM.value,
        description="Browser-like DOM emulation",
        provides_dom=True,
    ),
    EnvironmentName.BUN.value: ExecutionEnvironment(
        name=EnvironmentName.BUN.value,
        description="Lightweight runtime",
    ),
}


class EnvironmentRegistry:
    """Descriptors for every environment the harness recognizes."""

    def __init__(self, defaults: HarnessDefaults = BUILTIN_DEFAULTS) -> None:
        """Initialize the registry.

        Names recognized by ``defaults`` without a built-in descriptor get
        a generic one.

        Args:
            defaults: Defaults table holding the environment enumeration.
        """
        self._environments = {
            name: BUILTIN_ENVIRONMENTS.get(
                name, ExecutionEnvironment(name=name, description="Custom runtime")
            )
            for name in defaults.sorted_environments()
        }

    def names(self) -> list[str]:
        """Get recognized environment names, sorted."""
        return list(self._environments)

    def get(self, name: str) -> ExecutionEnvironment:
        """Get the descriptor for an environment.

        Raises:
            KeyError: If the name is not recognized.
        """
        return self._environments[name]

    def select(self, config: ResolvedConfig) -> ExecutionEnvironment:
        """Get the environment selected by a resolved configuration."""
        return self.get(config.environment)
