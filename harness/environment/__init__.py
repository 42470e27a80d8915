"""Execution environments."""

from harness.environment.registry import (
    BUILTIN_ENVIRONMENTS,
    EnvironmentRegistry,
    ExecutionEnvironment,
)


__all__ = ["BUILTIN_ENVIRONMENTS", "EnvironmentRegistry", "ExecutionEnvironment"]
