"""Configuration resolution module."""

from harness.config.defaults import BUILTIN_DEFAULTS, EnvironmentName, HarnessDefaults
from harness.config.errors import (
    ConfigError,
    ConfigErrorKind,
    InvalidPatternError,
    MalformedFieldError,
    UnknownEnvironmentError,
)
from harness.config.loader import ConfigLoader
from harness.config.overrides import apply_overrides
from harness.config.resolved import ResolvedConfig
from harness.config.resolver import ConfigResolver, resolve
from harness.config.state_machine import ConfigState, ConfigStateError


__all__ = [
    "BUILTIN_DEFAULTS",
    "ConfigError",
    "ConfigErrorKind",
    "ConfigLoader",
    "ConfigResolver",
    "ConfigState",
    "ConfigStateError",
    "EnvironmentName",
    "HarnessDefaults",
    "InvalidPatternError",
    "MalformedFieldError",
    "ResolvedConfig",
    "UnknownEnvironmentError",
    "apply_overrides",
    "resolve",
]
