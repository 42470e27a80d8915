"""Configuration resolution: raw mapping in, ResolvedConfig out."""

from collections.abc import Mapping, Sequence

import structlog

from harness.config.constants import (
    COMPONENT_CONFIG,
    FIELD_ROOT,
    KEY_ALIASES,
    KEY_COVERAGE_EXCLUSIONS,
    KEY_ENVIRONMENT,
    KEY_PRESET,
    KEY_TEST_EXCLUSIONS,
)
from harness.config.defaults import BUILTIN_DEFAULTS, HarnessDefaults
from harness.config.errors import (
    InvalidPatternError,
    MalformedFieldError,
    UnknownEnvironmentError,
)
from harness.config.patterns import runner_pattern_to_glob, validate_pattern
from harness.config.resolved import ResolvedConfig


logger = structlog.get_logger()

RECOGNIZED_KEYS = frozenset(
    [*KEY_ALIASES, *(alias for aliases in KEY_ALIASES.values() for alias in aliases)]
)


def _lookup(raw: Mapping[object, object], key: str) -> tuple[str, object] | None:
    """Find a field by canonical key, then by its aliases.

    A key explicitly set to None counts as absent.

    Returns:
        Tuple of (key the value was read from, value), or None if absent.
    """
    for candidate in (key, *KEY_ALIASES[key]):
        if candidate in raw and raw[candidate] is not None:
            return candidate, raw[candidate]
    return None


class ConfigResolver:
    """Validates and defaults raw configuration records.

    Resolution is a pure function of the raw record and the defaults table:
    no state is retained between calls, and either a complete ResolvedConfig
    is returned or a ConfigError is raised for the first invalid field.
    """

    def __init__(self, defaults: HarnessDefaults = BUILTIN_DEFAULTS) -> None:
        """Initialize the resolver.

        Args:
            defaults: Environment enumeration and fallback values.
        """
        self._defaults = defaults

    @property
    def defaults(self) -> HarnessDefaults:
        """Get the defaults table used for resolution."""
        return self._defaults

    def resolve(self, raw: Mapping[object, object]) -> ResolvedConfig:
        """Resolve a raw configuration record.

        Fields are processed in order: preset, environment, testExclusions,
        coverageExclusions. Supplied exclusion lists replace the built-in
        lists rather than extending them.

        Args:
            raw: Raw configuration mapping (untrusted).

        Returns:
            Immutable, fully defaulted configuration.

        Raises:
            MalformedFieldError: If the record or a field has the wrong shape.
            UnknownEnvironmentError: If the environment is not recognized.
            InvalidPatternError: If an exclusion pattern is not a valid glob.
        """
        if not isinstance(raw, Mapping):
            raise MalformedFieldError(
                FIELD_ROOT, f"expected a mapping, got {type(raw).__name__}"
            )

        unknown = [str(key) for key in raw if key not in RECOGNIZED_KEYS]
        if unknown:
            logger.warning(
                "config_unknown_option",
                component=COMPONENT_CONFIG,
                options=sorted(unknown),
            )

        resolved = ResolvedConfig(
            preset=self._resolve_preset(raw),
            environment=self._resolve_environment(raw),
            test_exclusions=self._resolve_exclusions(
                raw, KEY_TEST_EXCLUSIONS, self._defaults.default_test_exclusions
            ),
            coverage_exclusions=self._resolve_exclusions(
                raw,
                KEY_COVERAGE_EXCLUSIONS,
                self._defaults.default_coverage_exclusions,
            ),
        )

        logger.debug(
            "config_resolved",
            component=COMPONENT_CONFIG,
            preset=resolved.preset,
            environment=resolved.environment,
            test_exclusions_count=len(resolved.test_exclusions),
            coverage_exclusions_count=len(resolved.coverage_exclusions),
        )
        return resolved

    def _resolve_preset(self, raw: Mapping[object, object]) -> str | None:
        found = _lookup(raw, KEY_PRESET)
        if found is None:
            return self._defaults.default_preset
        key, value = found
        if not isinstance(value, str):
            raise MalformedFieldError(
                key, f"expected a string, got {type(value).__name__}"
            )
        if not value or any(char.isspace() for char in value):
            raise MalformedFieldError(
                key, "expected a non-empty identifier without whitespace"
            )
        return value

    def _resolve_environment(self, raw: Mapping[object, object]) -> str:
        found = _lookup(raw, KEY_ENVIRONMENT)
        if found is None:
            return self._defaults.default_environment
        key, value = found
        if not isinstance(value, str):
            raise MalformedFieldError(
                key, f"expected a string, got {type(value).__name__}"
            )
        if value not in self._defaults.environments:
            raise UnknownEnvironmentError(
                value, field=key, allowed=self._defaults.sorted_environments()
            )
        return value

    def _resolve_exclusions(
        self,
        raw: Mapping[object, object],
        field: str,
        default: tuple[str, ...],
    ) -> tuple[str, ...]:
        found = _lookup(raw, field)
        if found is None:
            return default
        key, value = found
        if not isinstance(value, Sequence) or isinstance(value, str | bytes):
            raise MalformedFieldError(
                key, f"expected a list of glob patterns, got {type(value).__name__}"
            )

        from_alias = key != field
        patterns: list[str] = []
        for index, entry in enumerate(value):
            pattern = runner_pattern_to_glob(entry) if from_alias else entry
            reason = validate_pattern(pattern)
            if reason is not None:
                shown = entry if isinstance(entry, str) else repr(entry)
                raise InvalidPatternError(shown, index, field=key, reason=reason)
            patterns.append(str(pattern))

        if from_alias and patterns != list(value):
            logger.debug(
                "config_alias_patterns_translated",
                component=COMPONENT_CONFIG,
                field=key,
                patterns=patterns,
            )
        return tuple(dict.fromkeys(patterns))


def resolve(
    raw: Mapping[object, object],
    defaults: HarnessDefaults = BUILTIN_DEFAULTS,
) -> ResolvedConfig:
    """Resolve a raw configuration record with the given defaults.

    Args:
        raw: Raw configuration mapping.
        defaults: Defaults table (built-in table when omitted).

    Returns:
        Immutable, fully defaulted configuration.
    """
    return ConfigResolver(defaults).resolve(raw)
