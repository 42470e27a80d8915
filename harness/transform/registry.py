"""Preset registry with result-returning lookup."""

from dataclasses import dataclass
from typing import cast

import structlog

from harness.config.resolved import ResolvedConfig
from harness.transform.protocols import IdentityTransformer, SourceTransformer


logger = structlog.get_logger()


class PresetNotFoundError(Exception):
    """Raised when a configured preset is not registered."""

    def __init__(self, preset: str, available: list[str]) -> None:
        """Initialize the error.

        Args:
            preset: The preset name that was looked up.
            available: Registered preset names.
        """
        self.preset = preset
        self.available = available
        listed = ", ".join(available) if available else "none registered"
        super().__init__(f"Preset '{preset}' not found (available: {listed})")


@dataclass(frozen=True)
class PresetLookup:
    """Outcome of looking up a preset.

    Exactly one of ``transformer`` and ``error`` is set.
    """

    preset: str | None
    transformer: SourceTransformer | None = None
    error: PresetNotFoundError | None = None

    @property
    def ok(self) -> bool:
        """Check whether the lookup found a transformer."""
        return self.error is None

    def unwrap(self) -> SourceTransformer:
        """Get the transformer.

        Raises:
            PresetNotFoundError: If the lookup failed.
        """
        if self.error is not None:
            raise self.error
        return cast(SourceTransformer, self.transformer)


class PresetRegistry:
    """Maps preset names to source transformers.

    Preset existence is checked here at first use, not during config
    resolution.
    """

    def __init__(self) -> None:
        self._transformers: dict[str, SourceTransformer] = {}
        self._identity = IdentityTransformer()

    def register(self, name: str, transformer: SourceTransformer) -> None:
        """Register a transformer under a preset name.

        Args:
            name: Preset name.
            transformer: Transformer implementing SourceTransformer.

        Raises:
            ValueError: If the name is already registered.
        """
        if name in self._transformers:
            msg = f"Preset '{name}' is already registered"
            raise ValueError(msg)
        self._transformers[name] = transformer

    def names(self) -> list[str]:
        """Get registered preset names, sorted."""
        return sorted(self._transformers)

    def lookup(self, preset: str | None) -> PresetLookup:
        """Look up the transformer for a preset.

        Args:
            preset: Preset name, or None for no transformation.

        Returns:
            Lookup result; never raises for unknown presets.
        """
        if preset is None:
            return PresetLookup(preset=None, transformer=self._identity)
        transformer = self._transformers.get(preset)
        if transformer is None:
            logger.warning(
                "preset_not_found", preset=preset, available=self.names()
            )
            return PresetLookup(
                preset=preset, error=PresetNotFoundError(preset, self.names())
            )
        return PresetLookup(preset=preset, transformer=transformer)

    def transformer_for(self, config: ResolvedConfig) -> PresetLookup:
        """Look up the transformer selected by a resolved configuration."""
        return self.lookup(config.preset)
