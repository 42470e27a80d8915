"""Source transformation presets."""

from harness.transform.protocols import IdentityTransformer, SourceTransformer
from harness.transform.registry import PresetLookup, PresetNotFoundError, PresetRegistry


__all__ = [
    "IdentityTransformer",
    "PresetLookup",
    "PresetNotFoundError",
    "PresetRegistry",
    "SourceTransformer",
]
