"""Resolved configuration shared by all harness stages."""

import hashlib
import json

from pydantic import BaseModel, ConfigDict, Field

from harness.config.constants import (
    KEY_COVERAGE_EXCLUSIONS,
    KEY_ENVIRONMENT,
    KEY_PRESET,
    KEY_TEST_EXCLUSIONS,
)


class ResolvedConfig(BaseModel):
    """Fully defaulted, validated configuration for a test run.

    This represents the immutable configuration that is shared read-only
    by file discovery, the transformation pipeline, the coverage collector
    and the execution environment. Once created, it cannot be modified.

    Attributes:
        preset: Source-transformation preset name, None for no transformation.
        environment: Execution environment every test file runs under.
        test_exclusions: Patterns removing files from test discovery.
        coverage_exclusions: Patterns removing files from instrumentation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    preset: str | None = None
    environment: str
    test_exclusions: tuple[str, ...] = Field(alias=KEY_TEST_EXCLUSIONS)
    coverage_exclusions: tuple[str, ...] = Field(alias=KEY_COVERAGE_EXCLUSIONS)

    def to_raw(self) -> dict[str, object]:
        """Convert back to a raw configuration mapping.

        Resolving the returned mapping yields an equal ResolvedConfig.
        Fields holding their absent value are omitted.

        Returns:
            Raw configuration keyed by canonical key names.
        """
        raw: dict[str, object] = {
            KEY_ENVIRONMENT: self.environment,
            KEY_TEST_EXCLUSIONS: list(self.test_exclusions),
            KEY_COVERAGE_EXCLUSIONS: list(self.coverage_exclusions),
        }
        if self.preset is not None:
            raw[KEY_PRESET] = self.preset
        return raw

    def to_normalized_json(self) -> str:
        """Convert to normalized JSON with stable ordering.

        Returns:
            JSON string with sorted keys.
        """
        return json.dumps(self.to_raw(), sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of normalized configuration.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

    def summary(self) -> dict[str, object]:
        """Get a summary of the resolved configuration.

        Returns:
            Dictionary with summary information.
        """
        return {
            "preset": self.preset,
            "environment": self.environment,
            "test_exclusions_count": len(self.test_exclusions),
            "coverage_exclusions_count": len(self.coverage_exclusions),
            "config_checksum": self.compute_checksum(),
        }
