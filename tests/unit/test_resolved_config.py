"""Unit tests for ResolvedConfig."""

import json

import pytest
from pydantic import ValidationError

from harness.config.resolved import ResolvedConfig


@pytest.fixture
def config() -> ResolvedConfig:
    """Create a sample resolved configuration."""
    return ResolvedConfig(
        preset="ts-jest",
        environment="bun",
        test_exclusions=("**/node_modules/**", "**/lib/**"),
        coverage_exclusions=("**/node_modules/**",),
    )


class TestResolvedConfig:
    """Tests for ResolvedConfig model."""

    @pytest.mark.unit
    def test_is_immutable(self, config: ResolvedConfig) -> None:
        """Test that fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            config.environment = "node"  # type: ignore[misc]

    @pytest.mark.unit
    def test_rejects_extra_fields(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            ResolvedConfig(
                environment="node",
                test_exclusions=(),
                coverage_exclusions=(),
                verbose=True,  # type: ignore[call-arg]
            )

    @pytest.mark.unit
    def test_accepts_canonical_aliases(self) -> None:
        """Test construction from canonical raw key names."""
        config = ResolvedConfig.model_validate(
            {
                "environment": "node",
                "testExclusions": ["a/**"],
                "coverageExclusions": [],
            }
        )
        assert config.test_exclusions == ("a/**",)
        assert config.coverage_exclusions == ()

    @pytest.mark.unit
    def test_is_hashable(self, config: ResolvedConfig) -> None:
        """Test that frozen configs can be used as dict keys."""
        assert {config: 1}[config] == 1


class TestToRaw:
    """Tests for serialization back to raw form."""

    @pytest.mark.unit
    def test_uses_canonical_keys(self, config: ResolvedConfig) -> None:
        """Test that to_raw emits canonical keys and lists."""
        assert config.to_raw() == {
            "preset": "ts-jest",
            "environment": "bun",
            "testExclusions": ["**/node_modules/**", "**/lib/**"],
            "coverageExclusions": ["**/node_modules/**"],
        }

    @pytest.mark.unit
    def test_omits_absent_preset(self) -> None:
        """Test that a None preset is left out."""
        config = ResolvedConfig(
            environment="node", test_exclusions=(), coverage_exclusions=()
        )
        assert "preset" not in config.to_raw()


class TestChecksum:
    """Tests for normalized JSON and checksums."""

    @pytest.mark.unit
    def test_normalized_json_sorted(self, config: ResolvedConfig) -> None:
        """Test that normalized JSON has sorted keys and no whitespace."""
        normalized = config.to_normalized_json()
        assert " " not in normalized
        assert list(json.loads(normalized)) == sorted(json.loads(normalized))

    @pytest.mark.unit
    def test_checksum_stable(self, config: ResolvedConfig) -> None:
        """Test that repeated checksums are identical."""
        assert config.compute_checksum() == config.compute_checksum()
        assert len(config.compute_checksum()) == 64

    @pytest.mark.unit
    def test_checksum_changes_with_content(self, config: ResolvedConfig) -> None:
        """Test that different configs have different checksums."""
        other = config.model_copy(update={"environment": "node"})
        assert other.compute_checksum() != config.compute_checksum()

    @pytest.mark.unit
    def test_summary(self, config: ResolvedConfig) -> None:
        """Test summary contents."""
        summary = config.summary()
        assert summary["preset"] == "ts-jest"
        assert summary["environment"] == "bun"
        assert summary["test_exclusions_count"] == 2
        assert summary["coverage_exclusions_count"] == 1
        assert summary["config_checksum"] == config.compute_checksum()
