"""Unit tests for command-line overrides."""

import pytest

from harness.config.overrides import apply_overrides


class TestApplyOverrides:
    """Tests for apply_overrides."""

    @pytest.mark.unit
    def test_no_overrides_returns_equal_copy(self) -> None:
        """Test that without overrides the raw mapping is copied unchanged."""
        raw = {"environment": "jsdom", "verbose": True}
        result = apply_overrides(raw)
        assert result == raw
        assert result is not raw

    @pytest.mark.unit
    def test_environment_override_drops_alias(self) -> None:
        """Test that an override replaces the alias key too."""
        raw = {"testEnvironment": "jsdom", "preset": "ts-jest"}
        result = apply_overrides(raw, environment="bun")
        assert result == {"environment": "bun", "preset": "ts-jest"}
        assert raw == {"testEnvironment": "jsdom", "preset": "ts-jest"}

    @pytest.mark.unit
    def test_preset_override(self) -> None:
        """Test that a preset override replaces the configured preset."""
        result = apply_overrides({"preset": "ts-jest"}, preset="babel-jest")
        assert result == {"preset": "babel-jest"}

    @pytest.mark.unit
    def test_override_adds_missing_key(self) -> None:
        """Test that overrides apply to fields absent from the raw record."""
        assert apply_overrides({}, environment="node", preset="swc") == {
            "environment": "node",
            "preset": "swc",
        }
