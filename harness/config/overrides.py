"""Command-line overrides applied to a raw configuration."""

from collections.abc import Mapping

from harness.config.constants import KEY_ALIASES, KEY_ENVIRONMENT, KEY_PRESET


def apply_overrides(
    raw: Mapping[object, object],
    *,
    environment: str | None = None,
    preset: str | None = None,
) -> dict[object, object]:
    """Return a copy of ``raw`` with the given overrides applied.

    An override replaces the field under its canonical key and drops any
    alias key for the same field. Overrides left as None are not applied.

    Args:
        raw: Raw configuration mapping (not modified).
        environment: Environment override (e.g. from ``--env``).
        preset: Preset override (e.g. from ``--preset``).

    Returns:
        New raw configuration mapping.
    """
    result = dict(raw)
    for key, value in ((KEY_ENVIRONMENT, environment), (KEY_PRESET, preset)):
        if value is None:
            continue
        for alias in KEY_ALIASES[key]:
            result.pop(alias, None)
        result[key] = value
    return result
