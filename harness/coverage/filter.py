"""Coverage instrumentation filter."""

from collections.abc import Iterable
from pathlib import PurePath

from harness.config.patterns import PatternSet, normalize_path
from harness.config.resolved import ResolvedConfig


class CoverageFilter:
    """Decides which executed files are instrumented for coverage."""

    def __init__(self, config: ResolvedConfig) -> None:
        self._exclusions = PatternSet(config.coverage_exclusions)

    def excluded_by(self, path: str | PurePath) -> str | None:
        """Get the exclusion pattern that removes a path, if any."""
        return self._exclusions.first_match(path)

    def should_instrument(self, path: str | PurePath) -> bool:
        """Check whether a path is instrumented."""
        return self.excluded_by(path) is None

    def targets(self, paths: Iterable[str | PurePath]) -> list[str]:
        """Get the normalized paths to instrument, in input order."""
        return [normalize_path(p) for p in paths if self.should_instrument(p)]
