"""Test file discovery driven by the resolved configuration."""

from collections.abc import Iterable
from pathlib import Path, PurePath

import structlog

from harness.config.patterns import PatternSet, normalize_path
from harness.config.resolved import ResolvedConfig


logger = structlog.get_logger()

# Files inside __tests__ directories, or named *.test.* / *.spec.*
DEFAULT_TEST_MATCH: tuple[str, ...] = (
    "**/__tests__/**/*.{js,jsx,ts,tsx}",
    "**/*.{spec,test}.{js,jsx,ts,tsx}",
)


class TestFileFilter:
    """Decides which paths are test files.

    A path is a test file when it matches a test-match pattern and none of
    the configured test exclusions, irrespective of its name.
    """

    __test__ = False

    def __init__(
        self,
        config: ResolvedConfig,
        test_match: Iterable[str] = DEFAULT_TEST_MATCH,
    ) -> None:
        """Initialize the filter.

        Args:
            config: Resolved configuration.
            test_match: Patterns naming candidate test files.
        """
        self._test_match = PatternSet(test_match)
        self._exclusions = PatternSet(config.test_exclusions)

    def excluded_by(self, path: str | PurePath) -> str | None:
        """Get the exclusion pattern that removes a path, if any."""
        return self._exclusions.first_match(path)

    def is_candidate(self, path: str | PurePath) -> bool:
        """Check whether a path follows the test naming convention."""
        return self._test_match.matches(path)

    def is_test_file(self, path: str | PurePath) -> bool:
        """Check whether a path is a test file after exclusions."""
        return self.is_candidate(path) and self.excluded_by(path) is None

    def discover(self, paths: Iterable[str | PurePath]) -> list[str]:
        """Filter candidate paths down to test files.

        Args:
            paths: Candidate paths, relative to the project root.

        Returns:
            Normalized test file paths in input order.
        """
        return [normalize_path(p) for p in paths if self.is_test_file(p)]

    def discover_in(self, root: Path) -> list[str]:
        """Walk a directory and return its test files.

        Args:
            root: Project root directory.

        Returns:
            Sorted test file paths relative to ``root``.
        """
        candidates = sorted(
            p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
        )
        found = self.discover(candidates)
        logger.info(
            "test_files_discovered",
            root=str(root),
            candidate_count=len(candidates),
            test_file_count=len(found),
        )
        return found
