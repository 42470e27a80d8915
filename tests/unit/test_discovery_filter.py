"""Unit tests for test file discovery."""

from pathlib import Path

import pytest

from harness.config.resolver import resolve
from harness.discovery.filter import TestFileFilter


@pytest.fixture
def default_filter() -> TestFileFilter:
    """Create a filter from the all-defaults configuration."""
    return TestFileFilter(resolve({}))


class TestTestFileFilter:
    """Tests for TestFileFilter."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("src/app.test.ts", True),
            ("src/app.spec.jsx", True),
            ("src/__tests__/app.ts", True),
            ("src/__tests__/nested/util.js", True),
            ("app.test.js", True),
            ("src/app.ts", False),
            ("src/app.test.py", False),
            ("node_modules/pkg/index.test.js", False),
            ("lib/app.test.js", False),
            ("packages/a/lib/x.spec.ts", False),
        ],
    )
    def test_default_classification(
        self, default_filter: TestFileFilter, path: str, expected: bool
    ) -> None:
        """Test naming convention combined with the default denylist."""
        assert default_filter.is_test_file(path) is expected

    @pytest.mark.unit
    def test_exclusion_wins_over_naming(self) -> None:
        """Test that excluded paths are never test files."""
        test_filter = TestFileFilter(resolve({"testExclusions": ["**/vendor/**"]}))
        assert test_filter.is_candidate("vendor/x.test.js")
        assert not test_filter.is_test_file("vendor/x.test.js")
        assert test_filter.excluded_by("vendor/x.test.js") == "**/vendor/**"

    @pytest.mark.unit
    def test_replaced_defaults_no_longer_apply(self) -> None:
        """Test that replacing exclusions re-admits default-excluded paths."""
        test_filter = TestFileFilter(resolve({"testExclusions": ["**/vendor/**"]}))
        assert test_filter.is_test_file("lib/app.test.js")

    @pytest.mark.unit
    def test_custom_test_match(self) -> None:
        """Test a custom naming convention."""
        test_filter = TestFileFilter(resolve({}), test_match=["**/*_check.ts"])
        assert test_filter.is_test_file("src/a_check.ts")
        assert not test_filter.is_test_file("src/a.test.ts")

    @pytest.mark.unit
    def test_discover_preserves_order_and_normalizes(
        self, default_filter: TestFileFilter
    ) -> None:
        """Test that discover filters in input order."""
        found = default_filter.discover(
            ["./b.test.ts", "a.ts", "node_modules/x.test.js", "a.test.ts"]
        )
        assert found == ["b.test.ts", "a.test.ts"]

    @pytest.mark.unit
    def test_discover_in_walks_directory(
        self, default_filter: TestFileFilter, tmp_path: Path
    ) -> None:
        """Test discovery from a directory tree."""
        for relative in (
            "src/app.ts",
            "src/app.test.ts",
            "src/__tests__/util.js",
            "node_modules/dep/dep.test.js",
            "lib/build.test.js",
        ):
            file_path = tmp_path / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("// test\n")

        assert default_filter.discover_in(tmp_path) == [
            "src/__tests__/util.js",
            "src/app.test.ts",
        ]
