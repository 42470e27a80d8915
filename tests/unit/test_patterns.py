"""Unit tests for glob pattern validation and matching."""

from pathlib import PurePosixPath

import pytest

from harness.config.patterns import (
    PatternSet,
    compile_pattern,
    normalize_path,
    runner_pattern_to_glob,
    validate_pattern,
)


class TestValidatePattern:
    """Tests for validate_pattern."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "pattern",
        [
            "**/node_modules/**",
            "src/*.ts",
            "file?.js",
            "[abc].js",
            "[!abc].js",
            "[]].js",
            "**/*.{js,ts}",
            "**/*.{spec,{test,it}}.js",
            "literal\\[bracket",
            "/lib/",
        ],
    )
    def test_accepts_valid_patterns(self, pattern: str) -> None:
        """Test that well-formed patterns pass validation."""
        assert validate_pattern(pattern) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("pattern", "expected_substring"),
        [
            ("", "empty"),
            ("   ", "blank"),
            ("src/[abc.js", "unclosed character class"),
            ("[]", "unclosed character class"),
            ("**/*.{js,ts", "unclosed '{'"),
            ("dist}/**", "unmatched '}'"),
            ("trailing\\", "trailing escape"),
            ("nul\x00byte", "NUL"),
        ],
    )
    def test_rejects_malformed_patterns(
        self, pattern: str, expected_substring: str
    ) -> None:
        """Test that malformed patterns report a reason."""
        reason = validate_pattern(pattern)
        assert reason is not None
        assert expected_substring in reason

    @pytest.mark.unit
    def test_rejects_non_string(self) -> None:
        """Test that non-string entries are rejected with their type."""
        reason = validate_pattern(42)
        assert reason is not None
        assert "int" in reason


class TestCompilePattern:
    """Tests for glob matching semantics."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            ("**/node_modules/**", "node_modules/react/index.js", True),
            ("**/node_modules/**", "packages/a/node_modules/b/c.js", True),
            ("**/node_modules/**", "src/node_modules.js", False),
            ("**/lib/**", "lib/index.js", True),
            ("**/lib/**", "src/library/index.js", False),
            ("src/*.ts", "src/a.ts", True),
            ("src/*.ts", "src/nested/a.ts", False),
            ("src/**/*.ts", "src/a.ts", True),
            ("src/**/*.ts", "src/x/y/a.ts", True),
            ("file?.js", "file1.js", True),
            ("file?.js", "file10.js", False),
            ("[abc].js", "b.js", True),
            ("[abc].js", "d.js", False),
            ("[!abc].js", "d.js", True),
            ("[!abc].js", "a.js", False),
            ("[a-c]x.js", "bx.js", True),
            ("a[/]b", "a/b", False),
            ("a[./-]b", "a-b", True),
            ("a[./-]b", "a/b", False),
            ("a[!x]b", "a/b", False),
            ("**/*.{spec,test}.ts", "src/a.test.ts", True),
            ("**/*.{spec,test}.ts", "src/a.spec.ts", True),
            ("**/*.{spec,test}.ts", "src/a.e2e.ts", False),
            ("**/*.{js,{ts,tsx}}", "a/b.tsx", True),
            ("a\\*b", "a*b", True),
            ("a\\*b", "axb", False),
            ("a.b", "axb", False),
        ],
    )
    def test_matching(self, pattern: str, path: str, expected: bool) -> None:
        """Test whole-path matching for representative patterns."""
        assert bool(compile_pattern(pattern).fullmatch(path)) is expected

    @pytest.mark.unit
    def test_invalid_pattern_raises(self) -> None:
        """Test that compiling an invalid pattern raises ValueError."""
        with pytest.raises(ValueError, match="Invalid glob pattern"):
            compile_pattern("[oops")


class TestNormalizePath:
    """Tests for normalize_path."""

    @pytest.mark.unit
    def test_strips_leading_dot_slash(self) -> None:
        """Test that './' prefixes are removed."""
        assert normalize_path("././src/a.ts") == "src/a.ts"

    @pytest.mark.unit
    def test_converts_backslashes(self) -> None:
        """Test that Windows separators become forward slashes."""
        assert normalize_path("src\\lib\\a.ts") == "src/lib/a.ts"

    @pytest.mark.unit
    def test_accepts_pure_paths(self) -> None:
        """Test that PurePath objects are converted to posix strings."""
        assert normalize_path(PurePosixPath("src/a.ts")) == "src/a.ts"


class TestPatternSet:
    """Tests for PatternSet."""

    @pytest.mark.unit
    def test_deduplicates_preserving_order(self) -> None:
        """Test that duplicates are dropped and first order kept."""
        patterns = PatternSet(["b/**", "a/**", "b/**"])
        assert patterns.patterns == ("b/**", "a/**")
        assert len(patterns) == 2

    @pytest.mark.unit
    def test_first_match_reports_pattern(self) -> None:
        """Test that the first matching pattern is reported."""
        patterns = PatternSet(["**/dist/**", "**/*.js"])
        assert patterns.first_match("pkg/dist/a.js") == "**/dist/**"
        assert patterns.first_match("pkg/src/a.js") == "**/*.js"
        assert patterns.first_match("pkg/src/a.ts") is None

    @pytest.mark.unit
    def test_empty_set_matches_nothing(self) -> None:
        """Test that an empty set matches no path."""
        assert PatternSet([]).matches("anything.js") is False


class TestRunnerPatternToGlob:
    """Tests for runner_pattern_to_glob."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("/node_modules/", "**/node_modules/**"),
            ("/lib/", "**/lib/**"),
            ("/fixtures/data/", "**/fixtures/data/**"),
            ("/setup.ts", "**/setup.ts"),
            ("build/", "build/**"),
            ("/", "**"),
            ("**/dist/**", "**/dist/**"),
            ("", ""),
            (42, 42),
        ],
    )
    def test_translation(self, pattern: object, expected: object) -> None:
        """Test how runner-style fragments map onto globs."""
        assert runner_pattern_to_glob(pattern) == expected

    @pytest.mark.unit
    def test_translated_fragment_matches_nested_paths(self) -> None:
        """Test that a translated fragment matches at any depth."""
        compiled = compile_pattern(str(runner_pattern_to_glob("/node_modules/")))
        assert compiled.fullmatch("node_modules/pkg/a.test.ts")
        assert compiled.fullmatch("packages/app/node_modules/pkg/index.js")
        assert not compiled.fullmatch("src/node_modules.ts")
