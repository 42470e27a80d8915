"""Run planner joining discovery, coverage, presets and environments."""

from collections.abc import Iterable
from pathlib import PurePath

import structlog

from harness.config.constants import COMPONENT_PLANNER
from harness.config.patterns import normalize_path
from harness.config.resolved import ResolvedConfig
from harness.coverage.filter import CoverageFilter
from harness.discovery.filter import DEFAULT_TEST_MATCH, TestFileFilter
from harness.environment.registry import EnvironmentRegistry
from harness.planner.models import PathDecision, PlannedTestFile, RunPlan
from harness.transform.registry import PresetRegistry


logger = structlog.get_logger()


class RunPlanner:
    """Turns a resolved configuration into per-file decisions.

    Test files are never coverage targets; every other path is a coverage
    target unless a coverage exclusion matches it.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        presets: PresetRegistry | None = None,
        environments: EnvironmentRegistry | None = None,
        test_match: Iterable[str] = DEFAULT_TEST_MATCH,
    ) -> None:
        """Initialize the planner.

        Args:
            config: Resolved configuration.
            presets: Preset registry (empty registry when omitted).
            environments: Environment registry (built-in when omitted).
            test_match: Patterns naming candidate test files.
        """
        self._config = config
        self._presets = presets or PresetRegistry()
        self._environments = environments or EnvironmentRegistry()
        self._tests = TestFileFilter(config, test_match)
        self._coverage = CoverageFilter(config)

    def classify(self, path: str | PurePath) -> PathDecision:
        """Get every stage's decision for one path."""
        normalized = normalize_path(path)
        is_candidate = self._tests.is_candidate(normalized)
        test_excluded_by = self._tests.excluded_by(normalized) if is_candidate else None
        is_test_file = is_candidate and test_excluded_by is None
        coverage_excluded_by = self._coverage.excluded_by(normalized)
        return PathDecision(
            path=normalized,
            is_test_file=is_test_file,
            test_excluded_by=test_excluded_by,
            instrumented=not is_test_file and coverage_excluded_by is None,
            coverage_excluded_by=coverage_excluded_by,
        )

    def plan(self, paths: Iterable[str | PurePath]) -> RunPlan:
        """Build a run plan for a set of project paths.

        Args:
            paths: Project file paths relative to the root.

        Returns:
            Run plan covering every path.
        """
        environment = self._environments.select(self._config).name
        lookup = self._presets.transformer_for(self._config)
        preset_error = str(lookup.error) if lookup.error is not None else None

        test_files: list[PlannedTestFile] = []
        coverage_targets: list[str] = []
        excluded_from_tests: dict[str, str] = {}
        excluded_from_coverage: dict[str, str] = {}

        for path in paths:
            decision = self.classify(path)
            if decision.is_test_file:
                test_files.append(
                    PlannedTestFile(
                        path=decision.path,
                        environment=environment,
                        preset=self._config.preset,
                        preset_error=preset_error,
                    )
                )
            elif decision.test_excluded_by is not None:
                excluded_from_tests[decision.path] = decision.test_excluded_by

            if decision.instrumented:
                coverage_targets.append(decision.path)
            elif decision.coverage_excluded_by is not None:
                excluded_from_coverage[decision.path] = decision.coverage_excluded_by

        plan = RunPlan(
            config_checksum=self._config.compute_checksum(),
            test_files=test_files,
            coverage_targets=coverage_targets,
            excluded_from_tests=excluded_from_tests,
            excluded_from_coverage=excluded_from_coverage,
        )
        logger.info(
            "run_planned",
            component=COMPONENT_PLANNER,
            environment=environment,
            preset=self._config.preset,
            preset_found=lookup.ok,
            test_file_count=len(plan.test_files),
            coverage_target_count=len(plan.coverage_targets),
            excluded_test_count=len(plan.excluded_from_tests),
            excluded_coverage_count=len(plan.excluded_from_coverage),
        )
        return plan
