"""Data models for run planning."""

from pydantic import BaseModel, ConfigDict, Field


class PathDecision(BaseModel):
    """Every stage's decision for a single path.

    Attributes:
        path: Normalized path.
        is_test_file: Whether the path is executed as a test file.
        test_excluded_by: Test exclusion pattern that removed the path.
        instrumented: Whether the path is instrumented for coverage.
        coverage_excluded_by: Coverage exclusion pattern that removed the path.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    is_test_file: bool
    test_excluded_by: str | None = None
    instrumented: bool
    coverage_excluded_by: str | None = None


class PlannedTestFile(BaseModel):
    """A test file with its transformation and environment.

    Attributes:
        path: Normalized test file path.
        environment: Environment the file runs under.
        preset: Preset applied to the file, None for no transformation.
        preset_error: Error message when the preset is not registered.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    environment: str
    preset: str | None = None
    preset_error: str | None = None

    @property
    def runnable(self) -> bool:
        """Check whether the file's preset resolved."""
        return self.preset_error is None


class RunPlan(BaseModel):
    """Decisions a test runner needs for one run.

    Attributes:
        config_checksum: Checksum of the resolved configuration.
        test_files: Test files to transform and execute.
        coverage_targets: Non-test files to instrument.
        excluded_from_tests: Candidate test files removed, mapped to pattern.
        excluded_from_coverage: Files removed from coverage, mapped to pattern.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_checksum: str
    test_files: list[PlannedTestFile] = Field(default_factory=list)
    coverage_targets: list[str] = Field(default_factory=list)
    excluded_from_tests: dict[str, str] = Field(default_factory=dict)
    excluded_from_coverage: dict[str, str] = Field(default_factory=dict)

    @property
    def runnable_test_files(self) -> list[PlannedTestFile]:
        """Get test files whose preset resolved."""
        return [t for t in self.test_files if t.runnable]
