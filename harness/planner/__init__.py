"""Run planning."""

from harness.planner.models import PathDecision, PlannedTestFile, RunPlan
from harness.planner.planner import RunPlanner


__all__ = ["PathDecision", "PlannedTestFile", "RunPlan", "RunPlanner"]
