"""Coverage instrumentation targeting."""

from harness.coverage.filter import CoverageFilter


__all__ = ["CoverageFilter"]
