"""Test file discovery."""

from harness.discovery.filter import DEFAULT_TEST_MATCH, TestFileFilter


__all__ = ["DEFAULT_TEST_MATCH", "TestFileFilter"]
