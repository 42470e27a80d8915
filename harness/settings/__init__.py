"""Harness settings loading."""

from .app import HarnessSettings, get_settings


__all__ = ["HarnessSettings", "get_settings"]
