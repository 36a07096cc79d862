"""Utility functions for the patternfly_cli package."""

from .process import format_command, run_captured, run_streamed

__all__ = ["format_command", "run_captured", "run_streamed", ]
