"""Extraction task orchestration."""

from .extract_task import DEFAULT_PATTERNS, ExtractTask, ExtractTaskOptions

__all__ = ["DEFAULT_PATTERNS", "ExtractTask", "ExtractTaskOptions"]
