"""Configuration for translate-extract."""

from .schema import ExtractConfig, OutputFormat

__all__ = ["ExtractConfig", "OutputFormat"]
