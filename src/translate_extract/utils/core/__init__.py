"""Core utilities shared across translate-extract."""

from .exceptions import (
    CompilerError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    ParseError,
    TranslateExtractError,
)

__all__ = [
    "CompilerError",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "ParseError",
    "TranslateExtractError",
]
