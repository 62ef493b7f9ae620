"""
Basic exception classes for translate-extract.

This module contains the exception hierarchy shared by the parsers, the
compilers and the extraction task, without creating import cycles.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    CONFIGURATION = "configuration"
    PARSE = "parse"
    COMPILER = "compiler"
    UNKNOWN = "unknown"


class TranslateExtractError(Exception):
    """Base exception class for translate-extract specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.user_message: str = user_message or message
        self.context: object | None = context
        self.recoverable: bool = recoverable


class ConfigurationError(TranslateExtractError):
    """Invalid command-line options or conflicting flags."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            user_message=user_message,
            context=context,
        )


class ParseError(TranslateExtractError):
    """A file could not be read or its contents could not be parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | Path,
        line: int | None = None,
    ) -> None:
        location = f"{file_path}:{line}" if line is not None else f"{file_path}"
        super().__init__(
            f"{location}: {message}",
            category=ErrorCategory.PARSE,
            severity=ErrorSeverity.CRITICAL,
            context={"file_path": str(file_path), "line": line},
        )
        self.file_path: str = str(file_path)
        self.line: int | None = line


class CompilerError(TranslateExtractError):
    """Unknown output format requested."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.COMPILER,
            severity=ErrorSeverity.HIGH,
            user_message=user_message,
        )
