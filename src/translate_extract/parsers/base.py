"""
Abstract base class for extraction strategies.

Each parser recognises one call or markup shape and returns a
TranslationCollection for a single file. Returning None means the parser
does not apply to the file; an empty collection means it applies but found
no keys.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..utils.translation_collection import TranslationCollection


class BaseParser(ABC):
    """Common interface for all extraction strategies."""

    name: str = "parser"

    @abstractmethod
    def extract(
        self,
        source: str,
        file_path: str | Path,
        cust_service_name: str | None = None,
        cust_method_name: str | None = None,
    ) -> TranslationCollection | None:
        """
        Extract translation keys from one file.

        Args:
            source: File contents
            file_path: Path of the file, used to decide applicability
            cust_service_name: Override for the translation service type name
            cust_method_name: Additional translation service method name

        Returns:
            Collection of keys, or None if this parser does not apply

        Raises:
            ParseError: If the file is malformed for a syntax-aware parser
        """
