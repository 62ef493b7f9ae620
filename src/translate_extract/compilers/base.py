"""Abstract base class for output format compilers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..utils.translation_collection import TranslationCollection

DEFAULT_INDENTATION = "\t"


class BaseCompiler(ABC):
    """Serialize a collection to one output format and read it back."""

    extension: str = ""

    def __init__(self, indentation: str = DEFAULT_INDENTATION) -> None:
        self.indentation: str = indentation

    @abstractmethod
    def compile(self, collection: TranslationCollection) -> str:
        """Return the file contents for ``collection``."""

    @abstractmethod
    def parse(
        self, contents: str, file_path: str | Path = "<string>"
    ) -> TranslationCollection:
        """
        Read a collection from existing file contents.

        Raises:
            ParseError: If the contents are not valid for this format
        """
