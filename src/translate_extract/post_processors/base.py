"""Abstract base class for post-processors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..utils.translation_collection import TranslationCollection


class BasePostProcessor(ABC):
    """
    Transform applied to the merged collection before it is compiled.

    Post-processors run in registration order, each receiving the result of
    the previous one as ``draft``.
    """

    name: str = "post-processor"

    @abstractmethod
    def process(
        self,
        draft: TranslationCollection,
        extracted: TranslationCollection,
        existing: TranslationCollection,
    ) -> TranslationCollection:
        """
        Transform the draft collection.

        Args:
            draft: Freshly extracted keys merged with the existing output
            extracted: Keys found in the source files during this run
            existing: Keys loaded from the existing output file

        Returns:
            The transformed collection
        """
