from __future__ import annotations

from typing_extensions import override

from ..utils.translation_collection import TranslationCollection
from .base import BasePostProcessor


class SortByKeyPostProcessor(BasePostProcessor):
    """Order entries by key, comparing code points."""

    name: str = "SortByKey"

    @override
    def process(
        self,
        draft: TranslationCollection,
        extracted: TranslationCollection,
        existing: TranslationCollection,
    ) -> TranslationCollection:
        return draft.sort()
