from __future__ import annotations

from typing_extensions import override

from ..utils.translation_collection import TranslationCollection
from .base import BasePostProcessor


class PurgeObsoleteKeysPostProcessor(BasePostProcessor):
    """Drop keys that the current run no longer finds in the source files."""

    name: str = "PurgeObsoleteKeys"

    @override
    def process(
        self,
        draft: TranslationCollection,
        extracted: TranslationCollection,
        existing: TranslationCollection,
    ) -> TranslationCollection:
        obsolete = [key for key in existing if key not in extracted]
        return draft.remove_keys(obsolete)
