from __future__ import annotations

from typing_extensions import override

from ..utils.translation_collection import TranslationCollection, TranslationValue
from .base import BasePostProcessor


def _none_if_empty(key: str, value: TranslationValue) -> TranslationValue:
    return None if value == "" else value


class NullAsDefaultValuePostProcessor(BasePostProcessor):
    """
    Keep unset entries as None.

    Empty values loaded from an existing output file count as unset and are
    turned back into None.
    """

    name: str = "NullAsDefaultValue"

    @override
    def process(
        self,
        draft: TranslationCollection,
        extracted: TranslationCollection,
        existing: TranslationCollection,
    ) -> TranslationCollection:
        return draft.map(_none_if_empty)
