from __future__ import annotations

from typing_extensions import override

from ..utils.translation_collection import TranslationCollection, TranslationValue
from .base import BasePostProcessor


def _key_if_unset(key: str, value: TranslationValue) -> TranslationValue:
    return key if value is None else value


class KeyAsDefaultValuePostProcessor(BasePostProcessor):
    """Use the key itself as the value of every unset entry."""

    name: str = "KeyAsDefaultValue"

    @override
    def process(
        self,
        draft: TranslationCollection,
        extracted: TranslationCollection,
        existing: TranslationCollection,
    ) -> TranslationCollection:
        return draft.map(_key_if_unset)
