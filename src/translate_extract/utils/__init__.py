"""Shared utilities for translate-extract."""

from .translation_collection import TranslationCollection, TranslationValue

__all__ = ["TranslationCollection", "TranslationValue"]
