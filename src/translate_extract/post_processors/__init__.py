"""Transforms applied to the merged collection before compiling."""

from .base import BasePostProcessor
from .key_as_default_value import KeyAsDefaultValuePostProcessor
from .null_as_default_value import NullAsDefaultValuePostProcessor
from .purge_obsolete_keys import PurgeObsoleteKeysPostProcessor
from .sort_by_key import SortByKeyPostProcessor

__all__ = [
    "BasePostProcessor",
    "KeyAsDefaultValuePostProcessor",
    "NullAsDefaultValuePostProcessor",
    "PurgeObsoleteKeysPostProcessor",
    "SortByKeyPostProcessor",
]
