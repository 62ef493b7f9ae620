"""Nested JSON output format, one object level per dotted key segment."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing_extensions import override

from ..utils.translation_collection import TranslationCollection
from .base import BaseCompiler
from .json_compiler import flatten, load_json_object

logger = logging.getLogger(__name__)


def unflatten(collection: TranslationCollection) -> dict[str, object]:
    """
    Expand dotted keys into nested objects.

    A key that would place a value where a namespace already exists, or a
    namespace where a value already exists, is skipped.
    """
    tree: dict[str, object] = {}
    for key, value in collection.items():
        *namespaces, leaf = key.split(".")
        node = tree
        conflict = False
        for namespace in namespaces:
            child = node.setdefault(namespace, {})
            if not isinstance(child, dict):
                conflict = True
                break
            node = child
        if conflict or isinstance(node.get(leaf), dict):
            logger.warning(f"Skipping key '{key}': conflicts with an existing namespace or value")
            continue
        node[leaf] = value
    return tree


class NamespacedJsonCompiler(BaseCompiler):
    """Write dotted keys as nested JSON objects."""

    extension: str = "json"

    @override
    def compile(self, collection: TranslationCollection) -> str:
        return json.dumps(unflatten(collection), indent=self.indentation, ensure_ascii=False) + "\n"

    @override
    def parse(
        self, contents: str, file_path: str | Path = "<string>"
    ) -> TranslationCollection:
        return TranslationCollection(flatten(load_json_object(contents, file_path)))
