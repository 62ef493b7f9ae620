"""Flat JSON output format."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing_extensions import override

from ..utils.core.exceptions import ParseError
from ..utils.translation_collection import TranslationCollection, TranslationValue
from .base import BaseCompiler


def flatten(values: Mapping[str, object], prefix: str = "") -> dict[str, TranslationValue]:
    """Flatten nested objects into dotted keys, keeping document order."""
    flat: dict[str, TranslationValue] = {}
    for key, value in values.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(flatten(value, full_key))
        elif value is None or isinstance(value, str):
            flat[full_key] = value
        else:
            flat[full_key] = json.dumps(value, ensure_ascii=False)
    return flat


def load_json_object(contents: str, file_path: str | Path) -> dict[str, object]:
    """Decode a JSON object, treating blank contents as empty."""
    if not contents.strip():
        return {}
    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.msg}", file_path, e.lineno) from e
    if not isinstance(data, dict):
        raise ParseError("Expected a JSON object at the top level", file_path)
    return data


class JsonCompiler(BaseCompiler):
    """Write keys as a flat JSON object; unset values become null."""

    extension: str = "json"

    @override
    def compile(self, collection: TranslationCollection) -> str:
        return json.dumps(collection.to_dict(), indent=self.indentation, ensure_ascii=False) + "\n"

    @override
    def parse(
        self, contents: str, file_path: str | Path = "<string>"
    ) -> TranslationCollection:
        return TranslationCollection(flatten(load_json_object(contents, file_path)))
