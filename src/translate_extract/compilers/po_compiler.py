"""Gettext template (.pot) output format."""

from __future__ import annotations

from pathlib import Path
from typing_extensions import override

import polib

from ..utils.core.exceptions import ParseError
from ..utils.translation_collection import TranslationCollection
from .base import BaseCompiler

POT_METADATA = {
    "Content-Type": "text/plain; charset=utf-8",
    "Content-Transfer-Encoding": "8bit",
}


class PoCompiler(BaseCompiler):
    """
    Write keys as gettext entries using polib.

    The key is the msgid; an unset value is written as an empty msgstr and
    read back as None. No creation timestamp is written so repeated runs
    produce identical files.
    """

    extension: str = "pot"

    @override
    def compile(self, collection: TranslationCollection) -> str:
        po = polib.POFile()
        po.metadata = dict(POT_METADATA)
        for key, value in collection.items():
            po.append(polib.POEntry(msgid=key, msgstr=value or ""))
        return str(po)

    @override
    def parse(
        self, contents: str, file_path: str | Path = "<string>"
    ) -> TranslationCollection:
        if not contents.strip():
            return TranslationCollection()

        try:
            po = polib.pofile(contents)
        except (OSError, ValueError) as e:
            raise ParseError(f"Invalid gettext file: {e}", file_path) from e

        values = {
            entry.msgid: entry.msgstr or None
            for entry in po
            if not entry.obsolete and entry.msgid
        }
        return TranslationCollection(values)
