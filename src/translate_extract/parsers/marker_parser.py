"""Extract keys flagged with the no-op ``marker`` function."""

from __future__ import annotations

import logging
from pathlib import Path
from typing_extensions import override

from ..utils.ast_helpers import (
    call_arguments,
    find_function_call_expressions,
    find_named_import_alias,
    get_strings_from_expression,
    is_program_source,
    parse_source,
)
from ..utils.translation_collection import TranslationCollection
from .base import BaseParser

logger = logging.getLogger(__name__)

MARKER_MODULE_NAME = "@biesbjerg/ngx-translate-extract-marker"
MARKER_IMPORT_NAME = "marker"


class MarkerParser(BaseParser):
    """
    Find ``marker('KEY')`` calls anywhere in program source.

    When the marker is imported under another name
    (``import { marker as _ } from '...'``) the alias is matched instead.
    """

    name: str = "marker"

    @override
    def extract(
        self,
        source: str,
        file_path: str | Path,
        cust_service_name: str | None = None,
        cust_method_name: str | None = None,
    ) -> TranslationCollection | None:
        if not is_program_source(file_path):
            return None

        root = parse_source(source, file_path)
        marker_name = (
            find_named_import_alias(root, MARKER_MODULE_NAME, MARKER_IMPORT_NAME)
            or MARKER_IMPORT_NAME
        )

        collection = TranslationCollection()
        for call in find_function_call_expressions(root, marker_name):
            arguments = call_arguments(call)
            if not arguments:
                continue
            strings = [key for key in get_strings_from_expression(arguments[0]) if key]
            for key in strings:
                logger.debug(f"Found marker key '{key}' in {file_path}")
            collection = collection.add_keys(strings)

        return collection
