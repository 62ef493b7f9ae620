"""Extract keys passed to TranslateService methods in class members."""

from __future__ import annotations

import logging
from pathlib import Path
from typing_extensions import override

from ..utils.ast_helpers import (
    call_arguments,
    find_class_declarations,
    find_class_property_by_type,
    find_method_call_expressions,
    get_strings_from_expression,
    is_program_source,
    parse_source,
)
from ..utils.translation_collection import TranslationCollection
from .base import BaseParser

logger = logging.getLogger(__name__)

TRANSLATE_SERVICE_TYPE_REFERENCE = "TranslateService"
TRANSLATE_SERVICE_METHOD_NAMES = frozenset({"get", "instant", "stream"})


def get_method_names(cust_method_name: str | None = None) -> frozenset[str]:
    """Return the default method names, plus the custom one if given."""
    if cust_method_name:
        return TRANSLATE_SERVICE_METHOD_NAMES | {cust_method_name}
    return TRANSLATE_SERVICE_METHOD_NAMES


class ServiceParser(BaseParser):
    """
    Find ``this.<member>.get('KEY')`` style calls on an injected service.

    The member is located by type: a constructor parameter property, a
    typed field, or a field initialised with ``inject(TranslateService)``.
    """

    name: str = "service"

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
        class_declarations = find_class_declarations(root)
        if not class_declarations:
            return None

        service_name = cust_service_name or TRANSLATE_SERVICE_TYPE_REFERENCE
        method_names = get_method_names(cust_method_name)

        collection = TranslationCollection()
        for class_declaration in class_declarations:
            prop_name = find_class_property_by_type(class_declaration, service_name)
            if prop_name is None:
                continue

            for call in find_method_call_expressions(class_declaration, prop_name, method_names):
                arguments = call_arguments(call)
                if not arguments:
                    continue
                strings = [key for key in get_strings_from_expression(arguments[0]) if key]
                for key in strings:
                    logger.debug(f"Found service key '{key}' in {file_path}")
                collection = collection.add_keys(strings)

        return collection
