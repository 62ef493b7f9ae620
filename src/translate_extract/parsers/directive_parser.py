"""Extract keys from translate directives in templates."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing_extensions import override

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..utils.template_helpers import get_template
from ..utils.translation_collection import TranslationCollection
from .base import BaseParser

logger = logging.getLogger(__name__)

DIRECTIVE_ATTRIBUTES = ("translate", "ng2-translate")
BOUND_DIRECTIVE_ATTRIBUTE = "[translate]"

_BOUND_LITERAL_PATTERN = re.compile(r"""^\s*(?P<quote>['"])(?P<key>.*)(?P=quote)\s*$""", re.DOTALL)


def _is_directive_element(tag: Tag) -> bool:
    return any(tag.has_attr(name) for name in (*DIRECTIVE_ATTRIBUTES, BOUND_DIRECTIVE_ATTRIBUTE))


def _attribute_value(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


class DirectiveParser(BaseParser):
    """
    Find elements carrying the translate directive.

    The key is the attribute value when one is given
    (``<span translate="KEY">``), a quoted literal for the bound form
    (``<span [translate]="'KEY'">``), or otherwise the element's own text
    nodes (``<span translate>KEY</span>``).
    """

    name: str = "directive"

    @override
    def extract(
        self,
        source: str,
        file_path: str | Path,
        cust_service_name: str | None = None,
        cust_method_name: str | None = None,
    ) -> TranslationCollection | None:
        template = get_template(source, file_path)
        if template is None:
            return None

        soup = BeautifulSoup(template, "html.parser")
        keys: list[str] = []
        for element in soup.find_all(_is_directive_element):
            keys.extend(self._get_element_keys(element))

        for key in keys:
            logger.debug(f"Found directive key '{key}' in {file_path}")
        return TranslationCollection().add_keys(keys)

    def _get_element_keys(self, element: Tag) -> list[str]:
        if element.has_attr(BOUND_DIRECTIVE_ATTRIBUTE):
            match = _BOUND_LITERAL_PATTERN.match(_attribute_value(element, BOUND_DIRECTIVE_ATTRIBUTE))
            if match is not None and match.group("key"):
                return [match.group("key")]
            return []

        for name in DIRECTIVE_ATTRIBUTES:
            value = _attribute_value(element, name).strip()
            if "{{" in value:
                logger.debug(f"Skipping interpolated directive value '{value}'")
                return []
            if value:
                return [value]

        return [
            text
            for text in (
                str(child).strip()
                for child in element.contents
                if isinstance(child, NavigableString) and not isinstance(child, Comment)
            )
            if text
        ]
