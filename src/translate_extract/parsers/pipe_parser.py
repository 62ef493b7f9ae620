"""Extract keys piped into the translate pipe in templates."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing_extensions import override

from ..utils.template_helpers import get_template
from ..utils.translation_collection import TranslationCollection
from .base import BaseParser

logger = logging.getLogger(__name__)

TRANSLATE_PIPE_NAME = "translate"

_STRING = r"""(?P<{name}>["'`])(?P<{body}>(?:\\.|(?!(?P={name}))[^\r\n\\])*)(?P={name})"""

# Characters after which a new template expression (or sub-expression) starts.
_EXPRESSION_BOUNDARIES = frozenset("{([,?:=\"'")


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)


def _starts_expression(template: str, index: int) -> bool:
    """
    Whether the literal at ``index`` begins a (sub-)expression.

    Pipes bind loosest, so a literal that is the right operand of ``+`` or
    another operator is not what gets piped. Text outside a binding has no
    boundary before it either.
    """
    preceding = template[:index].rstrip()
    return bool(preceding) and preceding[-1] in _EXPRESSION_BOUNDARIES


class PipeParser(BaseParser):
    """
    Find ``'KEY' | translate`` expressions in templates.

    Also matches a parenthesised conditional piped into the translate pipe,
    ``(condition ? 'A' : 'B') | translate``, contributing both branches.
    """

    name: str = "pipe"

    def __init__(self, pipe_name: str = TRANSLATE_PIPE_NAME) -> None:
        self.pipe_name: str = pipe_name
        pipe = rf"\s*(?<!\|)\|(?!\|)\s*{re.escape(pipe_name)}\b"
        self._literal_pattern: re.Pattern[str] = re.compile(
            _STRING.format(name="quote", body="key") + pipe
        )
        self._conditional_pattern: re.Pattern[str] = re.compile(
            r"\(\s*[^()'\"`]*?\?\s*"
            + _STRING.format(name="q1", body="first")
            + r"\s*:\s*"
            + _STRING.format(name="q2", body="second")
            + r"\s*\)"
            + pipe
        )

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

        found: list[tuple[int, str]] = []
        for match in self._literal_pattern.finditer(template):
            if not _starts_expression(template, match.start()):
                continue
            found.append((match.start(), _unescape(match.group("key"))))
        for match in self._conditional_pattern.finditer(template):
            if not _starts_expression(template, match.start()):
                continue
            found.append((match.start(), _unescape(match.group("first"))))
            found.append((match.start(), _unescape(match.group("second"))))

        keys = [key for _, key in sorted(found, key=lambda item: item[0]) if key]
        for key in keys:
            logger.debug(f"Found pipe key '{key}' in {file_path}")
        return TranslationCollection().add_keys(keys)
