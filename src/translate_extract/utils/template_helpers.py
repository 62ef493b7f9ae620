"""Helpers shared by the template parsers."""

from __future__ import annotations

import re
from pathlib import Path

TEMPLATE_SUFFIXES = {".html", ".htm"}
COMPONENT_SUFFIXES = {".ts", ".js"}

_INLINE_TEMPLATE_PATTERN = re.compile(
    r"""\btemplate\s*:\s*(?P<quote>["'`])(?P<template>(?:\\[\s\S]|(?!(?P=quote))[\s\S])*)(?P=quote)"""
)


def is_template_file(file_path: str | Path) -> bool:
    return Path(file_path).suffix.lower() in TEMPLATE_SUFFIXES


def is_component_file(file_path: str | Path) -> bool:
    return Path(file_path).suffix.lower() in COMPONENT_SUFFIXES


def extract_inline_template(source: str) -> str | None:
    """
    Return the inline ``template:`` of a component decorator.

    Args:
        source: Component source text

    Returns:
        The template text, or None if the component has no inline template
    """
    match = _INLINE_TEMPLATE_PATTERN.search(source)
    if match is None:
        return None
    return match.group("template")


def get_template(source: str, file_path: str | Path) -> str | None:
    """Return the template text to scan in ``file_path``, or None if it has none."""
    if is_template_file(file_path):
        return source
    if is_component_file(file_path):
        return extract_inline_template(source)
    return None
