"""
Syntax tree helpers for TypeScript program source.

This module wraps tree-sitter to parse TypeScript files and provides the
queries the program-source parsers share: locating class declarations,
resolving the member that holds an injected service, collecting method and
function calls, and statically evaluating call arguments to strings.

Usage Examples:
    Find the keys passed to ``this.translate.get`` in a component:
        >>> root = parse_source(source, "app.component.ts")
        >>> for class_node in find_class_declarations(root):
        ...     prop = find_class_property_by_type(class_node, "TranslateService")
        ...     calls = find_method_call_expressions(class_node, prop, {"get"})
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterator
from functools import lru_cache
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .core.exceptions import ParseError

logger = logging.getLogger(__name__)

PROGRAM_SOURCE_SUFFIXES = {".ts", ".tsx"}

CLASS_DECLARATION_TYPES = {"class_declaration", "abstract_class_declaration", "class"}

_JS_ESCAPE_PATTERN = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


@lru_cache(maxsize=2)
def get_language(tsx: bool = False) -> Language:
    """Return the tree-sitter grammar for TypeScript or TSX."""
    if tsx:
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


def is_program_source(file_path: str | Path) -> bool:
    return Path(file_path).suffix.lower() in PROGRAM_SOURCE_SUFFIXES


def parse_source(source: str, file_path: str | Path) -> Node:
    """
    Parse TypeScript source into a syntax tree.

    Args:
        source: Program source text
        file_path: Path of the file, used to pick the grammar and for errors

    Returns:
        Root node of the syntax tree

    Raises:
        ParseError: If the source contains syntax errors
    """
    tsx = Path(file_path).suffix.lower() == ".tsx"
    parser = Parser(get_language(tsx))
    tree = parser.parse(source.encode("utf-8"))
    root = tree.root_node

    if root.has_error:
        error_node = _find_first_error(root)
        line = error_node.start_point[0] + 1 if error_node is not None else None
        raise ParseError("Syntax error in program source", file_path, line)

    return root


def _find_first_error(root: Node) -> Node | None:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def find_class_declarations(root: Node) -> list[Node]:
    # The anonymous `class` keyword token shares its type name with class expressions
    return [
        node
        for node in iter_nodes(root)
        if node.is_named and node.type in CLASS_DECLARATION_TYPES
    ]


def _type_annotation_matches(annotation: Node | None, type_name: str) -> bool:
    """Check whether a ``: Type`` annotation references ``type_name``."""
    if annotation is None:
        return False
    for child in annotation.named_children:
        if child.type == "type_identifier":
            return node_text(child) == type_name
        if child.type == "generic_type":
            name = child.child_by_field_name("name")
            return name is not None and node_text(name) == type_name
    return False


def _is_inject_call(value: Node | None, type_name: str) -> bool:
    """Check for an ``inject(Type)`` field initializer."""
    if value is None or value.type != "call_expression":
        return False
    function = value.child_by_field_name("function")
    if function is None or node_text(function) != "inject":
        return False
    arguments = call_arguments(value)
    return bool(arguments) and node_text(arguments[0]) == type_name


def find_class_property_by_type(class_node: Node, type_name: str) -> str | None:
    """
    Find the name of the member holding an instance of ``type_name``.

    Constructor parameter properties are checked first, then class fields
    with a matching type annotation or an ``inject(Type)`` initializer.

    Args:
        class_node: Class declaration node
        type_name: Name of the injected type, e.g. "TranslateService"

    Returns:
        Member name, or None if the class has no such member
    """
    body = class_node.child_by_field_name("body")
    if body is None:
        return None

    for member in body.named_children:
        if member.type != "method_definition":
            continue
        name = member.child_by_field_name("name")
        if name is None or node_text(name) != "constructor":
            continue
        parameters = member.child_by_field_name("parameters")
        if parameters is None:
            continue
        for parameter in parameters.named_children:
            if parameter.type not in ("required_parameter", "optional_parameter"):
                continue
            if _type_annotation_matches(parameter.child_by_field_name("type"), type_name):
                pattern = parameter.child_by_field_name("pattern")
                if pattern is not None:
                    return node_text(pattern)

    for member in body.named_children:
        if member.type != "public_field_definition":
            continue
        name = member.child_by_field_name("name")
        if name is None:
            continue
        if _type_annotation_matches(member.child_by_field_name("type"), type_name):
            return node_text(name)
        if _is_inject_call(member.child_by_field_name("value"), type_name):
            return node_text(name)

    return None


def call_arguments(call: Node) -> list[Node]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [arg for arg in arguments.named_children if arg.type != "comment"]


def find_method_call_expressions(
    node: Node, prop_name: str, method_names: Collection[str]
) -> list[Node]:
    """
    Find calls of the form ``this.<prop_name>.<method>(...)`` below ``node``.

    Args:
        node: Node to search, usually a class declaration
        prop_name: Name of the member holding the service
        method_names: Method names to match

    Returns:
        Matching call expression nodes in document order
    """
    calls: list[Node] = []
    for candidate in iter_nodes(node):
        if candidate.type != "call_expression":
            continue
        function = candidate.child_by_field_name("function")
        if function is None or function.type != "member_expression":
            continue
        method = function.child_by_field_name("property")
        target = function.child_by_field_name("object")
        if method is None or target is None or node_text(method) not in method_names:
            continue
        if target.type != "member_expression":
            continue
        owner = target.child_by_field_name("object")
        prop = target.child_by_field_name("property")
        if owner is not None and owner.type == "this" and prop is not None:
            if node_text(prop) == prop_name:
                calls.append(candidate)
    return calls


def find_function_call_expressions(node: Node, function_name: str) -> list[Node]:
    """Find calls of a plain function named ``function_name`` below ``node``."""
    calls: list[Node] = []
    for candidate in iter_nodes(node):
        if candidate.type != "call_expression":
            continue
        function = candidate.child_by_field_name("function")
        if function is not None and function.type == "identifier":
            if node_text(function) == function_name:
                calls.append(candidate)
    return calls


def find_named_import_alias(root: Node, module_name: str, import_name: str) -> str | None:
    """
    Resolve the local name of ``import { import_name } from 'module_name'``.

    Returns:
        The alias if the import is renamed, the import name itself if it is
        imported unchanged, or None if there is no such import
    """
    for statement in root.named_children:
        if statement.type != "import_statement":
            continue
        source = statement.child_by_field_name("source")
        if source is None or get_string_literal(source) != module_name:
            continue
        for specifier in iter_nodes(statement):
            if specifier.type != "import_specifier":
                continue
            name = specifier.child_by_field_name("name")
            if name is None or node_text(name) != import_name:
                continue
            alias = specifier.child_by_field_name("alias")
            return node_text(alias) if alias is not None else import_name
    return None


def unescape_js_string(raw: str) -> str:
    """Decode JavaScript escape sequences in the body of a string literal."""

    def replace(match: re.Match[str]) -> str:
        escape = match.group(1)
        if escape.startswith("u{"):
            return chr(int(escape[2:-1], 16))
        if escape.startswith(("u", "x")) and len(escape) > 1:
            return chr(int(escape[1:], 16))
        if escape in ("\n", "\r\n", "\r", "\u2028", "\u2029"):
            return ""
        return _SIMPLE_ESCAPES.get(escape, escape)

    return _JS_ESCAPE_PATTERN.sub(replace, raw)


def get_string_literal(node: Node) -> str | None:
    """Return the value of a string or substitution-free template literal."""
    if node.type == "string":
        return unescape_js_string(node_text(node)[1:-1])
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.named_children):
            return None
        return unescape_js_string(node_text(node)[1:-1])
    return None


def get_strings_from_expression(expression: Node) -> list[str]:
    """
    Statically evaluate an expression to the strings it can produce.

    Supports string literals, template literals without substitutions,
    ``+`` concatenation of literals, arrays of literals, ``||``/``??``
    alternatives, conditional expressions and parentheses. Anything dynamic
    contributes no strings.

    Args:
        expression: Expression node, usually a call argument

    Returns:
        The strings in source order, possibly empty
    """
    literal = get_string_literal(expression)
    if literal is not None:
        return [literal]

    match expression.type:
        case "parenthesized_expression":
            inner = [child for child in expression.named_children if child.type != "comment"]
            return get_strings_from_expression(inner[0]) if inner else []
        case "array":
            strings: list[str] = []
            for element in expression.named_children:
                strings.extend(get_strings_from_expression(element))
            return strings
        case "binary_expression":
            return _get_strings_from_binary_expression(expression)
        case "ternary_expression":
            consequence = expression.child_by_field_name("consequence")
            alternative = expression.child_by_field_name("alternative")
            strings = []
            for branch in (consequence, alternative):
                if branch is not None:
                    strings.extend(get_strings_from_expression(branch))
            return strings
        case _:
            logger.debug(
                f"Skipping non-literal expression at line "
                f"{expression.start_point[0] + 1}: {node_text(expression)}"
            )
            return []


def _get_strings_from_binary_expression(expression: Node) -> list[str]:
    left = expression.child_by_field_name("left")
    right = expression.child_by_field_name("right")
    operator = expression.child_by_field_name("operator")
    if left is None or right is None or operator is None:
        return []

    left_strings = get_strings_from_expression(left)
    right_strings = get_strings_from_expression(right)

    match operator.type:
        case "+":
            if len(left_strings) == 1 and len(right_strings) == 1:
                return [left_strings[0] + right_strings[0]]
            return []
        case "||" | "??":
            return left_strings + right_strings
        case _:
            return []
