"""Tests for the TypeScript syntax tree helpers."""

from __future__ import annotations

import pytest

from translate_extract.utils.ast_helpers import (
    call_arguments,
    find_class_declarations,
    find_class_property_by_type,
    find_function_call_expressions,
    find_method_call_expressions,
    find_named_import_alias,
    get_strings_from_expression,
    is_program_source,
    parse_source,
    unescape_js_string,
)
from translate_extract.utils.core.exceptions import ParseError


def first_argument_strings(expression: str) -> list[str]:
    """Evaluate the first argument of ``fn(<expression>)``."""
    root = parse_source(f"fn({expression});", "test.ts")
    [call] = find_function_call_expressions(root, "fn")
    return get_strings_from_expression(call_arguments(call)[0])


class TestParseSource:
    """Test parsing and error reporting."""

    def test_valid_source(self) -> None:
        """Valid TypeScript parses to a program node."""
        root = parse_source("const a: string = 'x';", "a.ts")

        assert root.type == "program"

    def test_syntax_error_names_file(self) -> None:
        """Malformed source raises ParseError with the path and a line."""
        with pytest.raises(ParseError) as exc_info:
            _ = parse_source("export class Broken {\n  method( {\n", "broken.ts")

        assert exc_info.value.file_path == "broken.ts"
        assert exc_info.value.line is not None
        assert "broken.ts" in str(exc_info.value)

    def test_tsx_source(self) -> None:
        """TSX files are parsed with the TSX grammar."""
        root = parse_source("const el = <div>{marker('KEY')}</div>;", "view.tsx")

        assert len(find_function_call_expressions(root, "marker")) == 1

    def test_is_program_source(self) -> None:
        """Only TypeScript suffixes count as program source."""
        assert is_program_source("a/b.ts")
        assert is_program_source("a/b.TSX")
        assert not is_program_source("a/b.html")


class TestClassHelpers:
    """Test class and member lookup."""

    def test_find_class_declarations(self) -> None:
        """Declarations and abstract declarations are found, not keywords."""
        source = "class A {}\nexport abstract class B {}\nconst C = class {};"
        root = parse_source(source, "classes.ts")

        assert [node.type for node in find_class_declarations(root)] == [
            "class_declaration",
            "abstract_class_declaration",
            "class",
        ]

    def test_property_from_constructor_parameter(self) -> None:
        """A typed constructor parameter property is found by type."""
        source = "class A { constructor(private svc: TranslateService) {} }"
        [class_node] = find_class_declarations(parse_source(source, "a.ts"))

        assert find_class_property_by_type(class_node, "TranslateService") == "svc"

    def test_property_from_typed_field(self) -> None:
        """A typed class field is found by type."""
        source = "class A { protected tr: TranslateService; }"
        [class_node] = find_class_declarations(parse_source(source, "a.ts"))

        assert find_class_property_by_type(class_node, "TranslateService") == "tr"

    def test_property_from_inject_call(self) -> None:
        """A field initialised with inject(Type) is found by type."""
        source = "class A { private t = inject(TranslateService); }"
        [class_node] = find_class_declarations(parse_source(source, "a.ts"))

        assert find_class_property_by_type(class_node, "TranslateService") == "t"

    def test_property_missing(self) -> None:
        """A class without a member of the type yields None."""
        source = "class A { constructor(private http: HttpClient) {} }"
        [class_node] = find_class_declarations(parse_source(source, "a.ts"))

        assert find_class_property_by_type(class_node, "TranslateService") is None

    def test_method_calls_require_this_member(self) -> None:
        """Only this.<prop>.<method>() calls with a listed method match."""
        source = """
class A {
  constructor(private t: TranslateService) {}
  run() {
    this.t.get('one');
    this.t.use('two');
    other.t.get('three');
    this.other.get('four');
  }
}
"""
        [class_node] = find_class_declarations(parse_source(source, "a.ts"))

        calls = find_method_call_expressions(class_node, "t", {"get", "instant"})

        assert [get_strings_from_expression(call_arguments(c)[0]) for c in calls] == [["one"]]


class TestImports:
    """Test named import alias resolution."""

    def test_aliased_import(self) -> None:
        """The local alias of a renamed import is returned."""
        root = parse_source("import { marker as _ } from 'pkg';", "a.ts")

        assert find_named_import_alias(root, "pkg", "marker") == "_"

    def test_plain_import(self) -> None:
        """An unrenamed import returns the import name."""
        root = parse_source('import { marker } from "pkg";', "a.ts")

        assert find_named_import_alias(root, "pkg", "marker") == "marker"

    def test_missing_import(self) -> None:
        """Imports from another module are ignored."""
        root = parse_source("import { marker } from 'other';", "a.ts")

        assert find_named_import_alias(root, "pkg", "marker") is None


class TestGetStringsFromExpression:
    """Test static evaluation of call arguments."""

    def test_string_literals(self) -> None:
        """Single, double and substitution-free template literals."""
        assert first_argument_strings("'HELLO'") == ["HELLO"]
        assert first_argument_strings('"HELLO"') == ["HELLO"]
        assert first_argument_strings("`HELLO`") == ["HELLO"]

    def test_concatenation(self) -> None:
        """Concatenated literals are joined."""
        assert first_argument_strings("'A' + 'B'") == ["AB"]
        assert first_argument_strings("'A' + 'B' + 'C'") == ["ABC"]

    def test_array_of_literals(self) -> None:
        """Each array element contributes a key."""
        assert first_argument_strings("['A', 'B', dynamic, 'C']") == ["A", "B", "C"]

    def test_alternatives(self) -> None:
        """Both sides of || and both branches of ?: contribute."""
        assert first_argument_strings("flag ? 'YES' : 'NO'") == ["YES", "NO"]
        assert first_argument_strings("value || 'FALLBACK'") == ["FALLBACK"]
        assert first_argument_strings("('WRAPPED')") == ["WRAPPED"]

    def test_dynamic_arguments_yield_nothing(self) -> None:
        """Identifiers, substitutions and mixed concatenation contribute nothing."""
        assert first_argument_strings("dynamicVar") == []
        assert first_argument_strings("`a.${b}`") == []
        assert first_argument_strings("'prefix.' + name") == []
        assert first_argument_strings("getKey()") == []

    def test_escapes_are_decoded(self) -> None:
        """Escape sequences in literals are decoded."""
        assert first_argument_strings(r"'it\'s'") == ["it's"]
        assert first_argument_strings(r"'café'") == ["café"]


class TestUnescape:
    """Test JavaScript escape decoding."""

    def test_simple_escapes(self) -> None:
        """Common escapes map to their characters."""
        assert unescape_js_string(r"a\nb\tc\\d") == "a\nb\tc\\d"

    def test_unicode_escapes(self) -> None:
        """Hex and unicode escapes are decoded."""
        assert unescape_js_string(r"\x41B\u{43}") == "ABC"
