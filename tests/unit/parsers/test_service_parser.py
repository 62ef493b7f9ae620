"""Tests for the TranslateService call parser."""

from __future__ import annotations

import pytest

from translate_extract.parsers.service_parser import (
    TRANSLATE_SERVICE_METHOD_NAMES,
    ServiceParser,
    get_method_names,
)
from translate_extract.utils.core.exceptions import ParseError


def service_class(body: str, member: str = "constructor(private translate: TranslateService) {}") -> str:
    """Wrap ``body`` in a class holding a TranslateService."""
    return f"""
export class MyComponent {{
  {member}

  run(): void {{
    {body}
  }}
}}
"""


class TestServiceParser:
    """Test key extraction from service calls."""

    def test_literal_key(self) -> None:
        """A literal first argument is extracted."""
        result = ServiceParser().extract(service_class("this.translate.get('HELLO');"), "a.ts")

        assert result is not None
        assert result.keys() == ["HELLO"]

    def test_concatenated_key(self) -> None:
        """Concatenated literals form one key."""
        result = ServiceParser().extract(service_class("this.translate.get('A' + 'B');"), "a.ts")

        assert result is not None
        assert result.keys() == ["AB"]

    def test_empty_key_is_skipped(self) -> None:
        """An empty literal argument is not a key."""
        body = "this.translate.get(''); this.translate.instant('K');"
        result = ServiceParser().extract(service_class(body), "a.ts")

        assert result is not None
        assert result.keys() == ["K"]

    def test_dynamic_key_is_skipped(self) -> None:
        """A dynamic argument extracts nothing and does not fail."""
        result = ServiceParser().extract(service_class("this.translate.get(dynamicVar);"), "a.ts")

        assert result is not None
        assert result.is_empty()

    def test_all_default_methods_and_arrays(self) -> None:
        """get, instant and stream are recognised; arrays add every element."""
        body = """
    this.translate.get(['ONE', 'TWO']).subscribe();
    const x = this.translate.instant('THREE', { count: 1 });
    this.translate.stream(`FOUR`);
    this.translate.use('en');
    this.translate.get();
"""
        result = ServiceParser().extract(service_class(body), "a.ts")

        assert result is not None
        assert result.keys() == ["ONE", "TWO", "THREE", "FOUR"]

    def test_field_and_inject_members(self) -> None:
        """Typed fields and inject() fields are recognised."""
        typed = ServiceParser().extract(
            service_class("this.tr.get('TYPED');", member="private tr: TranslateService;"),
            "a.ts",
        )
        injected = ServiceParser().extract(
            service_class("this.tr.instant('INJECTED');", member="private tr = inject(TranslateService);"),
            "a.ts",
        )

        assert typed is not None and typed.keys() == ["TYPED"]
        assert injected is not None and injected.keys() == ["INJECTED"]

    def test_class_without_service(self) -> None:
        """Calls in classes without the service contribute nothing."""
        source = service_class(
            "this.translate.get('NOPE');",
            member="constructor(private translate: OtherService) {}",
        )

        result = ServiceParser().extract(source, "a.ts")

        assert result is not None
        assert result.is_empty()

    def test_custom_service_and_method(self) -> None:
        """Service type and an extra method name can be configured."""
        source = service_class(
            "this.i18n.translateNow('CUSTOM'); this.i18n.get('DEFAULT');",
            member="constructor(private i18n: MyI18nService) {}",
        )

        result = ServiceParser().extract(source, "a.ts", "MyI18nService", "translateNow")

        assert result is not None
        assert result.keys() == ["CUSTOM", "DEFAULT"]

    def test_custom_method_does_not_leak(self) -> None:
        """A custom method name applies to one call only."""
        source = service_class("this.translate.translateNow('CUSTOM');")
        parser = ServiceParser()

        with_method = parser.extract(source, "a.ts", None, "translateNow")
        without_method = parser.extract(source, "a.ts")

        assert with_method is not None and with_method.keys() == ["CUSTOM"]
        assert without_method is not None and without_method.is_empty()
        assert TRANSLATE_SERVICE_METHOD_NAMES == frozenset({"get", "instant", "stream"})
        assert get_method_names("x") == frozenset({"get", "instant", "stream", "x"})

    def test_no_classes_returns_none(self) -> None:
        """Files without class declarations are not applicable."""
        assert ServiceParser().extract("export const A = 1;", "a.ts") is None

    def test_templates_not_applicable(self) -> None:
        """Non-TypeScript files return None."""
        assert ServiceParser().extract("<p>{{ 'A' | translate }}</p>", "a.html") is None

    def test_parse_error_propagates(self) -> None:
        """Malformed TypeScript raises ParseError naming the file."""
        with pytest.raises(ParseError) as exc_info:
            _ = ServiceParser().extract("export class {{{", "src/broken.ts")

        assert "src/broken.ts" in str(exc_info.value)
