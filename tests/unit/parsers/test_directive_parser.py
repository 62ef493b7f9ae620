"""Tests for the translate directive parser."""

from __future__ import annotations

from translate_extract.parsers.directive_parser import DirectiveParser


class TestDirectiveParser:
    """Test translate attributes on elements."""

    def test_attribute_value(self) -> None:
        """The attribute value is the key."""
        result = DirectiveParser().extract('<div translate="ATTR.KEY"></div>', "a.html")

        assert result is not None
        assert result.keys() == ["ATTR.KEY"]

    def test_inner_text(self) -> None:
        """Without a value, the element's own text nodes are keys."""
        template = "<p translate>  TEXT.KEY  </p><span translate><!-- note -->OTHER<b>nested</b></span>"

        result = DirectiveParser().extract(template, "a.html")

        assert result is not None
        assert result.keys() == ["TEXT.KEY", "OTHER"]

    def test_bound_literal(self) -> None:
        """A quoted literal bound to [translate] is the key."""
        template = """<p [translate]="'BOUND.KEY'"></p><p [translate]="dynamicKey"></p>"""

        result = DirectiveParser().extract(template, "a.html")

        assert result is not None
        assert result.keys() == ["BOUND.KEY"]

    def test_legacy_attribute_and_params(self) -> None:
        """ng2-translate is recognised and translateParams does not interfere."""
        template = """<p ng2-translate="LEGACY"></p><p translate [translateParams]="{ n: 1 }">WITH.PARAMS</p>"""

        result = DirectiveParser().extract(template, "a.html")

        assert result is not None
        assert result.keys() == ["LEGACY", "WITH.PARAMS"]

    def test_interpolated_value_skipped(self) -> None:
        """An interpolated attribute value is dynamic."""
        result = DirectiveParser().extract('<p translate="{{ key }}"></p>', "a.html")

        assert result is not None
        assert result.is_empty()

    def test_inline_component_template(self) -> None:
        """A component's inline template is scanned."""
        source = "@Component({ template: '<p translate>INLINE</p>' })\nexport class A {}"

        result = DirectiveParser().extract(source, "a.component.ts")

        assert result is not None
        assert result.keys() == ["INLINE"]

    def test_not_applicable(self) -> None:
        """Components without an inline template return None."""
        source = "@Component({ templateUrl: './a.html' })\nexport class A {}"

        assert DirectiveParser().extract(source, "a.component.ts") is None
