"""Tests for rule rendering."""

import pytest

from grammar_builder.core.builder import RuleBuilder
from grammar_builder.core.naming import OutputMode
from grammar_builder.core.serializer import (
    escape_regex_slashes,
    output_rule_name,
    quote_literal,
    render_definition,
    render_grammar,
    render_rule,
)


class TestLiterals:
    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("abc", '"abc"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("back\\slash", '"back\\slash"'),
            ("", '""'),
        ],
    )
    def test_quote_literal(self, literal: str, expected: str) -> None:
        assert quote_literal(literal) == expected

    def test_sequence_of_single_literal(self, r: RuleBuilder) -> None:
        assert render_rule(r.sequence('a"b')) == '"a\\"b"'


class TestSequence:
    def test_literals_space_joined(self, r: RuleBuilder) -> None:
        assert render_rule(r.sequence("a", "b", "c")) == '"a" "b" "c"'

    def test_nested_sequence_flattens(self, r: RuleBuilder) -> None:
        node = r.sequence("a", r.sequence("b", r.sequence("c")), "d")
        assert render_rule(node) == '"a" "b" "c" "d"'

    def test_nested_one_of_is_parenthesized(self, r: RuleBuilder) -> None:
        assert render_rule(r.sequence("a", r.one_of("b", "c"), "d")) == '"a" ("b" | "c") "d"'

    def test_empty_sequence(self, r: RuleBuilder) -> None:
        assert render_rule(r.sequence()) == ""
        assert render_rule(r.zero_or_more(r.sequence())) == "()*"


class TestOneOf:
    def test_always_parenthesized(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_of("a", "b", "c")) == '("a" | "b" | "c")'

    def test_single_option(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_of("a")) == '("a")'

    def test_sequence_option(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_of("a", r.sequence("b", "c"), "d")) == '("a" | "b" "c" | "d")'

    def test_nested_one_of_doubles_parentheses(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_of("a", r.one_of("b", "c"), "d")) == '("a" | ("b" | "c") | "d")'

    def test_directly_nested(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_of(r.one_of("a"))) == '(("a"))'


class TestRefAndRange:
    def test_ref_is_normalized(self, r: RuleBuilder) -> None:
        assert render_rule(r.ref("nonZeroDigit")) == "non-zero-digit"
        assert render_rule(r.ref("nonZeroDigit"), OutputMode.EBNF) == "non_zero_digit"

    def test_range_verbatim(self, r: RuleBuilder) -> None:
        assert render_rule(r.range("[^\\n]")) == "[^\\n]"

    def test_range_glyph_reattached(self, r: RuleBuilder) -> None:
        assert render_rule(r.range("[0-9]+")) == "[0-9]+"

    def test_range_in_ebnf(self, r: RuleBuilder) -> None:
        assert render_rule(r.range("[a-z]*"), OutputMode.EBNF) == "/[a-z]/*"


class TestCardinalityRendering:
    @pytest.mark.parametrize(
        ("method", "glyph"),
        [("zero_or_more", "*"), ("one_or_more", "+"), ("optional", "?")],
    )
    def test_sequence_wrapped(self, r: RuleBuilder, method: str, glyph: str) -> None:
        node = getattr(r, method)(r.sequence("a", "b"))
        assert render_rule(node) == f'("a" "b"){glyph}'

    @pytest.mark.parametrize(
        ("method", "glyph"),
        [("zero_or_more", "*"), ("one_or_more", "+"), ("optional", "?")],
    )
    def test_one_of_single_parentheses(self, r: RuleBuilder, method: str, glyph: str) -> None:
        node = getattr(r, method)(r.one_of("a", "b"))
        assert render_rule(node) == f'("a" | "b"){glyph}'

    def test_ref_suffix(self, r: RuleBuilder) -> None:
        assert render_rule(r.optional(r.ref("sign"))) == "sign?"

    def test_range_suffix(self, r: RuleBuilder) -> None:
        assert render_rule(r.one_or_more(r.range("[0-9]"))) == "[0-9]+"

    def test_inside_sequence(self, r: RuleBuilder) -> None:
        node = r.sequence(r.optional(r.ref("sign")), r.one_or_more(r.ref("digit")), r.zero_or_more(r.sequence(",", r.ref("digit"))))
        assert render_rule(node) == 'sign? digit+ ("," digit)*'


class TestDefinitions:
    def test_gbnf_definition(self, r: RuleBuilder) -> None:
        assert render_definition("dateYear", r.ref("singleDigit")) == "date-year ::= single-digit"

    def test_ebnf_definition(self, r: RuleBuilder) -> None:
        line = render_definition("dateYear", r.ref("singleDigit"), OutputMode.EBNF)
        assert line == "date_year: single_digit"

    def test_root_name_per_mode(self) -> None:
        assert output_rule_name("root") == "root"
        assert output_rule_name("root", OutputMode.EBNF) == "start"

    def test_render_grammar_no_trailing_newline(self, r: RuleBuilder) -> None:
        text = render_grammar([("a", r.sequence("x")), ("root", r.ref("a"))])
        assert text == 'a ::= "x"\nroot ::= a'

    def test_unknown_object_rejected(self) -> None:
        with pytest.raises(TypeError):
            render_rule(42)  # type: ignore[arg-type]


class TestRootReferences:
    def test_ref_to_root_uses_root_output_name(self, r: RuleBuilder) -> None:
        assert render_rule(r.ref("root")) == "root"
        assert render_rule(r.optional(r.ref("root")), OutputMode.EBNF) == "start?"


class TestEbnfRegexEscaping:
    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("[^/]", "[^\\/]"),
            ("[a/b/]", "[a\\/b\\/]"),
            ("[^\\/]", "[^\\/]"),
            ("[\\\\/]", "[\\\\\\/]"),
            ("[0-9]", "[0-9]"),
        ],
    )
    def test_escape_regex_slashes(self, pattern: str, expected: str) -> None:
        assert escape_regex_slashes(pattern) == expected

    def test_ebnf_range_escapes_slash(self, r: RuleBuilder) -> None:
        assert render_rule(r.range("[^/]*"), OutputMode.EBNF) == "/[^\\/]/*"

    def test_gbnf_range_untouched(self, r: RuleBuilder) -> None:
        assert render_rule(r.range("[^/]")) == "[^/]"
