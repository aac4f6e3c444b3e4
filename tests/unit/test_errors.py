"""Tests for grammar error types."""

from grammar_builder.core.errors import (
    GrammarError,
    RuleContext,
    StructuralError,
    ValidationError,
    make_range_error,
)
from grammar_builder.core.naming import OutputMode


class TestGrammarError:
    def test_hierarchy(self) -> None:
        assert issubclass(ValidationError, GrammarError)
        assert issubclass(StructuralError, GrammarError)

    def test_message_without_context(self) -> None:
        error = StructuralError("No root rule defined")
        assert str(error) == "No root rule defined"
        assert error.context is None

    def test_message_with_context(self) -> None:
        error = StructuralError("boom", RuleContext(rule="dateYear"))
        assert str(error) == "in rule date-year: boom"
        assert error.message == "boom"

    def test_context_uses_mode(self) -> None:
        assert RuleContext(rule="dateYear", mode=OutputMode.EBNF).format() == "in rule date_year"


class TestMakeRangeError:
    def test_echoes_pattern(self) -> None:
        error = make_range_error("a-z")
        assert isinstance(error, ValidationError)
        assert "a-z" in str(error)

    def test_with_rule(self) -> None:
        assert str(make_range_error("a-z", "letter")).startswith("in rule letter: ")
