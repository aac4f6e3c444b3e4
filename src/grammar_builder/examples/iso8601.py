"""ISO 8601 calendar date grammar (YYYY-MM-DD, years 1900-2099)."""

from __future__ import annotations

from grammar_builder.core.grammar import Grammar
from grammar_builder.core.options import GrammarOptions


def iso8601_grammar(options: GrammarOptions | None = None) -> Grammar:
    """Return the date rules without a root, so callers can pick the entry point."""
    return (
        Grammar(options)
        .define("singleDigit", lambda r: r.range("[0-9]"))
        .define("nonZeroDigit", lambda r: r.range("[1-9]"))
        .define(
            "dateYear",
            lambda r: r.sequence(r.one_of("19", "20"), r.ref("singleDigit"), r.ref("singleDigit")),
        )
        .define("dateMonth", lambda r: r.one_of(r.sequence("0", r.ref("singleDigit")), "11", "12"))
        .define(
            "dateDay",
            lambda r: r.one_of(
                r.sequence("0", r.ref("nonZeroDigit")),
                r.sequence(r.one_of("1", "2"), r.ref("singleDigit")),
                "30",
                "31",
            ),
        )
        .define(
            "date",
            lambda r: r.sequence(r.ref("dateYear"), "-", r.ref("dateMonth"), "-", r.ref("dateDay")),
        )
    )


def iso8601_date_grammar(options: GrammarOptions | None = None) -> Grammar:
    """The date grammar finalized with ``date`` as its root."""
    return iso8601_grammar(options).root(lambda r: r.ref("date"))
