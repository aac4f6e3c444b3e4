"""Bundled example grammars."""

from grammar_builder.examples.iso8601 import iso8601_date_grammar, iso8601_grammar

__all__ = ["iso8601_grammar", "iso8601_date_grammar"]
