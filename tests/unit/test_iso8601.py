"""End-to-end test with the bundled ISO 8601 date grammar."""

import pytest

from grammar_builder.core.errors import StructuralError
from grammar_builder.core.naming import OutputMode
from grammar_builder.core.options import GrammarOptions
from grammar_builder.examples.iso8601 import iso8601_date_grammar, iso8601_grammar

EXPECTED_GBNF = """\
single-digit ::= [0-9]
non-zero-digit ::= [1-9]
date-year ::= ("19" | "20") single-digit single-digit
date-month ::= ("0" single-digit | "11" | "12")
date-day ::= ("0" non-zero-digit | ("1" | "2") single-digit | "30" | "31")
date ::= date-year "-" date-month "-" date-day
root ::= date"""


class TestIso8601:
    def test_gbnf_output(self) -> None:
        grammar = iso8601_grammar().root(lambda r: r.ref("date"))
        assert grammar.build() == EXPECTED_GBNF

    def test_finalized_helper(self) -> None:
        assert iso8601_date_grammar().build() == EXPECTED_GBNF

    def test_requires_root(self) -> None:
        with pytest.raises(StructuralError):
            iso8601_grammar().build()

    def test_ebnf_output(self) -> None:
        text = iso8601_date_grammar(GrammarOptions(mode=OutputMode.EBNF)).build()
        assert text.splitlines() == [
            "single_digit: /[0-9]/",
            "non_zero_digit: /[1-9]/",
            'date_year: ("19" | "20") single_digit single_digit',
            'date_month: ("0" single_digit | "11" | "12")',
            'date_day: ("0" non_zero_digit | ("1" | "2") single_digit | "30" | "31")',
            'date: date_year "-" date_month "-" date_day',
            "start: date",
        ]

    def test_build_twice(self) -> None:
        grammar = iso8601_date_grammar()
        assert grammar.build() == grammar.build()
