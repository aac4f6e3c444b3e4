"""
Rule serialization.

Renders IR nodes to grammar text:

- literals become double-quoted strings with embedded quotes escaped
- sequences are space-joined and only parenthesized when they carry a
  cardinality
- alternations are always parenthesized, even when nested in another
  alternation
- refs render as the target's output name, never the target's body
- ranges render verbatim (wrapped in ``/.../`` for Lark EBNF, with bare
  slashes escaped)
"""

from __future__ import annotations

from collections.abc import Iterable

from .ir import OneOf, Range, Ref, RuleNode, RulePart, Sequence
from .naming import OutputMode, normalize_rule_name

ROOT_RULE = "root"

_ROOT_OUTPUT_NAMES = {
    OutputMode.GBNF: "root",
    OutputMode.EBNF: "start",
}

_DEFINITION_OPERATORS = {
    OutputMode.GBNF: " ::= ",
    OutputMode.EBNF: ": ",
}


def quote_literal(text: str) -> str:
    """Quote a literal, escaping embedded double quotes."""
    escaped = text.replace('"', '\\"')
    return f'"{escaped}"'


def escape_regex_slashes(pattern: str) -> str:
    """Escape every unescaped ``/`` so the pattern fits inside a ``/.../`` literal."""
    out: list[str] = []
    escaped = False
    for char in pattern:
        if char == "/" and not escaped:
            out.append("\\")
        out.append(char)
        escaped = char == "\\" and not escaped
    return "".join(out)


def render_rule(rule: RulePart, mode: OutputMode = OutputMode.GBNF) -> str:
    """Render one node (and its children) as a grammar expression."""
    if isinstance(rule, str):
        return quote_literal(rule)
    if not isinstance(rule, RuleNode):
        raise TypeError(f"Cannot render object of type {type(rule).__name__}")

    glyph = rule.glyph
    if isinstance(rule, Sequence):
        result = " ".join(render_rule(part, mode) for part in rule.parts)
        if glyph:
            result = f"({result}){glyph}"
        return result
    if isinstance(rule, OneOf):
        return "(" + " | ".join(render_rule(option, mode) for option in rule.options) + ")" + glyph
    if isinstance(rule, Ref):
        return output_rule_name(rule.name, mode) + glyph
    if isinstance(rule, Range):
        pattern = rule.pattern if mode == OutputMode.GBNF else f"/{escape_regex_slashes(rule.pattern)}/"
        return pattern + glyph
    raise TypeError(f"Unknown rule kind: {type(rule).__name__}")


def output_rule_name(name: str, mode: OutputMode = OutputMode.GBNF) -> str:
    """Return the output token for a registry key or a ref target."""
    if name == ROOT_RULE:
        return _ROOT_OUTPUT_NAMES[mode]
    return normalize_rule_name(name, mode)


def render_definition(name: str, rule: RulePart, mode: OutputMode = OutputMode.GBNF) -> str:
    """Render a single ``name ::= expression`` line."""
    return output_rule_name(name, mode) + _DEFINITION_OPERATORS[mode] + render_rule(rule, mode)


def render_grammar(
    rules: Iterable[tuple[str, RulePart]], mode: OutputMode = OutputMode.GBNF
) -> str:
    """Render registry entries in the order given, one definition per line."""
    return "\n".join(render_definition(name, rule, mode) for name, rule in rules)
