"""
Grammar intermediate representation.

Rule nodes built by the combinators and stored in a Grammar registry.
"""

from .rules import Cardinality, OneOf, Range, Ref, Rule, RuleNode, RulePart, Sequence, iter_refs

__all__ = [
    "Cardinality",
    "OneOf",
    "Range",
    "Ref",
    "Rule",
    "RuleNode",
    "RulePart",
    "Sequence",
    "iter_refs",
]
