"""
grammar-builder - programmatic builder for GBNF and Lark EBNF grammars.

Assemble named rules from combinators instead of hand-writing and escaping
grammar text, then build the whole rule set into one grammar string for a
grammar-constrained parser or decoder.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.builder import RuleBuilder
from .core.errors import GrammarError, StructuralError, ValidationError
from .core.grammar import Grammar
from .core.naming import OutputMode, kebab_case, normalize_rule_name, snake_case
from .core.options import GrammarOptions
from .core.serializer import render_rule

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Grammar",
    "GrammarOptions",
    "RuleBuilder",
    "OutputMode",
    "GrammarError",
    "ValidationError",
    "StructuralError",
    "kebab_case",
    "snake_case",
    "normalize_rule_name",
    "render_rule",
]
