"""
Rule combinators.

A ``RuleBuilder`` is handed to every rule-defining callable passed to
``Grammar.define`` / ``Grammar.root``::

    grammar.define("dateYear", lambda r: r.sequence(r.one_of("19", "20"), r.ref("digit")))

The combinators only construct IR nodes; they never touch the registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Union

from .errors import make_name_error, make_range_error
from .ir import Cardinality, OneOf, Range, Ref, Rule, RuleNode, RulePart, Sequence
from .naming import kebab_case

logger = logging.getLogger(__name__)

_RANGE_ENDINGS = ("]", "]?", "]*", "]+")

# A part may also be a callable that receives the builder and returns a part
PartInput = Union[RulePart, Callable[["RuleBuilder"], RulePart]]


class RuleBuilder:
    """
    Constructors for each rule node kind plus the cardinality modifiers.

    Attributes:
        warn_on_overwrite: Log a warning when a cardinality modifier replaces
            a different one
        rule_name: Name of the rule currently being defined, used in messages
    """

    def __init__(self, warn_on_overwrite: bool = True, rule_name: str | None = None):
        self.warn_on_overwrite = warn_on_overwrite
        self.rule_name = rule_name

    def _resolve(self, part: PartInput) -> RulePart:
        if callable(part):
            return part(self)
        return part

    # === Structural combinators ===

    def sequence(self, *parts: PartInput) -> Sequence:
        """
        All parts must be present, in order. A part is a literal or a rule.

        Example:
            r.sequence("a", r.one_of("b", "c"), "d")
            # "a" ("b" | "c") "d"
        """
        return Sequence(parts=tuple(self._resolve(part) for part in parts))

    def one_of(self, *options: PartInput) -> OneOf:
        """
        Exactly one of the options must be present.

        Example:
            r.one_of("this", r.sequence("A", "B"), "that")
            # ("this" | "A" "B" | "that")
        """
        return OneOf(options=tuple(self._resolve(option) for option in options))

    def ref(self, name: str) -> Ref:
        """
        Reference another rule of the grammar by name.

        Names are matched after normalization, so ``ref("single_digit")``
        resolves to a rule defined as ``singleDigit``.

        Raises:
            ValidationError: If the name has no letters or digits to emit
        """
        if not kebab_case(name):
            raise make_name_error(name, self.rule_name)
        return Ref(name=name)

    def range(self, pattern: str) -> Range:
        """
        A character class such as ``[0-9]``, ``[^\\n]`` or ``[a-zA-Z_]``.

        A trailing ``?``, ``*`` or ``+`` is split off and stored as the node's
        cardinality.

        Raises:
            ValidationError: If the pattern is not a bracketed range literal
        """
        if not (pattern.startswith("[") and pattern.endswith(_RANGE_ENDINGS)):
            raise make_range_error(pattern, self.rule_name)

        cardinality = Cardinality.from_glyph(pattern[-1])
        if cardinality is not None:
            return Range(pattern=pattern[:-1], cardinality=cardinality)
        return Range(pattern=pattern)

    # === Cardinality ===

    def one_or_more(self, rule: Rule) -> Rule:
        """The rule must occur one or more times."""
        return self._with_cardinality(rule, Cardinality.ONE_OR_MORE)

    def zero_or_more(self, rule: Rule) -> Rule:
        """The rule may be absent or occur any number of times."""
        return self._with_cardinality(rule, Cardinality.ZERO_OR_MORE)

    def optional(self, rule: Rule) -> Rule:
        """The rule may be absent or occur once."""
        return self._with_cardinality(rule, Cardinality.OPTIONAL)

    def _with_cardinality(self, rule: RuleNode, cardinality: Cardinality) -> Rule:
        if (
            self.warn_on_overwrite
            and rule.cardinality is not None
            and rule.cardinality != cardinality
        ):
            logger.warning(
                "Rule had cardinality '%s' which was overwritten by '%s'%s",
                rule.cardinality.value,
                cardinality.value,
                f" in rule '{self.rule_name}'" if self.rule_name else "",
            )
        return rule.model_copy(update={"cardinality": cardinality})  # type: ignore[return-value]
