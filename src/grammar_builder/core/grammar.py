"""
Named rule registry.

Usage:
    from grammar_builder import Grammar

    grammar = (
        Grammar()
        .define("digit", lambda r: r.range("[0-9]"))
        .define("number", lambda r: r.one_or_more(r.ref("digit")))
        .root(lambda r: r.ref("number"))
    )
    print(grammar.build())
    # digit ::= [0-9]
    # number ::= digit+
    # root ::= number

Rules are emitted in definition order. The root rule is set last, which
finalizes the registry, so it is always the last line of the output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from .builder import RuleBuilder
from .errors import RuleContext, StructuralError, make_name_error
from .ir import RulePart, iter_refs
from .naming import OutputMode, kebab_case
from .options import GrammarOptions
from .serializer import ROOT_RULE, output_rule_name, render_grammar

logger = logging.getLogger(__name__)

RuleFactory = Callable[[RuleBuilder], RulePart]


class Grammar:
    """
    Accumulates named rules and a root rule, then builds grammar text.

    The registry is meant for single-owner use: define rules, set the root,
    build. It holds no lock; callers sharing one instance across threads
    must synchronize the definition phase themselves.
    """

    def __init__(self, options: GrammarOptions | None = None):
        self.options = options or GrammarOptions()
        self._rules: dict[str, RulePart] = {}

    @property
    def rules(self) -> Mapping[str, RulePart]:
        """Read-only view of the registry, in definition order."""
        return MappingProxyType(self._rules)

    @property
    def is_finalized(self) -> bool:
        """True once a root rule has been set."""
        return ROOT_RULE in self._rules

    def _builder(self, name: str) -> RuleBuilder:
        return RuleBuilder(warn_on_overwrite=self.options.warn_on_overwrite, rule_name=name)

    def define(self, name: str, factory: RuleFactory) -> Grammar:
        """
        Define a named rule that other rules can reference.

        Args:
            name: Rule name as the caller spells it (normalized on output)
            factory: Callable receiving a RuleBuilder and returning the rule

        Returns:
            This grammar, for chaining

        Raises:
            ValidationError: If name has no ASCII letters or digits
            StructuralError: If name is "root" or the root rule is already set
        """
        if not kebab_case(name):
            raise make_name_error(name)
        if name == ROOT_RULE:
            raise StructuralError(
                "Cannot define a rule named 'root', use root() instead",
                RuleContext(rule=name, mode=self.options.mode),
            )
        if self.is_finalized:
            raise StructuralError(
                "Cannot define rules after the root rule has been set",
                RuleContext(rule=name, mode=self.options.mode),
            )

        rule = factory(self._builder(name))

        if name in self._rules and self.options.warn_on_overwrite:
            logger.warning("Rule '%s' was already defined, but is being overwritten", name)

        self._rules[name] = rule
        logger.debug("Defined rule '%s'", name)
        return self

    def root(self, factory: RuleFactory) -> Grammar:
        """
        Set the root rule (entry point) and finalize the grammar.

        No named rules can be defined afterwards. Calling root() again
        replaces the root rule.
        """
        rule = factory(self._builder(ROOT_RULE))
        if self.is_finalized:
            logger.debug("Replacing root rule")
        self._rules[ROOT_RULE] = rule
        return self

    def dangling_refs(self) -> list[tuple[str, str]]:
        """Return (rule, referenced name) pairs whose target is not defined.

        Names are compared by their output token, the same way build() joins
        a ref to its definition line.
        """
        defined = {output_rule_name(name) for name in self._rules}
        dangling: list[tuple[str, str]] = []
        for name, rule in self._rules.items():
            for ref in iter_refs(rule):
                if output_rule_name(ref.name) not in defined:
                    dangling.append((name, ref.name))
        return dangling

    def build(self, mode: OutputMode | None = None) -> str:
        """
        Build the grammar text.

        Args:
            mode: Notation to emit; defaults to the mode in the options

        Raises:
            StructuralError: If no root rule is set, or a ref names an
                undefined rule while validate_refs is enabled
        """
        mode = mode or self.options.mode

        if not self.is_finalized:
            raise StructuralError("No root rule defined")

        if self.options.validate_refs:
            dangling = self.dangling_refs()
            if dangling:
                rule, _ = dangling[0]
                missing = ", ".join(sorted({target for _, target in dangling}))
                raise StructuralError(
                    f"Reference to undefined rule(s): {missing}",
                    RuleContext(rule=rule, mode=mode),
                )

        output = render_grammar(self._rules.items(), mode)
        logger.debug("Built %s grammar with %d rules", mode.value, len(self._rules))

        if self.options.debug:
            from grammar_builder.cli_ui import print_grammar

            print_grammar(output, mode)

        return output
