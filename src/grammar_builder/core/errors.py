"""
Error types for grammar construction and serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .naming import OutputMode, normalize_rule_name


class GrammarError(Exception):
    """Base exception for all grammar builder errors."""

    def __init__(self, message: str, context: Optional["RuleContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ValidationError(GrammarError):
    """
    Raised when a combinator receives malformed input.

    Examples:
    - Range literal without surrounding brackets
    - Range literal with an unsupported suffix
    """

    pass


class StructuralError(GrammarError):
    """
    Raised when the rule registry lifecycle is violated.

    Examples:
    - Defining a rule named "root" through define()
    - Defining rules after the root rule was set
    - Building a grammar that has no root rule
    - Building a grammar with references to undefined rules
    """

    pass


@dataclass
class RuleContext:
    """
    The rule being defined when an error occurred.

    Attributes:
        rule: Rule name as declared by the caller
        mode: Output mode used to render the name in messages
    """

    rule: str
    mode: OutputMode = OutputMode.GBNF

    def format(self) -> str:
        """
        Format the context as a human-readable prefix.

        Returns:
            Formatted string like: "in rule date-year"
        """
        return f"in rule {normalize_rule_name(self.rule, self.mode)}"


def make_range_error(pattern: str, rule: str | None = None) -> ValidationError:
    """Helper to create the error raised for a malformed range literal."""
    context = RuleContext(rule=rule) if rule is not None else None
    return ValidationError(
        "malformed range literal: expected a bracketed character class "
        f"such as [0-9], optionally followed by ?, * or +, received: {pattern}",
        context,
    )


def make_name_error(name: str, rule: str | None = None) -> ValidationError:
    """Helper to create the error raised for a name that normalizes to nothing."""
    context = RuleContext(rule=rule) if rule is not None else None
    return ValidationError(
        f"rule name {name!r} has no ASCII letters or digits and cannot be emitted",
        context,
    )
