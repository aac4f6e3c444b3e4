"""
Rule node types for the grammar IR.

A grammar-in-progress is a tree of immutable rule nodes. Leaves are either
plain strings (literals, emitted as quoted constants) or ``Range`` nodes;
``Sequence`` and ``OneOf`` hold ordered parts; ``Ref`` names another rule in
the same registry and is resolved by name when the grammar is built.

Every node may carry a single cardinality modifier.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Cardinality(str, Enum):
    """Repetition modifiers. Values are the glyphs used on output."""

    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    OPTIONAL = "?"

    @classmethod
    def from_glyph(cls, glyph: str) -> Cardinality | None:
        """Return the cardinality for a trailing glyph, or None if it is not one."""
        for member in cls:
            if member.value == glyph:
                return member
        return None


class RuleNode(BaseModel):
    """Fields shared by every rule node."""

    cardinality: Cardinality | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def glyph(self) -> str:
        """Cardinality glyph, or an empty string when no modifier is set."""
        return self.cardinality.value if self.cardinality else ""


class Sequence(RuleNode):
    """
    Ordered concatenation of parts.

    Examples:
        - "a" ("b" | "c") "d"
        - date-year "-" date-month
    """

    kind: Literal["sequence"] = "sequence"
    parts: tuple[RulePart, ...] = ()


class OneOf(RuleNode):
    """
    Choice between options. Option order only affects output order.

    Examples:
        - ("19" | "20")
        - ("0" single-digit | "11" | "12")
    """

    kind: Literal["one_of"] = "one_of"
    options: tuple[RulePart, ...] = ()


class Ref(RuleNode):
    """Reference to another rule by its declared name."""

    kind: Literal["ref"] = "ref"
    name: str


class Range(RuleNode):
    """
    Character class leaf.

    ``pattern`` is the bracketed body only (``[0-9]``); a trailing glyph given
    to the range combinator is stored as the cardinality.
    """

    kind: Literal["range"] = "range"
    pattern: str


Rule = Annotated[Union[Sequence, OneOf, Ref, Range], Field(discriminator="kind")]

# A part is either a literal or a nested rule
RulePart = Union[str, Rule]

Sequence.model_rebuild()
OneOf.model_rebuild()


def iter_refs(node: RulePart) -> list[Ref]:
    """Collect every Ref reachable from a node, in output order."""
    if isinstance(node, str):
        return []
    if isinstance(node, Ref):
        return [node]
    if isinstance(node, Range):
        return []
    children = node.parts if isinstance(node, Sequence) else node.options
    refs: list[Ref] = []
    for child in children:
        refs.extend(iter_refs(child))
    return refs
