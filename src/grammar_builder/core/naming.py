"""
Rule name normalization.

Rule names are declared in whatever casing the caller likes (``singleDigit``,
``date_year``, ``NonZeroDigit``) and emitted as lowercase, word-delimited
tokens. GBNF output uses kebab-case, Lark EBNF output uses snake_case.
"""

from __future__ import annotations

import re
from enum import StrEnum


class OutputMode(StrEnum):
    """Grammar notation emitted by the serializer."""

    GBNF = "gbnf"
    EBNF = "ebnf"


# Acronym before a capitalized word, capitalized or lowercase word, acronym, number.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(name: str) -> list[str]:
    """Split an identifier into its words.

    Examples:
        >>> split_words("nonZeroDigit")
        ['non', 'Zero', 'Digit']
        >>> split_words("XMLHttpRequest2")
        ['XML', 'Http', 'Request', '2']
    """
    return _WORD_RE.findall(name)


def kebab_case(name: str) -> str:
    """Convert an identifier to kebab-case (``dateYear`` -> ``date-year``)."""
    return "-".join(word.lower() for word in split_words(name))


def snake_case(name: str) -> str:
    """Convert an identifier to snake_case (``dateYear`` -> ``date_year``)."""
    return "_".join(word.lower() for word in split_words(name))


def normalize_rule_name(name: str, mode: OutputMode = OutputMode.GBNF) -> str:
    """Return the output token for a rule name in the given mode.

    The transform is deterministic and idempotent: normalizing an already
    normalized token returns it unchanged.
    """
    if mode == OutputMode.EBNF:
        return snake_case(name)
    return kebab_case(name)
