"""
Builder configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .environment import should_warn_on_overwrite
from .naming import OutputMode


class GrammarOptions(BaseModel):
    """
    Options passed to a Grammar at construction.

    Attributes:
        mode: Notation emitted by build() (GBNF or Lark EBNF)
        warn_on_overwrite: Log a warning when a rule name is redefined or a
            cardinality is replaced by a different one
        validate_refs: Fail build() when a ref names an undefined rule
        debug: Also print the built grammar, highlighted, to the console
    """

    mode: OutputMode = OutputMode.GBNF
    warn_on_overwrite: bool = True
    validate_refs: bool = True
    debug: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, **overrides: object) -> GrammarOptions:
        """Build options with production-aware defaults read from GRAMMAR_ENV."""
        warn = overrides.pop("warn_on_overwrite", None)
        return cls(
            warn_on_overwrite=should_warn_on_overwrite(warn),  # type: ignore[arg-type]
            **overrides,  # type: ignore[arg-type]
        )
