"""Shared fixtures for grammar builder tests."""

from __future__ import annotations

import pytest

from grammar_builder.core.builder import RuleBuilder
from grammar_builder.core.grammar import Grammar


@pytest.fixture
def r() -> RuleBuilder:
    """A standalone rule builder."""
    return RuleBuilder()


@pytest.fixture
def grammar() -> Grammar:
    """An empty grammar with default options."""
    return Grammar()


@pytest.fixture(autouse=True)
def _clear_grammar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRAMMAR_ENV", raising=False)
