"""
Environment configuration for the grammar builder.

The GRAMMAR_ENV environment variable follows the familiar pattern of
NODE_ENV / RAILS_ENV / FLASK_ENV:

Environment values (case-insensitive, surrounding whitespace ignored):
    - development (default, also "dev" or empty): advisory warnings enabled
    - test (also "testing"): advisory warnings enabled
    - production (also "prod"): advisory warnings suppressed

The variable is only consulted when the caller asks for it, through
``get_grammar_env()`` or ``GrammarOptions.from_env()``. A ``Grammar`` never
reads the environment on its own.

Usage:
    from grammar_builder.core.options import GrammarOptions

    grammar = Grammar(GrammarOptions.from_env())
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)


class GrammarEnv(StrEnum):
    """Runtime environment values."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


_DEFAULT_ENV = GrammarEnv.DEVELOPMENT

GRAMMAR_ENV_VAR = "GRAMMAR_ENV"


def get_grammar_env() -> GrammarEnv:
    """Get the current environment from GRAMMAR_ENV.

    Returns:
        GrammarEnv: The current environment (development, test, or production).
        Defaults to development if GRAMMAR_ENV is not set or invalid.

    Examples:
        >>> import os
        >>> os.environ["GRAMMAR_ENV"] = "production"
        >>> get_grammar_env()
        <GrammarEnv.PRODUCTION: 'production'>
    """
    env_value = os.environ.get(GRAMMAR_ENV_VAR, "").lower().strip()

    if env_value == "production" or env_value == "prod":
        return GrammarEnv.PRODUCTION
    elif env_value == "test" or env_value == "testing":
        return GrammarEnv.TEST
    elif env_value == "development" or env_value == "dev" or env_value == "":
        return GrammarEnv.DEVELOPMENT
    else:
        logger.warning(
            "Unknown GRAMMAR_ENV value '%s'. "
            "Valid values: development, test, production. Defaulting to development.",
            env_value,
        )
        return _DEFAULT_ENV


def is_production() -> bool:
    """Check if running in production environment."""
    return get_grammar_env() == GrammarEnv.PRODUCTION


def should_warn_on_overwrite(override: bool | None = None) -> bool:
    """Determine if overwrite warnings should be emitted.

    Resolution order:
    1. If override is explicitly set (True/False), use it
    2. Otherwise: False in production, True everywhere else
    """
    if override is not None:
        return override
    return not is_production()
