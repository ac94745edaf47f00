"""
pluralize - English singular/plural inflection.

Rule-based conversion between singular and plural nouns, with irregular
word tables, uncountable words and case-preserving replacement.

    >>> from pluralize import create_pluralizer
    >>> p = create_pluralizer()
    >>> p.pluralize("duck", 3, inclusive=True)
    '3 ducks'
"""

__version__ = "0.1.0"

from .config import apply_rules, load_rules
from .engine import Pluralizer, create_pluralizer
from .errors import ConfigError, PluralizeError, RuleError
from .logging_config import get_logger, setup_logging
from .rules import Rule, RuleSet
from .text import interpolate, restore_case

__all__ = [
    "Pluralizer",
    "create_pluralizer",
    "apply_rules",
    "load_rules",
    "Rule",
    "RuleSet",
    "interpolate",
    "restore_case",
    "PluralizeError",
    "RuleError",
    "ConfigError",
    "setup_logging",
    "get_logger",
]
