"""
Pluralization engine.

A Pluralizer owns its rule tables: two ordered rule sets, two irregular
word maps and a set of uncountable words. Lookups resolve in this order:

1. Irregular word already in the target form (case restored)
2. Irregular word in the other form (mapped, case restored)
3. Uncountable literal (returned unchanged)
4. Newest matching pattern rule (interpolated, case restored)
5. No match (returned unchanged)

Instances are independent, so callers can hold differently configured
pluralizers side by side. Registration is not synchronized; serialize
add_*_rule calls yourself when sharing an instance between threads.
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from .config import load_rules
from .constants import (
    IRREGULAR_RULES,
    PLURAL_RULES,
    RULES_FILE_ENV,
    SINGULAR_RULES,
    UNCOUNTABLE_PATTERNS,
    UNCOUNTABLE_WORDS,
)
from .rules import PatternLike, RuleSet, apply_rule, compile_pattern, sanitize_rule
from .text import restore_case

logger = logging.getLogger("pluralize.engine")


class Pluralizer:
    """
    Converts English words between singular and plural form.

    A bare Pluralizer() has no rules at all; use create_pluralizer() for
    one loaded with the built-in English data.

    Example:
        >>> p = create_pluralizer()
        >>> p.plural("man")
        'men'
        >>> p.pluralize("test", 5, inclusive=True)
        '5 tests'
    """

    def __init__(self):
        self.plural_rules = RuleSet()
        self.singular_rules = RuleSet()
        self.uncountables: set[str] = set()
        # singular -> plural
        self.irregular_singles: dict[str, str] = {}
        # plural -> singular
        self.irregular_plurals: dict[str, str] = {}

    # ═════════════════════════════════════════════════════════════════════
    # Lookups
    # ═════════════════════════════════════════════════════════════════════

    def pluralize(self, word: str, count: Optional[int] = None, inclusive: bool = False) -> str:
        """
        Pluralize or singularize a word based on a count.

        Args:
            word: The word to inflect
            count: How many of the word exist. Exactly 1 gives the singular,
                anything else (including None) gives the plural.
            inclusive: Prefix the result with the count, e.g. "3 ducks"

        Returns:
            The inflected word, optionally prefixed with the count

        Raises:
            TypeError: If count is not an int (bools are rejected too)
        """
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise TypeError(f"count must be an int or None, got {type(count).__name__}: {count!r}")

        pluralized = self.singular(word) if count == 1 else self.plural(word)
        if inclusive and count is not None:
            return f"{count} {pluralized}"
        return pluralized

    def plural(self, word: str) -> str:
        """Pluralize a word."""
        return self._replace_word(word, self.irregular_singles, self.irregular_plurals, self.plural_rules)

    def singular(self, word: str) -> str:
        """Singularize a word."""
        return self._replace_word(word, self.irregular_plurals, self.irregular_singles, self.singular_rules)

    def is_plural(self, word: str) -> bool:
        """Check if a word is plural."""
        return self._check_word(word, self.irregular_singles, self.irregular_plurals, self.plural_rules)

    def is_singular(self, word: str) -> bool:
        """Check if a word is singular."""
        return self._check_word(word, self.irregular_plurals, self.irregular_singles, self.singular_rules)

    # ═════════════════════════════════════════════════════════════════════
    # Registration
    # ═════════════════════════════════════════════════════════════════════

    def add_plural_rule(self, rule: PatternLike, replacement: str) -> None:
        """
        Add a pluralization rule.

        Args:
            rule: A plain word (matched as the whole word) or a compiled pattern
            replacement: Template with $N markers for captured groups

        Raises:
            RuleError: If the pattern does not compile
        """
        self.plural_rules.add(self._to_pattern(rule), replacement)
        logger.debug(f"Added plural rule {rule!r} -> {replacement!r}")

    def add_singular_rule(self, rule: PatternLike, replacement: str) -> None:
        """
        Add a singularization rule.

        Raises:
            RuleError: If the pattern does not compile
        """
        self.singular_rules.add(self._to_pattern(rule), replacement)
        logger.debug(f"Added singular rule {rule!r} -> {replacement!r}")

    def add_uncountable_rule(self, word: PatternLike) -> None:
        """
        Add an uncountable word.

        A plain word goes into the uncountable set. A pattern becomes an
        identity rule ("$0") in both rule sets, so a later rule can still
        shadow it.

        Raises:
            RuleError: If the pattern does not compile
        """
        if isinstance(word, str):
            self.uncountables.add(word.lower())
            logger.debug(f"Added uncountable word {word!r}")
            return

        # Compile once up front so a bad pattern leaves both sets untouched
        pattern = compile_pattern(word)
        self.singular_rules.add(pattern, "$0")
        self.plural_rules.add(pattern, "$0")
        logger.debug(f"Added uncountable pattern {pattern.pattern!r}")

    def add_irregular_rule(self, single: str, plural: str) -> None:
        """
        Add an irregular word pair.

        Both words are lowercased. A pair reusing an existing key overwrites
        the older entry in that map.
        """
        single = single.lower()
        plural = plural.lower()

        self.irregular_singles[single] = plural
        self.irregular_plurals[plural] = single
        logger.debug(f"Added irregular rule {single!r} <-> {plural!r}")

    def load_defaults(self) -> "Pluralizer":
        """Register the built-in English rules, in their canonical order."""
        for single, plural in IRREGULAR_RULES:
            self.add_irregular_rule(single, plural)

        for pattern, replacement in PLURAL_RULES:
            self.add_plural_rule(compile_pattern(pattern), replacement)

        for pattern, replacement in SINGULAR_RULES:
            self.add_singular_rule(compile_pattern(pattern), replacement)

        for word in UNCOUNTABLE_WORDS:
            self.add_uncountable_rule(word)

        for pattern in UNCOUNTABLE_PATTERNS:
            self.add_uncountable_rule(compile_pattern(pattern))

        return self

    # ═════════════════════════════════════════════════════════════════════
    # Internals
    # ═════════════════════════════════════════════════════════════════════

    @staticmethod
    def _to_pattern(rule: PatternLike) -> re.Pattern:
        if isinstance(rule, str):
            return sanitize_rule(rule)
        return compile_pattern(rule)

    def _sanitize_word(self, token: str, word: str, rules: RuleSet) -> str:
        """Apply the newest matching rule to `word`, unless it is uncountable."""
        if not token or token in self.uncountables:
            return word

        found = rules.match(word)
        if found is None:
            return word

        rule, match = found
        return apply_rule(word, rule, match)

    def _replace_word(
        self,
        word: str,
        replace_map: dict[str, str],
        keep_map: dict[str, str],
        rules: RuleSet,
    ) -> str:
        token = word.lower()

        # Already in the target form
        if token in keep_map:
            return restore_case(word, token)

        if token in replace_map:
            return restore_case(word, replace_map[token])

        return self._sanitize_word(token, word, rules)

    def _check_word(
        self,
        word: str,
        replace_map: dict[str, str],
        keep_map: dict[str, str],
        rules: RuleSet,
    ) -> bool:
        token = word.lower()

        if token in keep_map:
            return True

        if token in replace_map:
            return False

        return self._sanitize_word(token, token, rules) == token

    def __repr__(self) -> str:
        return (
            f"Pluralizer(plural_rules={len(self.plural_rules)}, "
            f"singular_rules={len(self.singular_rules)}, "
            f"irregular={len(self.irregular_singles)}, "
            f"uncountable={len(self.uncountables)})"
        )


def create_pluralizer(
    load_defaults: bool = True,
    rules_file: Optional[Union[str, Path]] = None,
) -> Pluralizer:
    """
    Build a Pluralizer.

    Args:
        load_defaults: Register the built-in English rules first
        rules_file: YAML rules file applied on top. Defaults to the file
            named by $PLURALIZE_RULES_FILE, if set.

    Returns:
        A ready-to-use Pluralizer

    Raises:
        ConfigError: If the rules file is unreadable or malformed
        RuleError: If a rule in the file does not compile
    """
    pluralizer = Pluralizer()
    if load_defaults:
        pluralizer.load_defaults()

    if rules_file is None:
        rules_file = os.environ.get(RULES_FILE_ENV) or None

    if rules_file is not None:
        load_rules(pluralizer, Path(rules_file))

    logger.debug(f"Created {pluralizer!r}")
    return pluralizer
