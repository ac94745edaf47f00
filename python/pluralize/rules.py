"""
Pattern rules and ordered rule sets.

A RuleSet is append-only and is scanned from the most recently added rule
back to the first, so a rule registered later overrides earlier rules that
match the same shape.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .errors import RuleError
from .text import interpolate, restore_case

PatternLike = Union[str, re.Pattern]


# Case folding is ASCII-only, so non-ASCII letters such as "ſ" or the
# Kelvin sign never fold onto ASCII rules
RULE_FLAGS = re.IGNORECASE | re.ASCII


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Compile a rule pattern case-insensitively.

    Args:
        pattern: Regex source or an already compiled pattern

    Returns:
        Compiled pattern with re.IGNORECASE and re.ASCII set

    Raises:
        RuleError: If the pattern does not compile
    """
    try:
        if isinstance(pattern, re.Pattern):
            if (pattern.flags & RULE_FLAGS) == RULE_FLAGS:
                return pattern
            return re.compile(pattern.pattern, (pattern.flags & ~re.UNICODE) | RULE_FLAGS)
        return re.compile(pattern, RULE_FLAGS)
    except re.error as e:
        raise RuleError(f"Invalid rule pattern {pattern!r}: {e}") from e


def sanitize_rule(word: str) -> re.Pattern:
    """Anchor a plain word into a whole-word pattern (^word$)."""
    return compile_pattern(f"^{word}$")


@dataclass(frozen=True)
class Rule:
    """One pattern and its replacement template."""

    pattern: re.Pattern
    replacement: str


class RuleSet:
    """Ordered, append-only collection of rules."""

    def __init__(self):
        self._rules: list[Rule] = []

    def add(self, pattern: PatternLike, replacement: str) -> Rule:
        """
        Append a rule.

        Raises:
            RuleError: If the pattern does not compile. The set is unchanged.
        """
        rule = Rule(compile_pattern(pattern), replacement)
        self._rules.append(rule)
        return rule

    def match(self, word: str) -> Optional[Tuple[Rule, re.Match]]:
        """
        Find the newest rule whose pattern matches anywhere in `word`.

        Returns:
            (rule, match) for the winning rule, or None if nothing matches
        """
        for rule in reversed(self._rules):
            match = rule.pattern.search(word)
            if match:
                return rule, match
        return None

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"


def apply_rule(word: str, rule: Rule, match: re.Match) -> str:
    """
    Rewrite the first match of `rule` in `word`.

    The replacement template is interpolated with the match groups, then
    re-cased after the matched text. A zero-length match (e.g. a suffix
    append on "s?$") takes its casing from the last character of `word`.

    Examples:
        >>> rule = Rule(compile_pattern("([^aeiouy]|qu)y$"), "$1ies")
        >>> apply_rule("City", rule, rule.pattern.search("City"))
        'Cities'
    """
    groups = [match.group(0)] + [g or "" for g in match.groups()]
    replacement = interpolate(rule.replacement, groups)

    matched = match.group(0)
    case_source = matched if matched else word[-1]
    replacement = restore_case(case_source, replacement)

    return word[: match.start()] + replacement + word[match.end():]
