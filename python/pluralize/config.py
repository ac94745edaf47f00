"""
Custom rule files.

Rules are described in YAML:

    uncountable: [paper, "/pok[eé]mon$/"]
    irregular: {irregular: regular}
    plural:
      - ["/gex$/", gexii]
      - [person, peeps]
    singular:
      - ["/singles$/", singular]

Strings wrapped in slashes are raw patterns; anything else is a plain word.
Sections are applied in the order uncountable, irregular, plural, singular,
so later sections take precedence the same way later registrations do.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable

import yaml

from .errors import ConfigError
from .rules import PatternLike, compile_pattern, sanitize_rule

if TYPE_CHECKING:
    from .engine import Pluralizer

logger = logging.getLogger("pluralize.config")

SECTIONS = ("uncountable", "irregular", "plural", "singular")


def parse_rule(value: Any) -> PatternLike:
    """
    Turn a rule entry into a plain word or a compiled pattern.

    Examples:
        >>> parse_rule("paper")
        'paper'
        >>> parse_rule("/gex$/").pattern
        'gex$'
    """
    if not isinstance(value, str):
        raise ConfigError(f"Rule must be a string, got {type(value).__name__}: {value!r}")
    if len(value) >= 2 and value.startswith("/") and value.endswith("/"):
        return compile_pattern(value[1:-1])
    return value


def _pairs(section: str, value: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(value, dict):
        return list(value.items())
    if isinstance(value, list):
        pairs = []
        for entry in value:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise ConfigError(f"'{section}' entries must be [rule, replacement] pairs, got {entry!r}")
            pairs.append((entry[0], entry[1]))
        return pairs
    raise ConfigError(f"'{section}' must be a mapping or a list of pairs")


def _rule_pairs(section: str, value: Any) -> list[tuple[PatternLike, str]]:
    """Validate a plural/singular section into (pattern, replacement) pairs."""
    pairs = []
    for rule, replacement in _pairs(section, value):
        if not isinstance(replacement, str):
            raise ConfigError(f"'{section}' replacement must be a string, got {replacement!r}")
        pattern = parse_rule(rule)
        # Anchor plain words now so a bad one fails before anything is registered
        if isinstance(pattern, str):
            pattern = sanitize_rule(pattern)
        pairs.append((pattern, replacement))
    return pairs


def apply_rules(pluralizer: "Pluralizer", data: dict[str, Any]) -> "Pluralizer":
    """
    Register the rules described by `data` on `pluralizer`.

    The whole document is validated first; on any error nothing is
    registered.

    Args:
        pluralizer: Target pluralizer (mutated in place)
        data: Parsed rules document

    Returns:
        The same pluralizer, for chaining

    Raises:
        ConfigError: On unknown sections or malformed entries
        RuleError: If a pattern does not compile
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Rules document must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise ConfigError(f"Unknown rule sections: {', '.join(sorted(map(str, unknown)))}")

    uncountable = data.get("uncountable") or []
    if not isinstance(uncountable, list):
        raise ConfigError("'uncountable' must be a list")
    uncountable = [parse_rule(entry) for entry in uncountable]

    irregular = _pairs("irregular", data.get("irregular") or [])
    for single, plural in irregular:
        if not isinstance(single, str) or not isinstance(plural, str):
            raise ConfigError(f"Irregular words must be strings, got {single!r}: {plural!r}")

    plural_rules = _rule_pairs("plural", data.get("plural") or [])
    singular_rules = _rule_pairs("singular", data.get("singular") or [])

    for entry in uncountable:
        pluralizer.add_uncountable_rule(entry)

    for single, plural in irregular:
        pluralizer.add_irregular_rule(single, plural)

    for pattern, replacement in plural_rules:
        pluralizer.add_plural_rule(pattern, replacement)

    for pattern, replacement in singular_rules:
        pluralizer.add_singular_rule(pattern, replacement)

    return pluralizer


def load_rules(pluralizer: "Pluralizer", path: Path) -> "Pluralizer":
    """
    Load a YAML rules file into `pluralizer`.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
        RuleError: If a pattern does not compile
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read rules file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in rules file {path}: {e}") from e

    if data is None:
        data = {}

    apply_rules(pluralizer, data)
    logger.info(f"Loaded custom rules from {path}")
    return pluralizer
