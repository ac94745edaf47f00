"""
Tests for rule compilation, rule set ordering and rule application.
"""

import re

import pytest

from pluralize.errors import RuleError
from pluralize.rules import Rule, RuleSet, apply_rule, compile_pattern, sanitize_rule


class TestCompilePattern:
    """Test case-insensitive pattern compilation."""

    def test_string_pattern(self):
        pattern = compile_pattern("gex$")
        assert pattern.flags & re.IGNORECASE
        assert pattern.search("REGEX")

    def test_compiled_pattern_gets_ignorecase(self):
        pattern = compile_pattern(re.compile("gex$"))
        assert pattern.flags & re.IGNORECASE
        assert pattern.search("ReGeX")

    def test_compiled_rule_pattern_reused(self):
        original = re.compile("gex$", re.IGNORECASE | re.ASCII)
        assert compile_pattern(original) is original

    def test_compiled_pattern_gets_ascii(self):
        pattern = compile_pattern(re.compile("gex$", re.IGNORECASE))
        assert pattern.flags & re.ASCII
        assert not pattern.flags & re.UNICODE

    def test_case_folding_is_ascii_only(self):
        """Non-ASCII letters never fold onto ASCII ones, or onto each other."""
        assert not compile_pattern("s$").search("\u017f")
        assert not compile_pattern("k$").search("\u212a")
        assert not compile_pattern("é").search("É")
        assert compile_pattern(r"[^\x00-\x7F]$").search("\u212a")

    def test_invalid_pattern(self):
        with pytest.raises(RuleError) as exc_info:
            compile_pattern("(unclosed")
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_lookaround_supported(self):
        pattern = compile_pattern(r"(?<=b)us$")
        assert pattern.search("bus")
        assert not pattern.search("pus")


class TestSanitizeRule:
    """Test anchoring of plain words."""

    def test_whole_word_only(self):
        pattern = sanitize_rule("person")
        assert pattern.search("person")
        assert pattern.search("PERSON")
        assert not pattern.search("salesperson")
        assert not pattern.search("persons")


class TestRuleSet:
    """Test append-only ordering and newest-first matching."""

    def test_empty(self):
        rules = RuleSet()
        assert len(rules) == 0
        assert rules.match("anything") is None

    def test_insertion_order_kept(self):
        rules = RuleSet()
        rules.add("a$", "1")
        rules.add("b$", "2")
        assert [rule.replacement for rule in rules] == ["1", "2"]

    def test_last_added_rule_wins(self):
        rules = RuleSet()
        rules.add("s?$", "s")
        rules.add("x$", "xes")
        rule, match = rules.match("box")
        assert rule.replacement == "xes"
        assert match.group(0) == "x"

    def test_falls_back_to_older_rule(self):
        rules = RuleSet()
        rules.add("s?$", "s")
        rules.add("x$", "xes")
        rule, _ = rules.match("cat")
        assert rule.replacement == "s"

    def test_search_not_anchored(self):
        """Patterns match anywhere unless they anchor themselves."""
        rules = RuleSet()
        rules.add("oo", "ee")
        rule, match = rules.match("tooth")
        assert match.group(0) == "oo"

    def test_invalid_pattern_leaves_set_unchanged(self):
        rules = RuleSet()
        rules.add("s?$", "s")
        with pytest.raises(RuleError):
            rules.add("[", "x")
        assert len(rules) == 1


class TestApplyRule:
    """Test interpolation, case restoration and splicing together."""

    def _apply(self, pattern: str, replacement: str, word: str) -> str:
        rule = Rule(compile_pattern(pattern), replacement)
        return apply_rule(word, rule, rule.pattern.search(word))

    def test_suffix_replacement(self):
        assert self._apply("([^aeiouy]|qu)y$", "$1ies", "city") == "cities"

    def test_zero_length_match_uses_last_character_case(self):
        assert self._apply("s?$", "s", "test") == "tests"
        assert self._apply("s?$", "s", "TEST") == "TESTS"
        assert self._apply("s?$", "s", "Test") == "Tests"

    def test_matched_text_casing(self):
        assert self._apply("([^aeiouy]|qu)y$", "$1ies", "WHISKY") == "WHISKIES"
        assert self._apply("m[ae]n$", "men", "Man") == "Men"

    def test_only_first_match_replaced(self):
        assert self._apply("a", "o", "banana") == "bonana"

    def test_empty_group_in_template(self):
        assert self._apply("(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$", "$1$2ves", "wolf") == "wolves"
