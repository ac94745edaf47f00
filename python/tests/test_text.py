"""
Tests for marker interpolation and case restoration.
"""

from pluralize.text import interpolate, restore_case


class TestInterpolate:
    """Test $N marker expansion."""

    def test_single_marker(self):
        assert interpolate("$1ies", ["ty", "t"]) == "ties"

    def test_whole_match_marker(self):
        """$0 is the whole match."""
        assert interpolate("$0", ["fish"]) == "fish"

    def test_multiple_markers(self):
        assert interpolate("$1$2ves", ["life", "li", ""]) == "lives"
        assert interpolate("$2-$1", ["ab", "a", "b"]) == "b-a"

    def test_no_markers(self):
        """Templates without markers are copied verbatim."""
        assert interpolate("men", ["man"]) == "men"
        assert interpolate("", ["s"]) == ""

    def test_non_participating_group(self):
        """Groups that did not take part expand to nothing."""
        assert interpolate("$1$2ves", ["wolf", "", "l"]) == "lves"
        assert interpolate("$1x", ["a", None]) == "x"

    def test_marker_past_last_group(self):
        """A marker beyond the captured groups expands to nothing."""
        assert interpolate("a$5b", ["x"]) == "ab"

    def test_two_digit_markers(self):
        groups = [str(i) for i in range(12)]
        assert interpolate("$10", groups) == "10"
        assert interpolate("$11!", groups) == "11!"

    def test_markers_capped_at_two_digits(self):
        """$123 reads as $12 followed by a literal 3."""
        groups = [f"g{i}" for i in range(13)]
        assert interpolate("$123", groups) == "g123"
        assert interpolate("$123", ["x"]) == "3"

    def test_dollar_without_digit(self):
        assert interpolate("$x$", ["a"]) == "$x$"


class TestRestoreCase:
    """Test casing transfer from the original word to a replacement."""

    def test_exact_match(self):
        assert restore_case("test", "test") == "test"
        assert restore_case("MiXeD", "MiXeD") == "MiXeD"

    def test_lower_case(self):
        assert restore_case("hello", "WORLD") == "world"

    def test_upper_case(self):
        assert restore_case("WHISKY", "whiskies") == "WHISKIES"

    def test_title_case(self):
        assert restore_case("Title", "tEST") == "Test"
        assert restore_case("McDonald", "mcdonalds") == "Mcdonalds"

    def test_other_case_lowers(self):
        """Mixed case not starting with A-Z falls back to lower case."""
        assert restore_case("iPhone", "ABC") == "abc"

    def test_uncased_word_counts_as_lower(self):
        assert restore_case("123", "ABC") == "abc"

    def test_empty_token(self):
        assert restore_case("word", "") == ""

    def test_single_character_source(self):
        """Zero-length matches take casing from one character."""
        assert restore_case("T", "s") == "S"
        assert restore_case("t", "S") == "s"
