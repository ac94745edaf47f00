"""
Text helpers for rule replacement: marker interpolation and case restoration.

Both are pure functions so the rule engine can compose them:
interpolate the replacement template first, then restore the casing
of the matched text onto the result.
"""

import re
from typing import Sequence

# Markers are capped at two digits ($0 - $99)
MARKERS_REGEX = re.compile(r"\$(\d{1,2})")


def interpolate(replacement: str, groups: Sequence[str]) -> str:
    """
    Expand $N markers in a replacement template.

    Args:
        replacement: Template such as "$1ies"
        groups: Captured groups, groups[0] is the whole match. Groups that
            did not participate should already be empty strings.

    Returns:
        Template with every marker replaced by its group text

    Examples:
        >>> interpolate("$1ies", ["ty", "t"])
        'ties'
        >>> interpolate("$1$2ves", ["life", "li", ""])
        'lives'
    """

    def _expand(marker: re.Match) -> str:
        index = int(marker.group(1))
        if index < len(groups):
            return groups[index] or ""
        return ""

    return MARKERS_REGEX.sub(_expand, replacement)


def restore_case(word: str, token: str) -> str:
    """
    Apply the casing style of `word` onto `token`.

    Args:
        word: Text whose casing should be copied
        token: Text to re-case

    Returns:
        `token` in the casing style of `word`

    Examples:
        >>> restore_case("WHISKY", "whiskies")
        'WHISKIES'
        >>> restore_case("Title", "titles")
        'Titles'
    """
    if not token:
        return token

    # Exact match
    if word == token:
        return token

    # Lower cased words, e.g. "hello"
    if word == word.lower():
        return token.lower()

    # Upper cased words, e.g. "WHISKY"
    if word == word.upper():
        return token.upper()

    # Title cased words, e.g. "Title"
    if "A" <= word[0] <= "Z":
        return token[0].upper() + token[1:].lower()

    return token.lower()
