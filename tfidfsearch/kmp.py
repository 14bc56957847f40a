"""Error-tolerant Knuth-Morris-Pratt pattern counting."""

from __future__ import annotations

_TERMINATOR = "\0"


def _fold(char: str) -> str:
    """Lower-case a single ASCII character, leaving anything else untouched."""
    return char.lower() if char.isascii() else char


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of *pattern*."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length > 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _matches_with_gap(pattern: str, text: str, start: int, pattern_index: int) -> bool:
    """Check that *text* from *start* agrees with *pattern* from *pattern_index*.

    The comparison stops at whichever of the two ends first, so a text that
    runs out early still counts as agreeing.
    """
    for text_char, pattern_char in zip(text[start:], pattern[pattern_index:]):
        if text_char != pattern_char:
            return False
    return True


def count_matches(pattern: str, text: str) -> int:
    """Count occurrences of *pattern* in *text*, tolerating one missing letter.

    Letters are compared case-insensitively. An occurrence is counted once
    the pattern is matched up to its last character or in full, or when the
    text around a mismatch lines up with the pattern after skipping one
    character on either side. After a hit, no other hit is counted within
    the length of the pattern.
    """
    size_pattern = len(pattern)
    size_text = len(text)
    if size_pattern == 0 or size_text == 0:
        return 0

    lps = build_lps(pattern)
    count = 0
    i = j = 0
    error_pos = -1

    while i < size_text:
        pattern_char = pattern[j] if j < size_pattern else _TERMINATOR
        if _fold(text[i]) == _fold(pattern_char):
            i += 1
            j += 1
        else:
            if error_pos == -1 and (
                (i + 1 < size_text and _matches_with_gap(pattern, text, i + 1, j))
                or (
                    i + 1 < size_text
                    and j + 1 < size_pattern
                    and _matches_with_gap(pattern, text, i + 1, j + 1)
                )
                or (j + 1 < size_pattern and _matches_with_gap(pattern, text, i, j + 1))
            ):
                error_pos = i
                count += 1
                i += 1
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

        if j in (size_pattern, size_pattern - 1) and error_pos == -1:
            count += 1
            error_pos = j
            j = lps[j - 1] if j > 0 else 0

        if error_pos != -1 and i - error_pos > size_pattern - 1:
            error_pos = -1

    return count