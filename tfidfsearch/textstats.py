"""Word counting and term frequency over document text."""

from __future__ import annotations

from collections.abc import Iterator

from tfidfsearch.kmp import count_matches

CHUNK_SIZE = 500

_SEPARATORS = frozenset(" \t\n\v\f\r.:!?,")
# Vocabulary terms are matched together with a terminator, so only the whole
# term (not just all but its last letter) completes an exact match.
_TERMINATOR = "\0"


def count_words(text: str) -> int:
    """Count runs of characters between whitespace and . : ! ? , separators."""
    count = 0
    in_word = False
    for char in text:
        if char in _SEPARATORS:
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def iter_chunks(text: str, size: int = CHUNK_SIZE) -> Iterator[str]:
    """Yield pieces of *text* of fewer than *size* characters, cut at spaces.

    Each piece ends just before the last space of a window of *size*
    characters, and the next window starts at that space. Reading stops when
    a window holds no space past its first character, so text after the last
    space is never yielded.
    """
    if size <= 0:
        raise ValueError("chunk size must be positive")
    pos = 0
    while True:
        window = text[pos : pos + size]
        cut = window.rfind(" ")
        if cut <= 0:
            return
        yield window[:cut]
        pos += cut


def word_frequency(word: str, text: str) -> int:
    """Count the tolerant occurrences of vocabulary *word* in *text*."""
    pattern = word + _TERMINATOR
    return sum(count_matches(pattern, chunk) for chunk in iter_chunks(text))


def term_frequency(count: int, total: int) -> float:
    """Return *count* divided by *total*, or 0.0 when *total* is zero."""
    if total == 0:
        return 0.0
    return count / total