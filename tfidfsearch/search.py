"""Turning a typed query into a TF-IDF vector and ranking documents by it."""

from __future__ import annotations

import itertools
import math
import os
from collections.abc import Iterable, Sequence

from tfidfsearch.kmp import count_matches
from tfidfsearch.matrix import TfIdfMatrix
from tfidfsearch.ranking import RankedDocument

DEFAULT_LIMIT = 5
MAX_LIMIT_DIGITS = 4

_ACCENT_MAP = dict(zip("áéíóãõç", "aeioaoc"))
_DIGITS = frozenset("0123456789")


def _fold(char: str) -> str:
    """Lower-case an ASCII character, leaving anything else untouched."""
    return char.lower() if char.isascii() else char


def strip_accent(letter: str) -> str:
    """Return the plain letter for an accented one, or *letter* unchanged."""
    return _ACCENT_MAP.get(_fold(letter), letter)


def equal_ignoring_accents(first: str, second: str) -> bool:
    """Compare two words letter by letter, ignoring the known accents."""
    if len(first) != len(second):
        return False
    return all(strip_accent(a) == strip_accent(b) for a, b in zip(first, second))


def parse_query(text: str) -> tuple[int | None, str]:
    """Split typed input into an optional result limit and the query proper.

    Leading whitespace is skipped and only the first line is used. Up to
    four leading digits give the number of results wanted; the rest of the
    line, followed by a single space, is the query.
    """
    query = text.lstrip().split("\n", 1)[0] + " "
    digits = "".join(itertools.takewhile(_DIGITS.__contains__, query[:MAX_LIMIT_DIGITS]))
    limit = int(digits) if digits else None
    return limit, query[len(digits):]


def query_vector(query: str, matrix: TfIdfMatrix) -> list[float]:
    """Weight each vocabulary term by its occurrences in *query* times its IDF."""
    vector = [0.0] * matrix.num_terms
    for token in query.split(" "):
        if not token:
            continue
        word = "".join(_fold(char) for char in token)
        for index, row in enumerate(matrix.rows):
            if equal_ignoring_accents(word, row.word):
                vector[index] = count_matches(word, query) * row.idf
                break
    return vector


def similarity_vector(matrix: TfIdfMatrix, query: Sequence[float]) -> list[float]:
    """Return the cosine similarity between *query* and every document column.

    A document is given 0.0 when either vector has no length.
    """
    if not matrix.rows:
        return [0.0] * matrix.num_documents
    norm_query = math.sqrt(sum(value * value for value in query))
    similarities = []
    for column in zip(*(row.weights for row in matrix.rows)):
        dot = sum(weight * value for weight, value in zip(column, query))
        norm_doc = math.sqrt(sum(weight * weight for weight in column))
        denominator = norm_doc * norm_query
        similarities.append(0.0 if denominator == 0 else dot / denominator)
    return similarities


def first_line(path: str | os.PathLike[str]) -> str:
    """Return the first line of the file at *path*, newline included."""
    with open(path, "rb") as handle:
        return handle.readline().decode("utf-8", errors="replace")


def format_titles(
    ranking: Iterable[RankedDocument],
    documents: Sequence[str],
    limit: int | None = None,
) -> str:
    """Render the path, score and title of the best ranked documents.

    Without a *limit* the best five are shown.
    """
    count = DEFAULT_LIMIT if limit is None else max(limit, 0)
    parts = []
    for number, doc in enumerate(itertools.islice(ranking, count), start=1):
        path = documents[doc.position]
        parts.append(f"\nCaminho: {path} [{doc.score:f}]")
        parts.append(f"\n{number} - {first_line(path)}")
    return "".join(parts)