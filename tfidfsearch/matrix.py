"""Building, storing and loading the term-by-document TF-IDF matrix."""

from __future__ import annotations

import math
import os
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tfidfsearch.textstats import count_words, term_frequency, word_frequency

PATH_FIELD_SIZE = 270
WORD_FIELD_SIZE = 30
TEXT_ENCODING = "utf-8"

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


class MatrixFormatError(ValueError):
    """Raised when a matrix file cannot be written or read."""


@dataclass
class TermRow:
    """One vocabulary term with its inverse document frequency and weights."""

    word: str
    idf: float = 0.0
    weights: list[float] = field(default_factory=list)


@dataclass
class TfIdfMatrix:
    """TF-IDF weights of every vocabulary term in every document."""

    documents: list[str] = field(default_factory=list)
    rows: list[TermRow] = field(default_factory=list)

    @property
    def num_terms(self) -> int:
        """Number of vocabulary terms (matrix rows)."""
        return len(self.rows)

    @property
    def num_documents(self) -> int:
        """Number of documents (matrix columns)."""
        return len(self.documents)


def list_documents(directory: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the entries of *directory*, skipping hidden ones.

    The paths are sorted by entry name so that the order is reproducible.
    """
    base = os.fspath(directory)
    return [
        f"{base}/{name}"
        for name in sorted(os.listdir(base))
        if not name.startswith(".")
    ]


def read_vocabulary(path: str | os.PathLike[str]) -> list[str]:
    """Read one vocabulary term per line.

    The text after the last newline is kept as a term as well, even when it
    is empty. Terms are cut to the width of the stored word field.
    """
    text = Path(path).read_text(encoding=TEXT_ENCODING)
    return [line[:WORD_FIELD_SIZE] for line in text.split("\n")]


def _read_document(path: str) -> str:
    return Path(path).read_text(encoding=TEXT_ENCODING, errors="replace")


def build_matrix(vocabulary: Iterable[str], documents: Sequence[str]) -> TfIdfMatrix:
    """Compute the TF-IDF matrix of *vocabulary* over the files in *documents*.

    The term frequency is the tolerant occurrence count of a term divided by
    the number of words in the document. The inverse document frequency is
    ``|log10(N / (df + 1))|`` where ``df`` counts the documents in which the
    term occurs.
    """
    rows = [TermRow(word, 0.0, []) for word in vocabulary]
    doc_freq = [0] * len(rows)

    for path in documents:
        text = _read_document(path)
        total = count_words(text)
        for index, row in enumerate(rows):
            tf = term_frequency(word_frequency(row.word, text), total)
            row.weights.append(tf)
            if tf > 0:
                doc_freq[index] += 1

    num_docs = len(documents)
    for row, df in zip(rows, doc_freq):
        ratio = num_docs / (df + 1)
        row.idf = abs(math.log10(ratio)) if ratio > 0 else math.inf
        row.weights = [weight * row.idf for weight in row.weights]

    return TfIdfMatrix(list(documents), rows)


def _fixed_field(text: str, size: int, what: str) -> bytes:
    encoded = text.encode(TEXT_ENCODING)
    if len(encoded) > size:
        raise MatrixFormatError(f"{what} {text!r} does not fit in {size} bytes")
    return encoded.ljust(size, b"\0")


def save_matrix(matrix: TfIdfMatrix, path: str | os.PathLike[str]) -> None:
    """Write *matrix* to the binary file at *path*."""
    width = matrix.num_documents
    parts = [_INT.pack(width)]
    parts.extend(_fixed_field(name, PATH_FIELD_SIZE, "document path") for name in matrix.documents)
    parts.append(_INT.pack(matrix.num_terms))
    for row in matrix.rows:
        if len(row.weights) != width:
            raise MatrixFormatError(
                f"term {row.word!r} has {len(row.weights)} weights, expected {width}"
            )
        parts.append(_fixed_field(row.word, WORD_FIELD_SIZE, "term"))
        parts.append(struct.pack(f"<{width}f", *row.weights))
        parts.append(_FLOAT.pack(row.idf))
    Path(path).write_bytes(b"".join(parts))


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise MatrixFormatError("matrix file is truncated")
        chunk = bytes(self._data[self._pos : end])
        self._pos = end
        return chunk

    def count(self) -> int:
        (value,) = _INT.unpack(self.take(_INT.size))
        if value < 0:
            raise MatrixFormatError(f"negative count {value} in matrix file")
        return value

    def text(self, size: int) -> str:
        raw = self.take(size).split(b"\0", 1)[0]
        return raw.decode(TEXT_ENCODING, errors="replace")

    def floats(self, count: int) -> list[float]:
        return list(struct.unpack(f"<{count}f", self.take(_FLOAT.size * count)))


def load_matrix(path: str | os.PathLike[str]) -> TfIdfMatrix:
    """Read a matrix written by :func:`save_matrix`."""
    reader = _Reader(Path(path).read_bytes())
    width = reader.count()
    documents = [reader.text(PATH_FIELD_SIZE) for _ in range(width)]
    height = reader.count()
    rows = []
    for _ in range(height):
        word = reader.text(WORD_FIELD_SIZE)
        weights = reader.floats(width)
        (idf,) = reader.floats(1)
        rows.append(TermRow(word, idf, weights))
    return TfIdfMatrix(documents, rows)


def format_matrix(matrix: TfIdfMatrix) -> str:
    """Render the document names followed by every row of the matrix."""
    parts = [f"\t{name}" for name in matrix.documents]
    parts.append(f"\n{matrix.num_terms} X {matrix.num_documents} ")
    for row in matrix.rows:
        parts.append(f"\n{row.word} [{row.idf:f}] ->")
        parts.extend(f" {weight:f} " for weight in row.weights)
    return "".join(parts)