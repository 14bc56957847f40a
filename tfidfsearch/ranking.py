"""Ordering of documents by similarity score."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class RankedDocument:
    """A document position together with its similarity score."""

    score: float
    position: int


def rank_scores(scores: Iterable[float]) -> list[RankedDocument]:
    """Rank scores from highest to lowest.

    Each score keeps the position it had in *scores*. Equal scores are
    ordered with the later position first.
    """
    ranked = [RankedDocument(score, position) for position, score in enumerate(scores)]
    ranked.sort(key=lambda doc: (doc.score, doc.position), reverse=True)
    return ranked