"""Application search – relevance scoring for free-text matches."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

EXACT_MATCH_SCORE = 100
PREFIX_MATCH_SCORE = 50
SUBSTRING_MATCH_SCORE = 25
WORD_MATCH_SCORE = 10


class RelevanceScorer(Protocol):
    """Port: rank how strongly *fields* match *term* (higher is better)."""

    def __call__(self, term: str, fields: Iterable[Any]) -> int: ...


def _field_score(term: str, field: str) -> int:
    if field == term:
        return EXACT_MATCH_SCORE
    if field.startswith(term):
        return PREFIX_MATCH_SCORE
    if term in field:
        return SUBSTRING_MATCH_SCORE
    field_words = field.split()
    return WORD_MATCH_SCORE * sum(
        1 for search_word in term.split() for word in field_words if search_word in word
    )


def score_relevance(term: str, fields: Iterable[Any]) -> int:
    """Sum the match score of *term* against every field.

    Per field, case-insensitively: exact match 100, prefix 50, substring 25,
    otherwise 10 for every (search word, field word) pair where the field
    word contains the search word. Scores are not capped, so long fields
    with many partial word hits can outrank a single prefix match.

    ``None`` and empty fields score zero.
    """
    if not term:
        return 0
    folded_term = term.lower()
    total = 0
    for field in fields:
        if field is None or field == "":
            continue
        total += _field_score(folded_term, str(field).lower())
    return total


__all__ = [
    "EXACT_MATCH_SCORE",
    "PREFIX_MATCH_SCORE",
    "SUBSTRING_MATCH_SCORE",
    "WORD_MATCH_SCORE",
    "RelevanceScorer",
    "score_relevance",
]
