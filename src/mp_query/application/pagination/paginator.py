"""Application pagination – paginate and finalize."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from mp_query.application.pagination.page import PaginationResult
from mp_query.application.pagination.sorting import Resolver, sort_by_relevance, sort_records
from mp_query.application.query.descriptor import SortOrder
from mp_query.kernel.records import value_at

T = TypeVar("T")


def paginate(
    records: Sequence[T],
    page: int,
    limit: int,
    scores: Sequence[int] | None = None,
) -> PaginationResult[T]:
    """Slice one page out of *records*; out-of-range pages are empty."""
    start = (page - 1) * limit
    end = start + limit
    return PaginationResult(
        items=list(records[start:end]),
        total=len(records),
        page=page,
        limit=limit,
        scores=tuple(scores[start:end]) if scores is not None else None,
    )


def finalize(
    records: Sequence[T],
    sort_by: str,
    sort_order: SortOrder | str,
    page: int,
    limit: int,
    scores: Sequence[int] | None = None,
    resolver: Resolver = value_at,
) -> PaginationResult[T]:
    """Sort then paginate.

    With *scores* the records are ordered by descending relevance and
    ``sort_by`` / ``sort_order`` are ignored.
    """
    if scores is not None:
        ordered, ordered_scores = sort_by_relevance(records, scores)
        return paginate(ordered, page, limit, ordered_scores)
    return paginate(sort_records(records, sort_by, sort_order, resolver), page, limit)


__all__ = ["finalize", "paginate"]
