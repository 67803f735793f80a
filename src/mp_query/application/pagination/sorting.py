"""Application pagination – stable record sorting."""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from numbers import Real
from operator import itemgetter
from typing import Any, Callable

from mp_query.application.query.descriptor import SortOrder
from mp_query.kernel.records import Record, value_at

type Resolver = Callable[[Record, str], Any]


def _sort_key(value: Any) -> tuple[int, Any]:
    # bool < number < string < anything else
    if isinstance(value, bool):
        return (0, value)
    if isinstance(value, (Real, Decimal)):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    return (3, str(value))


def sort_records(
    records: Iterable[Record],
    sort_by: str,
    sort_order: SortOrder | str = SortOrder.ASC,
    resolver: Resolver = value_at,
) -> list[Record]:
    """Return a new list of *records* ordered by the value at *sort_by*.

    Records without a value come last in both directions; ties keep their
    input order.
    """
    descending = SortOrder(sort_order) is SortOrder.DESC
    present: list[tuple[tuple[int, Any], Record]] = []
    missing: list[Record] = []
    for record in records:
        value = resolver(record, sort_by)
        if value is None:
            missing.append(record)
        else:
            present.append((_sort_key(value), record))
    present.sort(key=itemgetter(0), reverse=descending)
    return [record for _, record in present] + missing


def sort_by_relevance(
    records: Sequence[Record], scores: Sequence[int]
) -> tuple[list[Record], tuple[int, ...]]:
    """Order *records* by descending score, ties in input order."""
    order = sorted(range(len(records)), key=lambda i: -scores[i])
    return [records[i] for i in order], tuple(scores[i] for i in order)


__all__ = ["sort_by_relevance", "sort_records"]
