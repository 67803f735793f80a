"""Application search – RecordFilter.

Reduces a record collection by free-text search and field filters. Both
steps are linear scans that return a new list; the input is never touched.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mp_query.application.query.descriptor import QueryDescriptor
from mp_query.application.search.relevance import RelevanceScorer, score_relevance
from mp_query.kernel.records import Record, resolve_path, value_at


def _strict_equal(actual: Any, expected: Any) -> bool:
    if isinstance(actual, bool) is not isinstance(expected, bool):
        return False
    if isinstance(actual, str) is not isinstance(expected, str):
        return False
    return actual == expected


def matches_filter(record: Record, field: str, expected: Any) -> bool:
    """True when the value at *field* satisfies *expected*.

    A string expectation against a string field is a case-insensitive
    substring test; anything else needs exact equality. Missing fields
    never match.
    """
    resolved = resolve_path(record, field)
    if resolved.is_none():
        return False
    actual = resolved.unwrap()
    if isinstance(expected, str) and isinstance(actual, str):
        return expected.lower() in actual.lower()
    return _strict_equal(actual, expected)


def _text_contains(value: Any, term: str) -> bool:
    return bool(value) and term in str(value).lower()


class RecordFilter:
    """Free-text search plus AND-combined field filters over records.

    ``relevance_fields`` are the fields fed to the scorer and default to
    ``searchable_fields``.
    """

    def __init__(
        self,
        searchable_fields: Iterable[str] = (),
        relevance_fields: Iterable[str] | None = None,
        scorer: RelevanceScorer = score_relevance,
    ) -> None:
        self.searchable_fields = tuple(searchable_fields)
        self.relevance_fields = (
            tuple(relevance_fields) if relevance_fields is not None else self.searchable_fields
        )
        self._scorer = scorer

    def search(self, records: Iterable[Record], term: str | None) -> list[Record]:
        if not term or not self.searchable_fields:
            return list(records)
        folded = term.lower()
        return [
            record
            for record in records
            if any(_text_contains(value_at(record, f), folded) for f in self.searchable_fields)
        ]

    def filter(self, records: Iterable[Record], filters: Mapping[str, Any]) -> list[Record]:
        filtered = list(records)
        for field in sorted(filters):
            expected = filters[field]
            filtered = [record for record in filtered if matches_filter(record, field, expected)]
        return filtered

    def apply(self, records: Iterable[Record], descriptor: QueryDescriptor) -> list[Record]:
        """Search then filter *records* according to *descriptor*."""
        return self.filter(self.search(records, descriptor.search), descriptor.filters)

    def score(self, records: Sequence[Record], term: str) -> tuple[int, ...]:
        """Relevance of each record, positionally aligned with *records*."""
        return tuple(
            self._scorer(term, [value_at(record, f) for f in self.relevance_fields])
            for record in records
        )


__all__ = ["RecordFilter", "matches_filter"]
