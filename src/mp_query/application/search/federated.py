"""Application search – FederatedSearch across several typed collections.

Every source is searched on its own fields; matches are wrapped in
:class:`SearchHit` objects tagged with the source ``type`` and ranked in a
single combined listing.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from mp_query.application.pagination import PaginationResult, finalize, paginate
from mp_query.application.pagination.sorting import sort_by_relevance
from mp_query.application.query import QueryParser
from mp_query.application.search.filters import RecordFilter
from mp_query.application.search.relevance import RelevanceScorer, score_relevance
from mp_query.config.settings import QuerySettings
from mp_query.kernel.errors import InvalidSearchTermError
from mp_query.kernel.records import Record, RecordSource, snapshot_of, value_at
from mp_query.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_SORT_FIELDS: tuple[str, ...] = ("relevance", "type", "title", "name")


@dataclasses.dataclass(frozen=True)
class SearchSource:
    """One searchable collection: its type tag, records and fields."""

    type: str
    records: RecordSource[Any] | Sequence[Any]
    searchable_fields: tuple[str, ...]
    relevance_fields: tuple[str, ...] | None = None


def _public_attrs(record: Any) -> Iterator[tuple[str, Any]]:
    if hasattr(record, "__dict__"):
        yield from vars(record).items()
    for cls in type(record).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if name != "__dict__" and hasattr(record, name):
                yield name, getattr(record, name)


@dataclasses.dataclass(frozen=True)
class SearchHit:
    type: str
    record: Record
    relevance: int

    def fields(self) -> dict[str, Any]:
        record = self.record
        if isinstance(record, Mapping):
            return dict(record)
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return dataclasses.asdict(record)
        if isinstance(record, tuple) and hasattr(record, "_asdict"):
            return dict(record._asdict())
        return {k: v for k, v in _public_attrs(record) if not k.startswith("_")}

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.fields(), "relevance": self.relevance}


def hit_value(hit: SearchHit, path: str) -> Any:
    """Resolve ``type`` and ``relevance`` on the hit, anything else on its record."""
    if path == "type":
        return hit.type
    if path == "relevance":
        return hit.relevance
    return value_at(hit.record, path)


class FederatedSearch:
    """Search several collections at once and rank the combined hits."""

    def __init__(
        self,
        sources: Iterable[SearchSource],
        *,
        allowed_sort_fields: Iterable[str] = DEFAULT_SORT_FIELDS,
        scorer: RelevanceScorer = score_relevance,
        settings: QuerySettings | None = None,
    ) -> None:
        base = settings or QuerySettings()
        self._settings = dataclasses.replace(base, default_sort_by=base.relevance_sort_key)
        self._sources = tuple(sources)
        self._parser = QueryParser(allowed_sort_fields, self._settings)
        self._filters = tuple(
            (source, RecordFilter(source.searchable_fields, source.relevance_fields, scorer))
            for source in self._sources
        )

    @property
    def sources(self) -> tuple[SearchSource, ...]:
        return self._sources

    def search(self, raw_params: Mapping[str, Any]) -> PaginationResult[SearchHit]:
        descriptor = self._parser.parse(raw_params)
        raw_term = descriptor.search or ""
        term = raw_term.strip().lower()
        if len(term) < self._settings.min_search_length:
            raise InvalidSearchTermError(descriptor.search, min_length=self._settings.min_search_length)

        hits = self._collect(term)
        if "type" in descriptor.filters:
            wanted = descriptor.filters["type"]
            hits = [hit for hit in hits if hit.type == wanted]

        if descriptor.sort_by == self._settings.relevance_sort_key:
            ordered, scores = sort_by_relevance(hits, [hit.relevance for hit in hits])
            result = paginate(ordered, descriptor.page, descriptor.limit, scores)
        else:
            result = finalize(
                hits, descriptor.sort_by, descriptor.sort_order,
                descriptor.page, descriptor.limit, resolver=hit_value,
            )

        log.info("search.federated", term=term, sources=len(self._sources), total=result.total)
        return result

    def _collect(self, term: str) -> list[SearchHit]:
        hits: list[SearchHit] = []
        for source, record_filter in self._filters:
            matched = record_filter.search(snapshot_of(source.records), term)
            scores = record_filter.score(matched, term)
            hits.extend(SearchHit(source.type, record, score) for record, score in zip(matched, scores))
        return hits


__all__ = ["DEFAULT_SORT_FIELDS", "FederatedSearch", "SearchHit", "SearchSource", "hit_value"]
