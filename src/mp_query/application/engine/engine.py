"""Application engine – QueryEngine facade over a single record collection."""
from __future__ import annotations

import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from mp_query.application.pagination import PaginationResult, finalize, paginate
from mp_query.application.query import QueryDescriptor, QueryParser
from mp_query.application.search import RecordFilter, RelevanceScorer, score_relevance
from mp_query.config.settings import QuerySettings
from mp_query.kernel.errors import InvalidLimitError
from mp_query.kernel.records import RecordSource, snapshot_of
from mp_query.observability.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


class QueryEngine(Generic[T]):
    """Run declarative queries against an in-memory collection.

    Usage::

        engine = QueryEngine(
            searchable_fields=["title", "genre", "author.name"],
            allowed_sort_fields=["id", "title", "publishedYear", "relevance"],
        )
        result = engine.query(books, {"search": "potter", "sortBy": "relevance"})

    Sorting by ``settings.relevance_sort_key`` orders by descending relevance
    when a search term is present and keeps input order otherwise.
    """

    def __init__(
        self,
        searchable_fields: Iterable[str] = (),
        allowed_sort_fields: Iterable[str] = (),
        relevance_fields: Iterable[str] | None = None,
        scorer: RelevanceScorer = score_relevance,
        settings: QuerySettings | None = None,
    ) -> None:
        self._settings = settings or QuerySettings()
        self._parser = QueryParser(allowed_sort_fields, self._settings)
        self._filter = RecordFilter(searchable_fields, relevance_fields, scorer)

    @property
    def parser(self) -> QueryParser:
        return self._parser

    @property
    def record_filter(self) -> RecordFilter:
        return self._filter

    def wants_relevance(self, descriptor: QueryDescriptor) -> bool:
        return descriptor.sort_by == self._settings.relevance_sort_key

    def run(self, records: Sequence[T], descriptor: QueryDescriptor) -> PaginationResult[T]:
        """Filter, sort and paginate *records* for an already parsed query."""
        if descriptor.limit > self._settings.max_limit:
            raise InvalidLimitError(descriptor.limit, max_limit=self._settings.max_limit)
        t0 = time.monotonic()
        filtered = self._filter.apply(records, descriptor)

        if self.wants_relevance(descriptor):
            if descriptor.search:
                scores = self._filter.score(filtered, descriptor.search)
                result = finalize(
                    filtered, descriptor.sort_by, descriptor.sort_order,
                    descriptor.page, descriptor.limit, scores=scores,
                )
            else:
                result = paginate(filtered, descriptor.page, descriptor.limit)
        else:
            result = finalize(
                filtered, descriptor.sort_by, descriptor.sort_order,
                descriptor.page, descriptor.limit,
            )

        log.debug(
            "query.completed",
            scanned=len(records),
            total=result.total,
            page=result.page,
            limit=result.limit,
            duration_ms=round((time.monotonic() - t0) * 1000, 2),
        )
        return result

    def query(
        self,
        source: RecordSource[T] | Sequence[T],
        raw_params: Mapping[str, Any],
    ) -> PaginationResult[T]:
        """Parse *raw_params* and run the query against one snapshot of *source*."""
        descriptor = self._parser.parse(raw_params)
        return self.run(snapshot_of(source), descriptor)


__all__ = ["QueryEngine"]
