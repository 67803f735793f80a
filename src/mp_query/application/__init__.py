"""Application – query parsing, search, sorting and pagination."""

from mp_query.application.engine import QueryEngine
from mp_query.application.pagination import PaginationResult, finalize
from mp_query.application.query import QueryDescriptor, QueryParser, SortOrder, parse_query
from mp_query.application.search import (
    FederatedSearch,
    RecordFilter,
    SearchHit,
    SearchSource,
    score_relevance,
)

__all__ = [
    "FederatedSearch",
    "PaginationResult",
    "QueryDescriptor",
    "QueryEngine",
    "QueryParser",
    "RecordFilter",
    "SearchHit",
    "SearchSource",
    "SortOrder",
    "finalize",
    "parse_query",
    "score_relevance",
]
