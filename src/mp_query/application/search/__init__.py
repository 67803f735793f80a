"""Application search – free-text search, field filters and relevance."""
from mp_query.application.search.federated import FederatedSearch, SearchHit, SearchSource
from mp_query.application.search.filters import RecordFilter, matches_filter
from mp_query.application.search.relevance import RelevanceScorer, score_relevance

__all__ = [
    "FederatedSearch",
    "RecordFilter",
    "RelevanceScorer",
    "SearchHit",
    "SearchSource",
    "matches_filter",
    "score_relevance",
]
