"""Application pagination – sorting, slicing and result metadata."""
from mp_query.application.pagination.page import PaginationResult
from mp_query.application.pagination.paginator import finalize, paginate
from mp_query.application.pagination.sorting import sort_by_relevance, sort_records

__all__ = ["PaginationResult", "finalize", "paginate", "sort_by_relevance", "sort_records"]
