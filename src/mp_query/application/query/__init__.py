"""Application query – QueryDescriptor value object and QueryParser."""
from mp_query.application.query.descriptor import QueryDescriptor, SortOrder
from mp_query.application.query.parser import RESERVED_PARAMS, QueryParser, parse_query

__all__ = ["RESERVED_PARAMS", "QueryDescriptor", "QueryParser", "SortOrder", "parse_query"]
