"""Shared pytest fixtures."""

from mp_query.testing.fixtures import (  # noqa: F401
    author_records,
    book_records,
    book_source,
    query_settings,
)
