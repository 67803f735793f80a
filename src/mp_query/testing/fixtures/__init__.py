"""Testing fixtures – pytest fixtures for catalog data and record sources."""
from mp_query.testing.fixtures.catalog import author_records, book_records, book_source, query_settings

__all__ = ["author_records", "book_records", "book_source", "query_settings"]
