"""Testing support – sample catalog, pytest fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_query.testing.fixtures"]
"""

from mp_query.testing.catalog import AUTHORS, BOOKS, books_with_authors
from mp_query.testing.generators import raw_query_strategy, record_strategy, records_strategy

__all__ = [
    "AUTHORS",
    "BOOKS",
    "books_with_authors",
    "raw_query_strategy",
    "record_strategy",
    "records_strategy",
]
