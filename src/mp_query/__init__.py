"""
mp_query – in-memory query engine for record collections.

Import path convention::

    from mp_query.application.query import parse_query
    from mp_query.application.engine import QueryEngine
    from mp_query.kernel.errors import QueryValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
