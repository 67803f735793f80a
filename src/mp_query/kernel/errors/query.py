"""Query validation errors raised while parsing request parameters.

Every error carries ``status_code = 400`` so a transport layer can map the
whole family with a single ``except QueryValidationError`` clause.
"""

from __future__ import annotations

from typing import Any, Sequence

from mp_query.kernel.errors.domain import ValidationError


class QueryValidationError(ValidationError):
    """A query parameter failed validation."""

    default_code = "invalid_query"
    status_code: int = 400

    def __init__(self, message: str, *, field: str, value: Any = None, **kwargs: Any) -> None:
        detail = {"field": field, "value": value}
        detail.update(kwargs.pop("detail", None) or {})
        super().__init__(
            message,
            errors=[{"field": field, "message": message}],
            detail=detail,
            **kwargs,
        )
        self.field = field
        self.value = value


class InvalidPageError(QueryValidationError):
    default_code = "invalid_page"

    def __init__(self, value: Any) -> None:
        super().__init__("Page must be a positive integer", field="page", value=value)


class InvalidLimitError(QueryValidationError):
    default_code = "invalid_limit"

    def __init__(self, value: Any, *, max_limit: int = 100) -> None:
        super().__init__(
            f"Limit must be between 1 and {max_limit}",
            field="limit",
            value=value,
            detail={"min": 1, "max": max_limit},
        )
        self.max_limit = max_limit


class InvalidSortFieldError(QueryValidationError):
    default_code = "invalid_sort_field"

    def __init__(self, value: Any, allowed: Sequence[str]) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        super().__init__(
            f"Invalid sort field. Allowed fields: {', '.join(self.allowed)}",
            field="sortBy",
            value=value,
            detail={"allowed": list(self.allowed)},
        )


class InvalidSortOrderError(QueryValidationError):
    default_code = "invalid_sort_order"

    def __init__(self, value: Any) -> None:
        super().__init__(
            'Sort order must be "asc" or "desc"',
            field="sortOrder",
            value=value,
            detail={"allowed": ["asc", "desc"]},
        )


class InvalidSearchTermError(QueryValidationError):
    """Search term missing or shorter than the configured minimum."""

    default_code = "invalid_search_term"

    def __init__(self, value: Any, *, min_length: int = 2) -> None:
        super().__init__(
            f"Search query must be at least {min_length} characters long",
            field="search",
            value=value,
            detail={"min_length": min_length},
        )
        self.min_length = min_length


__all__ = [
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidSearchTermError",
    "InvalidSortFieldError",
    "InvalidSortOrderError",
    "QueryValidationError",
]
