"""Kernel – framework-agnostic building blocks."""

from mp_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidLimitError,
    InvalidPageError,
    InvalidSearchTermError,
    InvalidSortFieldError,
    InvalidSortOrderError,
    QueryValidationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidSearchTermError",
    "InvalidSortFieldError",
    "InvalidSortOrderError",
    "QueryValidationError",
    "ValidationError",
]
