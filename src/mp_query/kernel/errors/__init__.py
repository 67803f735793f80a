"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError               (domain.py)
    │   └── ValidationError
    │       └── QueryValidationError   (query.py)
    │           ├── InvalidPageError
    │           ├── InvalidLimitError
    │           ├── InvalidSortFieldError
    │           ├── InvalidSortOrderError
    │           └── InvalidSearchTermError
    └── ApplicationError          (application.py)
"""

from mp_query.kernel.errors.application import ApplicationError
from mp_query.kernel.errors.base import BaseError
from mp_query.kernel.errors.domain import DomainError, ValidationError
from mp_query.kernel.errors.query import (
    InvalidLimitError,
    InvalidPageError,
    InvalidSearchTermError,
    InvalidSortFieldError,
    InvalidSortOrderError,
    QueryValidationError,
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
