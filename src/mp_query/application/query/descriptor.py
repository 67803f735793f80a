"""Application query – QueryDescriptor value object."""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class QueryDescriptor:
    """Validated, normalised form of a query request.

    Only the lower bounds are checked here; ``limit <= max_limit`` depends on
    :class:`QuerySettings` and is enforced by the parser and the engine.
    """

    page: int = 1
    limit: int = 10
    sort_by: str = "id"
    sort_order: SortOrder = SortOrder.ASC
    search: str | None = None
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")
        object.__setattr__(self, "sort_order", SortOrder(self.sort_order))
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def has_search(self) -> bool:
        return bool(self.search)


__all__ = ["QueryDescriptor", "SortOrder"]
