"""Application pagination – PaginationResult."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass(frozen=True)
class PaginationResult(Generic[T]):
    """One page of query results with computed navigation properties.

    ``scores`` is set only when the page was ordered by relevance and is
    positionally aligned with ``items``.
    """

    items: list[T]
    total: int
    page: int
    limit: int
    scores: tuple[int, ...] | None = None

    @property
    def total_pages(self) -> int:
        if self.limit <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], U]) -> "PaginationResult[U]":
        """Return a new result with each item transformed by *fn*."""
        return dataclasses.replace(self, items=[fn(item) for item in self.items])  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "data": list(self.items),
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }
        if self.scores is not None:
            payload["scores"] = list(self.scores)
        return payload


__all__ = ["PaginationResult"]
