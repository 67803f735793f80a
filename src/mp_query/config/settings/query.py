"""Config settings – QuerySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_query.config.settings.base import Settings
from mp_query.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class QuerySettings(Settings):
    """Defaults and bounds applied when parsing and running queries.

    Loaded from ``QUERY_*`` environment variables by
    :class:`~mp_query.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "QUERY"

    default_page: int = 1
    default_limit: int = 10
    max_limit: int = 100
    default_sort_by: str = "id"
    default_sort_order: str = "asc"
    relevance_sort_key: str = "relevance"
    min_search_length: int = 2

    def _validate(self) -> None:
        if self.max_limit < 1:
            raise InvalidSettingValueError("max_limit", self.max_limit, "must be >= 1")
        if not 1 <= self.default_limit <= self.max_limit:
            raise InvalidSettingValueError(
                "default_limit", self.default_limit, f"must be between 1 and {self.max_limit}"
            )
        if self.default_page < 1:
            raise InvalidSettingValueError("default_page", self.default_page, "must be >= 1")
        if self.default_sort_order.lower() not in ("asc", "desc"):
            raise InvalidSettingValueError(
                "default_sort_order", self.default_sort_order, 'must be "asc" or "desc"'
            )
        if self.min_search_length < 0:
            raise InvalidSettingValueError(
                "min_search_length", self.min_search_length, "must be >= 0"
            )


__all__ = ["QuerySettings"]
