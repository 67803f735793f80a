"""Application query – QueryParser.

Turns raw, query-string shaped parameters into a :class:`QueryDescriptor`.
Checks run in a fixed order and the first failure is raised:

1. ``page``      → :class:`InvalidPageError`
2. ``limit``     → :class:`InvalidLimitError`
3. ``sortBy``    → :class:`InvalidSortFieldError` (only with an allow-list)
4. ``sortOrder`` → :class:`InvalidSortOrderError`

Every key that is not reserved becomes a filter. Values are taken as
strings; ``"42"`` becomes ``42`` and ``"4.5"`` becomes ``4.5``.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from mp_query.application.query.descriptor import QueryDescriptor, SortOrder
from mp_query.config.settings import QuerySettings
from mp_query.kernel.errors import (
    InvalidLimitError,
    InvalidPageError,
    InvalidSortFieldError,
    InvalidSortOrderError,
    QueryValidationError,
)
from mp_query.observability.logging import SensitiveFieldsFilter, get_logger

log = get_logger(__name__)

RESERVED_PARAMS: frozenset[str] = frozenset({"page", "limit", "sortBy", "sortOrder", "search"})

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_INT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[0-9]+\.[0-9]+")

_redactor = SensitiveFieldsFilter()


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _normalise(raw_params: Mapping[str, Any]) -> dict[str, Any]:
    """Collapse repeated keys to their first value."""
    getter = getattr(raw_params, "getlist", None) or getattr(raw_params, "getall", None)
    normalised: dict[str, Any] = {}
    for key in raw_params.keys():
        if key in normalised:
            continue
        value = getter(key) if getter is not None else raw_params[key]
        normalised[key] = _first(value)
    return normalised


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def _coerce_filter_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    return value


class QueryParser:
    """Parse raw request parameters against an optional sort allow-list."""

    def __init__(
        self,
        allowed_sort_fields: Iterable[str] = (),
        settings: QuerySettings | None = None,
    ) -> None:
        self._allowed = tuple(allowed_sort_fields)
        self._settings = settings or QuerySettings()

    @property
    def allowed_sort_fields(self) -> tuple[str, ...]:
        return self._allowed

    def parse(self, raw_params: Mapping[str, Any]) -> QueryDescriptor:
        params = _normalise(raw_params)
        try:
            descriptor = self._build(params)
        except QueryValidationError as exc:
            log.info("query.rejected", code=exc.code, field=exc.field, params=_redactor.redact(params))
            raise
        log.debug(
            "query.parsed",
            page=descriptor.page,
            limit=descriptor.limit,
            sort_by=descriptor.sort_by,
            sort_order=descriptor.sort_order.value,
            search=descriptor.search,
            filters=sorted(descriptor.filters),
        )
        return descriptor

    def _build(self, params: dict[str, Any]) -> QueryDescriptor:
        s = self._settings

        raw_page = params.get("page")
        page = s.default_page if raw_page is None else _parse_int(raw_page)
        if page is None or page < 1:
            raise InvalidPageError(raw_page)

        raw_limit = params.get("limit")
        limit = s.default_limit if raw_limit is None else _parse_int(raw_limit)
        if limit is None or not 1 <= limit <= s.max_limit:
            raise InvalidLimitError(raw_limit, max_limit=s.max_limit)

        raw_sort_by = params.get("sortBy")
        sort_by = s.default_sort_by if raw_sort_by is None else str(raw_sort_by)
        if self._allowed and sort_by not in self._allowed:
            raise InvalidSortFieldError(sort_by, self._allowed)

        raw_order = params.get("sortOrder")
        order = s.default_sort_order if raw_order is None else str(raw_order)
        if order.lower() not in ("asc", "desc"):
            raise InvalidSortOrderError(raw_order)

        search = params.get("search")
        return QueryDescriptor(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=SortOrder(order.lower()),
            search=str(search) if search not in (None, "") else None,
            filters=self._filters(params),
        )

    @staticmethod
    def _filters(params: dict[str, Any]) -> dict[str, Any]:
        filters: dict[str, Any] = {}
        for key, value in params.items():
            if key in RESERVED_PARAMS or value is None or value == "":
                continue
            filters[key] = _coerce_filter_value(value)
        return filters


def parse_query(
    raw_params: Mapping[str, Any],
    allowed_sort_fields: Iterable[str] = (),
    settings: QuerySettings | None = None,
) -> QueryDescriptor:
    """Parse *raw_params* into a :class:`QueryDescriptor` (see :class:`QueryParser`)."""
    return QueryParser(allowed_sort_fields, settings).parse(raw_params)


__all__ = ["RESERVED_PARAMS", "QueryParser", "parse_query"]
