"""Kernel records – dotted-path field resolution.

A path such as ``"author.name"`` is resolved one segment at a time:

* mappings are read by key,
* named tuples are read by field name,
* lists and tuples are read by integer segment (``"tags.0"``),
* any other object is read by public attribute.

An unknown segment, or a ``None`` encountered before the last segment,
yields :class:`~mp_query.kernel.types.Nothing`. A field that exists but holds
``None`` yields ``Some(None)``.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from mp_query.kernel.types import Nothing, Option, Some

type Record = Any

_MISSING = object()


def _step(current: Any, segment: str) -> Any:
    if current is None:
        return _MISSING
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if isinstance(current, tuple) and segment in getattr(current, "_fields", ()):
        return getattr(current, segment)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.isdigit():
            return _MISSING
        index = int(segment)
        return current[index] if index < len(current) else _MISSING
    if segment.startswith("_"):
        return _MISSING
    return getattr(current, segment, _MISSING)


def resolve_path(record: Record, path: str) -> Option[Any]:
    """Return ``Some(value)`` for the field at *path*, or ``Nothing()``."""
    current = record
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return Nothing()
    return Some(current)


def value_at(record: Record, path: str, default: Any = None) -> Any:
    """Shorthand for ``resolve_path(record, path).unwrap_or(default)``."""
    return resolve_path(record, path).unwrap_or(default)


__all__ = ["Record", "resolve_path", "value_at"]
