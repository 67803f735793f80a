"""Kernel records – RecordSource port and in-memory implementation."""
from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class RecordSource(Protocol[T_co]):
    """Port: read access to an ordered collection of records.

    ``snapshot()`` must return a sequence whose length and elements stay
    stable for the duration of one query.
    """

    def snapshot(self) -> Sequence[T_co]: ...


class InMemoryRecordSource(Generic[T]):
    """List-backed :class:`RecordSource`.

    Writers are serialised against :meth:`snapshot`; readers get an immutable
    tuple copy, so a running query is never affected by a concurrent write.
    """

    def __init__(self, records: Iterable[T] = ()) -> None:
        self._records: list[T] = list(records)
        self._lock = threading.Lock()

    def snapshot(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._records)

    def add(self, record: T) -> None:
        with self._lock:
            self._records.append(record)

    def extend(self, records: Iterable[T]) -> None:
        with self._lock:
            self._records.extend(records)

    def replace(self, records: Iterable[T]) -> None:
        new_records = list(records)
        with self._lock:
            self._records = new_records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def snapshot_of(source: RecordSource[T] | Sequence[T] | Iterable[T]) -> Sequence[T]:
    """Return a stable sequence for *source* (a RecordSource or any iterable)."""
    if isinstance(source, RecordSource):
        return source.snapshot()
    if isinstance(source, (list, tuple)):
        return source
    return tuple(source)


__all__ = ["InMemoryRecordSource", "RecordSource", "snapshot_of"]
