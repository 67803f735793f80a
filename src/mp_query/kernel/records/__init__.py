"""Kernel records – field resolution and read-only record sources."""
from mp_query.kernel.records.path import Record, resolve_path, value_at
from mp_query.kernel.records.source import InMemoryRecordSource, RecordSource, snapshot_of

__all__ = ["InMemoryRecordSource", "Record", "RecordSource", "resolve_path", "snapshot_of", "value_at"]
