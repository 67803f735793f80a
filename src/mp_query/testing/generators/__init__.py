"""Testing generators – Hypothesis strategies for records and raw queries."""
from mp_query.testing.generators.strategies import (
    raw_query_strategy,
    record_strategy,
    records_strategy,
)

__all__ = ["raw_query_strategy", "record_strategy", "records_strategy"]
