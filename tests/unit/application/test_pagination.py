"""Unit tests for sorting, pagination and PaginationResult."""

from __future__ import annotations

from typing import Any

import pytest

from mp_query.application.pagination import (
    PaginationResult,
    finalize,
    paginate,
    sort_by_relevance,
    sort_records,
)
from mp_query.application.query import SortOrder


def _eleven() -> list[dict[str, Any]]:
    return [{"id": i} for i in range(11)]


# ---------------------------------------------------------------------------
# PaginationResult
# ---------------------------------------------------------------------------


class TestPaginationResult:
    def test_total_pages(self) -> None:
        assert PaginationResult(items=[], total=25, page=1, limit=10).total_pages == 3

    def test_total_pages_exact_division(self) -> None:
        assert PaginationResult(items=[], total=20, page=1, limit=10).total_pages == 2

    def test_empty(self) -> None:
        result = PaginationResult(items=[], total=0, page=1, limit=10)
        assert result.total_pages == 0
        assert not result.has_next
        assert not result.has_prev

    def test_map_preserves_metadata(self) -> None:
        result = PaginationResult(items=[1, 2], total=12, page=2, limit=2, scores=(5, 4))
        mapped = result.map(str)
        assert mapped.items == ["1", "2"]
        assert (mapped.total, mapped.page, mapped.limit, mapped.scores) == (12, 2, 2, (5, 4))

    def test_to_dict(self) -> None:
        result = PaginationResult(items=[{"id": 1}], total=11, page=2, limit=5)
        assert result.to_dict() == {
            "data": [{"id": 1}],
            "total": 11,
            "page": 2,
            "limit": 5,
            "totalPages": 3,
            "hasNext": True,
            "hasPrev": True,
        }

    def test_to_dict_includes_scores_when_ranked(self) -> None:
        result = PaginationResult(items=["a"], total=1, page=1, limit=5, scores=(100,))
        assert result.to_dict()["scores"] == [100]

    def test_frozen(self) -> None:
        result = PaginationResult(items=[], total=0, page=1, limit=1)
        with pytest.raises((AttributeError, TypeError)):
            result.total = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# paginate
# ---------------------------------------------------------------------------


class TestPaginate:
    def test_second_page_of_eleven(self) -> None:
        result = paginate(_eleven(), page=2, limit=5)
        assert [r["id"] for r in result.items] == [5, 6, 7, 8, 9]
        assert result.total_pages == 3
        assert result.has_next
        assert result.has_prev

    def test_last_partial_page(self) -> None:
        result = paginate(_eleven(), page=3, limit=5)
        assert [r["id"] for r in result.items] == [10]
        assert not result.has_next

    def test_out_of_range_page_is_empty(self) -> None:
        result = paginate(_eleven(), page=100, limit=10)
        assert result.items == []
        assert result.total == 11
        assert not result.has_next
        assert result.has_prev

    def test_scores_sliced_with_items(self) -> None:
        result = paginate(["a", "b", "c"], page=2, limit=2, scores=[3, 2, 1])
        assert result.items == ["c"]
        assert result.scores == (1,)

    def test_input_not_mutated(self) -> None:
        records = _eleven()
        paginate(records, 1, 3)
        assert len(records) == 11


# ---------------------------------------------------------------------------
# sort_records
# ---------------------------------------------------------------------------


class TestSortRecords:
    def test_ascending(self) -> None:
        records = [{"y": 3}, {"y": 1}, {"y": 2}]
        assert [r["y"] for r in sort_records(records, "y")] == [1, 2, 3]

    def test_descending(self) -> None:
        records = [{"y": 3}, {"y": 1}, {"y": 2}]
        assert [r["y"] for r in sort_records(records, "y", SortOrder.DESC)] == [3, 2, 1]

    def test_accepts_string_order(self) -> None:
        records = [{"y": 1}, {"y": 2}]
        assert [r["y"] for r in sort_records(records, "y", "desc")] == [2, 1]

    @pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
    def test_nulls_last_both_directions(self, order: SortOrder) -> None:
        records = [{"id": 1, "y": None}, {"id": 2, "y": 5}, {"id": 3}, {"id": 4, "y": 1}]
        result = sort_records(records, "y", order)
        assert [r["id"] for r in result][2:] == [1, 3]

    @pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
    def test_stable_on_ties(self, order: SortOrder) -> None:
        records = [{"id": i, "g": i % 2} for i in range(6)]
        result = sort_records(records, "g", order)
        evens = [r["id"] for r in result if r["g"] == 0]
        odds = [r["id"] for r in result if r["g"] == 1]
        assert evens == [0, 2, 4]
        assert odds == [1, 3, 5]

    def test_nested_path(self) -> None:
        records = [{"a": {"n": "b"}}, {"a": {"n": "a"}}]
        assert [r["a"]["n"] for r in sort_records(records, "a.n")] == ["a", "b"]

    def test_mixed_types_do_not_raise(self) -> None:
        records = [{"v": "x"}, {"v": 2}, {"v": True}, {"v": 1.5}]
        assert [r["v"] for r in sort_records(records, "v")] == [True, 1.5, 2, "x"]

    def test_returns_new_list(self) -> None:
        records = [{"y": 2}, {"y": 1}]
        result = sort_records(records, "y")
        assert records == [{"y": 2}, {"y": 1}]
        assert result is not records


class TestSortByRelevance:
    def test_descending_scores_stable(self) -> None:
        ordered, scores = sort_by_relevance(["a", "b", "c", "d"], [10, 50, 10, 50])
        assert ordered == ["b", "d", "a", "c"]
        assert scores == (50, 50, 10, 10)


class TestFinalize:
    def test_sorts_then_paginates(self) -> None:
        records = [{"id": i} for i in reversed(range(11))]
        result = finalize(records, "id", SortOrder.ASC, page=2, limit=5)
        assert [r["id"] for r in result.items] == [5, 6, 7, 8, 9]
        assert result.scores is None

    def test_relevance_ignores_sort_order(self) -> None:
        records = [{"title": "Dune Messiah"}, {"title": "Dune"}]
        result = finalize(records, "relevance", SortOrder.ASC, 1, 10, scores=[50, 100])
        assert [r["title"] for r in result.items] == ["Dune", "Dune Messiah"]
        assert result.scores == (100, 50)

    def test_custom_resolver(self) -> None:
        result = finalize(["bb", "a", "ccc"], "len", SortOrder.ASC, 1, 10, resolver=lambda r, _: len(r))
        assert result.items == ["a", "bb", "ccc"]
