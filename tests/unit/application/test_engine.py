"""Unit tests for the QueryEngine facade."""

from __future__ import annotations

from typing import Any, NamedTuple

import pytest

from mp_query.application.engine import QueryEngine
from mp_query.application.query import QueryDescriptor, parse_query
from mp_query.config.settings import QuerySettings
from mp_query.kernel.errors import InvalidLimitError, InvalidSortFieldError
from mp_query.kernel.records import InMemoryRecordSource


class Novel(NamedTuple):
    id: int
    title: str
    year: int


def _dune() -> list[dict[str, Any]]:
    return [
        {"id": 1, "title": "Dune Messiah", "year": 1969},
        {"id": 2, "title": "Dune", "year": 1965},
        {"id": 3, "title": "Children of Dune", "year": 1976},
        {"id": 4, "title": "Neuromancer", "year": 1984},
    ]


class TestScenarios:
    def test_relevance_ranking(self) -> None:
        records = [{"title": "Dune", "year": 1965}, {"title": "Dune Messiah", "year": 1969}]
        engine = QueryEngine(searchable_fields=["title"], allowed_sort_fields=["title", "year", "relevance"])
        result = engine.query(records, {"search": "dune", "sortBy": "relevance"})
        assert [r["title"] for r in result.items] == ["Dune", "Dune Messiah"]
        assert result.scores == (100, 50)

    def test_page_two_of_eleven(self) -> None:
        records = [{"id": i} for i in range(11)]
        result = QueryEngine().query(records, {"page": "2", "limit": "5"})
        assert [r["id"] for r in result.items] == [5, 6, 7, 8, 9]
        assert result.total_pages == 3
        assert result.has_next and result.has_prev

    def test_out_of_range_page(self) -> None:
        records = [{"id": i} for i in range(11)]
        result = QueryEngine().query(records, {"page": "100", "limit": "10"})
        assert result.items == []
        assert result.total == 11
        assert not result.has_next
        assert result.has_prev

    def test_case_insensitive_filter(self, book_records: list[dict[str, Any]]) -> None:
        result = QueryEngine().query(book_records, {"genre": "fantasy"})
        assert result.total == 2
        assert all(r["genre"] == "Fantasy" for r in result.items)

    def test_sort_field_not_allowed(self) -> None:
        engine = QueryEngine(allowed_sort_fields=["title", "year"])
        with pytest.raises(InvalidSortFieldError, match="title, year"):
            engine.query([], {"sortBy": "secret"})


class TestRun:
    def test_search_filter_sort(self) -> None:
        engine = QueryEngine(searchable_fields=["title"])
        result = engine.query(_dune(), {"search": "dune", "sortBy": "year", "sortOrder": "desc"})
        assert [r["id"] for r in result.items] == [3, 1, 2]
        assert result.scores is None

    def test_relevance_without_search_keeps_input_order(self) -> None:
        engine = QueryEngine(searchable_fields=["title"])
        result = engine.query(_dune(), {"sortBy": "relevance"})
        assert [r["id"] for r in result.items] == [1, 2, 3, 4]
        assert result.scores is None

    def test_relevance_uses_relevance_fields(self) -> None:
        records = [
            {"id": 1, "title": "Dune", "note": ""},
            {"id": 2, "title": "Other", "note": "dune dune"},
        ]
        engine = QueryEngine(searchable_fields=["title", "note"], relevance_fields=["note"])
        result = engine.query(records, {"search": "dune", "sortBy": "relevance"})
        assert [r["id"] for r in result.items] == [2, 1]

    def test_custom_relevance_key(self) -> None:
        engine = QueryEngine(
            searchable_fields=["title"],
            settings=QuerySettings(relevance_sort_key="_score"),
        )
        result = engine.query(_dune(), {"search": "dune", "sortBy": "_score"})
        assert result.items[0]["title"] == "Dune"

    def test_custom_scorer(self) -> None:
        engine = QueryEngine(
            searchable_fields=["title"],
            scorer=lambda term, fields: sum(len(str(f)) for f in fields),
        )
        result = engine.query(_dune(), {"search": "dune", "sortBy": "relevance"})
        assert [r["id"] for r in result.items] == [3, 1, 2]

    def test_run_with_descriptor(self) -> None:
        engine = QueryEngine()
        result = engine.run(_dune(), parse_query({"year": "1984"}))
        assert [r["title"] for r in result.items] == ["Neuromancer"]

    def test_record_source(self) -> None:
        source = InMemoryRecordSource(_dune())
        result = QueryEngine().query(source, {"limit": "2"})
        assert result.total == 4
        assert len(result.items) == 2

    def test_nested_sort(self, book_records: list[dict[str, Any]]) -> None:
        result = QueryEngine().query(book_records, {"sortBy": "author.name"})
        assert [r["author"]["name"] for r in result.items] == [
            "George Orwell", "George Orwell", "J.K. Rowling", "J.K. Rowling",
        ]
        assert [r["id"] for r in result.items] == [3, 4, 1, 2]

    def test_input_not_mutated(self) -> None:
        records = _dune()
        QueryEngine(searchable_fields=["title"]).query(records, {"search": "dune", "sortBy": "relevance"})
        assert records == _dune()
        assert all("relevance" not in r for r in records)

    def test_exposes_components(self) -> None:
        engine = QueryEngine(searchable_fields=["title"], allowed_sort_fields=["id"])
        assert engine.parser.allowed_sort_fields == ("id",)
        assert engine.record_filter.searchable_fields == ("title",)

    def test_descriptor_limit_above_max_rejected(self) -> None:
        engine = QueryEngine(searchable_fields=["title"], settings=QuerySettings(max_limit=20))
        with pytest.raises(InvalidLimitError, match="between 1 and 20"):
            engine.run(_dune(), QueryDescriptor(limit=21))

    def test_named_tuple_records(self) -> None:
        records = [Novel(1, "Dune Messiah", 1969), Novel(2, "Dune", 1965), Novel(3, "Neuromancer", 1984)]
        engine = QueryEngine(searchable_fields=["title"])
        result = engine.query(records, {"search": "dune", "sortBy": "year"})
        assert [r.id for r in result.items] == [2, 1]
        assert [r.id for r in engine.query(records, {"year": "1984"}).items] == [3]
