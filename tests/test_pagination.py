"""Tests for pagination metadata."""

import math

import pytest

from app.utils.pagination import pagination_metadata


class TestPaginationMetadata:
    @pytest.mark.parametrize(
        "total,limit",
        [(0, 5), (1, 5), (5, 5), (6, 5), (99, 10), (100, 100), (101, 100), (7, 1)],
    )
    def test_last_page_is_ceil_and_at_least_one(self, total: int, limit: int) -> None:
        meta = pagination_metadata(total, page=1, limit=limit)
        assert meta["lastPage"] == max(1, math.ceil(total / limit))
        assert meta["lastPage"] >= 1

    def test_empty_result_has_single_page(self) -> None:
        assert pagination_metadata(0) == {
            "totalRecords": 0,
            "firstPage": 1,
            "lastPage": 1,
            "page": 1,
            "limit": 5,
        }

    def test_echoes_requested_page_and_limit(self) -> None:
        meta = pagination_metadata(42, page=3, limit=10)
        assert meta["page"] == 3
        assert meta["limit"] == 10
        assert meta["firstPage"] == 1
        assert meta["lastPage"] == 5
        assert meta["totalRecords"] == 42
