"""Tests for pagination helpers."""

import pytest

from app.api.utils.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    PaginatedResponse,
    PaginationParams,
    calculate_pagination_info,
    format_paginated_response,
    resolve_pagination,
    validate_pagination_params,
)


class TestResolvePagination:
    """Tests for resolve_pagination."""

    def test_defaults_when_params_absent(self):
        """Missing limit and page fall back to 10 and 1."""
        result = resolve_pagination(PaginationParams())
        assert (result.limit, result.page, result.offset) == (10, 1, 0)

    @pytest.mark.parametrize(
        "limit,page",
        [(1, 1), (10, 1), (10, 3), (25, 4), (100, 2), (7, 13)],
    )
    def test_offset_is_page_minus_one_times_limit(self, limit, page):
        """offset = (page - 1) * limit for in-range input."""
        result = resolve_pagination(PaginationParams(limit=limit, page=page))
        assert result.limit == limit
        assert result.page == page
        assert result.offset == (page - 1) * limit

    def test_zero_limit_is_repaired_to_default(self):
        """A zero limit becomes the default, not 1."""
        result = resolve_pagination(PaginationParams(limit=0, page=1))
        assert result.limit == 10

    def test_negative_limit_is_repaired_to_default(self):
        """A negative limit becomes the default, not 1."""
        result = resolve_pagination(PaginationParams(limit=-3))
        assert result.limit == DEFAULT_LIMIT

    def test_limit_above_ceiling_is_clamped(self):
        """A limit above the ceiling is clamped to 100."""
        result = resolve_pagination(PaginationParams(limit=150))
        assert result.limit == MAX_LIMIT == 100

    @pytest.mark.parametrize("page", [0, -5])
    def test_page_below_one_is_clamped(self, page):
        """Pages below 1 resolve to page 1 with offset 0."""
        result = resolve_pagination(PaginationParams(page=page))
        assert result.page == 1
        assert result.offset == 0


class TestCalculatePaginationInfo:
    """Tests for calculate_pagination_info."""

    def test_empty_result_set(self):
        """No rows means no pages and no navigation."""
        info = calculate_pagination_info(total_rows=0, limit=10, page=1)
        assert info.total_pages == 0
        assert info.has_next_page is False
        assert info.has_previous_page is False

    def test_last_partial_page(self):
        """25 rows at 10 per page: page 3 is last and has a previous page."""
        info = calculate_pagination_info(total_rows=25, limit=10, page=3)
        assert info.total_pages == 3
        assert info.has_next_page is False
        assert info.has_previous_page is True

    def test_first_page_of_many(self):
        info = calculate_pagination_info(total_rows=25, limit=10, page=1)
        assert info.has_next_page is True
        assert info.has_previous_page is False

    def test_exact_multiple_of_limit(self):
        info = calculate_pagination_info(total_rows=20, limit=10, page=2)
        assert info.total_pages == 2
        assert info.has_next_page is False

    def test_previous_page_on_empty_set_beyond_first_page(self):
        """Asking for page 2 of nothing still reports a previous page."""
        info = calculate_pagination_info(total_rows=0, limit=10, page=2)
        assert info.total_pages == 0
        assert info.has_previous_page is True

    def test_camel_case_dump(self):
        info = calculate_pagination_info(total_rows=5, limit=2, page=1)
        assert info.model_dump(by_alias=True) == {
            "totalRows": 5,
            "totalPages": 3,
            "currentPage": 1,
            "limit": 2,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }


class TestValidatePaginationParams:
    """Tests for validate_pagination_params."""

    def test_absent_params_are_valid(self):
        assert validate_pagination_params(PaginationParams()) == []

    def test_in_range_params_are_valid(self):
        assert validate_pagination_params(PaginationParams(limit=100, page=1)) == []

    def test_zero_limit_is_rejected_but_resolvable(self):
        """Validation rejects limit=0 while resolution repairs it."""
        params = PaginationParams(limit=0)
        assert validate_pagination_params(params) == ["Limit must be greater than 0"]
        assert resolve_pagination(params).limit == 10

    def test_limit_above_ceiling_is_rejected(self):
        assert validate_pagination_params(PaginationParams(limit=101)) == ["Limit cannot exceed 100"]

    def test_page_below_one_is_rejected(self):
        assert validate_pagination_params(PaginationParams(page=0)) == ["Page must be greater than 0"]

    def test_all_violations_reported_together(self):
        errors = validate_pagination_params(PaginationParams(limit=-1, page=-1))
        assert errors == ["Limit must be greater than 0", "Page must be greater than 0"]


class TestPaginatedResponse:
    """Tests for the paginated payload."""

    def test_create_derives_metadata(self):
        response = PaginatedResponse.create(data=[1, 2], total_rows=12, limit=2, page=6)
        assert response.total_pages == 6
        assert response.has_next_page is False
        assert response.has_previous_page is True
        assert response.success is True

    def test_format_uses_camel_case_keys(self):
        payload = format_paginated_response(
            data=[{"id": 1}],
            total_rows=1,
            limit=10,
            page=1,
            message="Crustaceans retrieved successfully",
        )
        assert payload == {
            "success": True,
            "message": "Crustaceans retrieved successfully",
            "data": [{"id": 1}],
            "totalRows": 1,
            "totalPages": 1,
            "currentPage": 1,
            "hasNextPage": False,
            "hasPreviousPage": False,
        }
