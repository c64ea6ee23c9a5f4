"""
Unit tests for the formatting/utility helpers.

Dependencies: pytest, serverless_api.utils.formatters
System role: Pagination policy, envelope stamping and parsing validation
"""

import math
import re

import pytest

from serverless_api.core.exceptions import PaginationError, PolicyError
from serverless_api.models.common import PaginationParams
from serverless_api.utils.formatters import (
    calculate_pagination,
    current_timestamp,
    format_response,
    generate_id,
    paginate,
    parse_request_size,
    sanitize_string,
    validate_email,
    validate_name,
    validate_pagination,
)


class TestValidatePagination:
    """Tests for the pagination policy pass."""

    def test_defaults_when_absent(self) -> None:
        assert validate_pagination() == PaginationParams(page=1, limit=10)
        assert validate_pagination(None, None) == PaginationParams(page=1, limit=10)

    def test_empty_strings_use_defaults(self) -> None:
        assert validate_pagination("", "") == PaginationParams(page=1, limit=10)

    def test_parses_strings(self) -> None:
        assert validate_pagination("3", "25") == PaginationParams(page=3, limit=25)

    def test_accepts_integers(self) -> None:
        assert validate_pagination(2, 100) == PaginationParams(page=2, limit=100)

    def test_page_zero_fails(self) -> None:
        with pytest.raises(PaginationError, match="Page must be a positive integer"):
            validate_pagination("0", "10")

    def test_non_numeric_page_fails(self) -> None:
        with pytest.raises(PaginationError):
            validate_pagination("abc", "10")

    @pytest.mark.parametrize("limit", ["0", "101", "-5", "ten"])
    def test_limit_out_of_bounds(self, limit: str) -> None:
        with pytest.raises(PaginationError, match="Limit must be between 1 and 100"):
            validate_pagination("1", limit)

    def test_is_a_policy_error(self) -> None:
        with pytest.raises(PolicyError):
            validate_pagination("1", "500")


class TestCalculatePagination:
    def test_example(self) -> None:
        meta = calculate_pagination(1, 10, 25)
        assert meta.model_dump(by_alias=True) == {
            "page": 1,
            "limit": 10,
            "total": 25,
            "totalPages": 3,
        }

    def test_empty_total(self) -> None:
        assert calculate_pagination(1, 10, 0).total_pages == 0

    @pytest.mark.parametrize("total,limit", [(1, 1), (10, 10), (11, 10), (99, 7), (100, 100)])
    def test_total_pages_is_ceiling(self, total: int, limit: int) -> None:
        assert calculate_pagination(1, limit, total).total_pages == math.ceil(total / limit)


class TestPaginate:
    def test_second_page(self) -> None:
        assert paginate([1, 2, 3], PaginationParams(page=2, limit=2)) == [3]

    def test_page_past_end(self) -> None:
        assert paginate([1, 2, 3], PaginationParams(page=5, limit=2)) == []


class TestFieldChecks:
    @pytest.mark.parametrize("email", ["john@example.com", "a@b.c", "first.last@sub.domain.org"])
    def test_valid_emails(self, email: str) -> None:
        assert validate_email(email)

    @pytest.mark.parametrize(
        "email", ["", "john", "john@example", "jo hn@example.com", "a@@b.com", "@b.com", "a@b.c\n"]
    )
    def test_invalid_emails(self, email: str) -> None:
        assert not validate_email(email)

    def test_name_bounds(self) -> None:
        assert not validate_name("A")
        assert validate_name("Al")
        assert validate_name("x" * 100)
        assert not validate_name("x" * 101)

    def test_sanitize_only_trims(self) -> None:
        assert sanitize_string("  <b>hi</b>\n") == "<b>hi</b>"


class TestFormatResponse:
    def test_adds_timestamp(self) -> None:
        result = format_response({"success": True, "data": [1]})
        assert result["success"] is True
        assert result["data"] == [1]
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", result["timestamp"])

    def test_does_not_mutate_input(self) -> None:
        data = {"success": True}
        format_response(data)
        assert data == {"success": True}

    def test_reformatting_only_changes_timestamp(self) -> None:
        once = format_response({"success": True, "data": {"id": 1}})
        twice = format_response(once)
        assert {k: v for k, v in once.items() if k != "timestamp"} == {
            k: v for k, v in twice.items() if k != "timestamp"
        }

    def test_current_timestamp_is_utc(self) -> None:
        assert current_timestamp().endswith("Z")


class TestGenerateId:
    def test_range(self) -> None:
        for _ in range(200):
            assert 0 <= generate_id() < 10000


class TestParseRequestSize:
    @pytest.mark.parametrize(
        "size,expected",
        [
            ("10mb", 10 * 1024 * 1024),
            ("5", 5),
            ("5b", 5),
            ("2kb", 2048),
            ("1MB", 1024 * 1024),
            ("3Kb", 3072),
        ],
    )
    def test_valid_sizes(self, size: str, expected: int) -> None:
        assert parse_request_size(size) == expected

    @pytest.mark.parametrize("size", ["abc", "", "10gb", "1.5mb", "-1", " 10mb", "mb"])
    def test_invalid_sizes(self, size: str) -> None:
        with pytest.raises(ValueError, match="Invalid request size format"):
            parse_request_size(size)
