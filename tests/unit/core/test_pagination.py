"""Unit tests for the pagination helper."""

from curator.core.pagination import Pagination, get_pagination


def test_defaults():
    """Page 1 of 10 starts at the first row."""
    pagination = get_pagination()

    assert pagination.page == 1
    assert pagination.limit == 10
    assert pagination.offset == 0
    assert pagination.as_dict() == {"offset": 0, "limit": 10}


def test_offset_is_page_minus_one_times_limit():
    assert get_pagination(3, 10).as_dict() == {"offset": 20, "limit": 10}
    assert get_pagination(2, 25).offset == 25


def test_limit_has_no_upper_bound():
    pagination = get_pagination(1, 100_000)

    assert pagination.limit == 100_000


def test_non_positive_page_is_not_sanitized():
    """Page 0 and negative pages produce zero and negative offsets."""
    assert get_pagination(0, 10).offset == -10
    assert get_pagination(-1, 5).offset == -10


def test_pagination_is_immutable_value():
    assert Pagination(2, 5) == get_pagination(2, 5)
