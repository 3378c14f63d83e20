import pytest
from vidtube.utility.pagination import (
    get_pagination_params,
    get_sort_params,
    pagination_meta,
    paginate_list,
    MAX_LIMIT,
    MAX_PAGE,
)


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 10)),
        ("3", "20", (3, 20)),
        ("0", "0", (1, 10)),
        ("-4", "-1", (1, 10)),
        ("abc", "x", (1, 10)),
        ("2", "500", (2, MAX_LIMIT)),
        (" 5 ", "7", (5, 7)),
        ("99999999999999999999", None, (1, 10)),
        (str(MAX_PAGE), "99999999999999999999", (MAX_PAGE, MAX_LIMIT)),
        (str(MAX_PAGE + 1), None, (1, 10)),
    ],
)
def test_pagination_params_are_lenient(page, limit, expected):
    params = get_pagination_params(page, limit)
    assert (params.page, params.limit) == expected
    assert params.page >= 1
    assert 1 <= params.limit <= MAX_LIMIT


def test_skip_follows_page_and_limit():
    assert get_pagination_params("3", "15").skip == 30


def test_meta_counts_pages():
    meta = pagination_meta(get_pagination_params("2", "10"), 25)
    assert meta == {
        "page": 2,
        "limit": 10,
        "total": 25,
        "totalPages": 3,
        "hasNextPage": True,
        "hasPrevPage": True,
    }


def test_meta_for_empty_result():
    meta = pagination_meta(get_pagination_params(), 0)
    assert meta["totalPages"] == 0
    assert meta["hasNextPage"] is False
    assert meta["hasPrevPage"] is False


def test_last_page_has_no_next():
    meta = pagination_meta(get_pagination_params("3", "10"), 30)
    assert meta["hasNextPage"] is False


def test_paginate_list_slices_and_counts():
    items, total = paginate_list(list(range(23)), get_pagination_params("3", "10"))
    assert items == [20, 21, 22]
    assert total == 23


def test_sort_params_fall_back_to_created_at():
    assert get_sort_params(None, None) == ("createdAt", True)
    assert get_sort_params("password", "asc") == ("createdAt", False)
    assert get_sort_params("views", "asc") == ("views", False)
    assert get_sort_params("title", "sideways") == ("title", True)
