import base64

import pytest

from openlaunch.core.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    CursorPaginationParams,
    NormalizedOffsetParams,
    OffsetPaginationParams,
    build_cursor_paginated_result,
    build_offset_paginated_result,
    calculate_offset,
    decode_cursor,
    encode_cursor,
    get_pagination_info,
    normalize_cursor_params,
    normalize_offset_params,
)


@pytest.mark.parametrize("page", [-5, 0, 1, 1_000_000])
@pytest.mark.parametrize("limit", [-1, 0, 1, 50, 100, 500])
def test_normalize_offset_params_bounds(page, limit):
    params = normalize_offset_params(OffsetPaginationParams(page=page, limit=limit))
    assert params.page >= 1
    assert 1 <= params.limit <= MAX_PAGE_SIZE


def test_normalize_offset_params_defaults():
    assert normalize_offset_params(OffsetPaginationParams()) == NormalizedOffsetParams(page=1, limit=DEFAULT_PAGE_SIZE)
    assert normalize_offset_params(None) == NormalizedOffsetParams(page=1, limit=DEFAULT_PAGE_SIZE)


def test_normalize_offset_params_clamps_without_defaulting():
    params = normalize_offset_params(OffsetPaginationParams(page=0, limit=0))
    assert params == NormalizedOffsetParams(page=1, limit=1)
    params = normalize_offset_params(OffsetPaginationParams(page=3, limit=500))
    assert params == NormalizedOffsetParams(page=3, limit=100)


def test_normalize_offset_params_coerces_raw_query_values():
    assert normalize_offset_params(OffsetPaginationParams(page="4", limit="10")) == NormalizedOffsetParams(page=4, limit=10)
    assert normalize_offset_params(OffsetPaginationParams(page="abc", limit="x")) == NormalizedOffsetParams(page=1, limit=20)
    assert normalize_offset_params(OffsetPaginationParams(page=2.9, limit="7.5")) == NormalizedOffsetParams(page=2, limit=7)
    assert normalize_offset_params(OffsetPaginationParams(page=float("nan"), limit=float("inf"))) == NormalizedOffsetParams(page=1, limit=20)


def test_normalize_offset_params_honours_configured_sizes():
    params = normalize_offset_params(OffsetPaginationParams(limit=1000), default_limit=10, max_limit=50)
    assert params.limit == 50
    assert normalize_offset_params(OffsetPaginationParams(), default_limit=10, max_limit=50).limit == 10


def test_normalize_cursor_params_passes_cursor_through():
    params = normalize_cursor_params(CursorPaginationParams(cursor="!!garbage!!", limit=1000))
    assert params.cursor == "!!garbage!!"
    assert params.limit == MAX_PAGE_SIZE
    params = normalize_cursor_params(CursorPaginationParams())
    assert params.cursor is None
    assert params.limit == DEFAULT_PAGE_SIZE


def test_calculate_offset():
    assert calculate_offset(1, 20) == 0
    assert calculate_offset(3, 20) == 40
    assert NormalizedOffsetParams(page=3, limit=20).offset == 40


def test_offset_result_empty():
    result = build_offset_paginated_result([], 0, NormalizedOffsetParams(page=1, limit=20))
    assert result.items == []
    assert result.total == 0
    assert result.total_pages == 0
    assert result.has_more is False


def test_offset_result_empty_ignores_page():
    result = build_offset_paginated_result([], 0, NormalizedOffsetParams(page=7, limit=20))
    assert result.total_pages == 0
    assert result.has_more is False
    assert result.page == 7


def test_offset_result_has_more():
    items = list(range(20))
    result = build_offset_paginated_result(items, 45, NormalizedOffsetParams(page=1, limit=20))
    assert result.total_pages == 3
    assert result.has_more is True
    last = build_offset_paginated_result(items[:5], 45, NormalizedOffsetParams(page=3, limit=20))
    assert last.has_more is False


def test_pagination_info_zero_total():
    info = get_pagination_info(0, 1, 20)
    assert info.start_index == 0
    assert info.end_index == 0
    assert info.total_pages == 0
    assert info.has_previous_page is False
    assert info.has_next_page is False


def test_pagination_info_middle_page():
    info = get_pagination_info(45, 2, 20)
    assert info.current_page == 2
    assert info.total_pages == 3
    assert info.total_items == 45
    assert info.items_per_page == 20
    assert info.start_index == 21
    assert info.end_index == 40
    assert info.has_previous_page is True
    assert info.has_next_page is True


def test_pagination_info_last_partial_page():
    info = get_pagination_info(45, 3, 20)
    assert info.start_index == 41
    assert info.end_index == 45
    assert info.has_next_page is False


def test_pagination_info_non_positive_limit_does_not_divide():
    assert get_pagination_info(10, 1, 0).total_pages == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"createdAt": "2024-01-01T00:00:00Z", "id": "abc"},
        {},
        {"nested": {"a": [1, 2, None]}, "flag": True, "score": 1.5},
        {"name": "héllo ✓"},
    ],
)
def test_cursor_roundtrip(payload):
    assert decode_cursor(encode_cursor(payload)) == payload


def test_encode_cursor_is_deterministic():
    assert encode_cursor({"a": 1, "b": 2}) == encode_cursor({"a": 1, "b": 2})
    assert encode_cursor({"a": 1, "b": 2}) != encode_cursor({"b": 2, "a": 1})


def test_encode_cursor_is_base64_of_compact_json():
    assert base64.b64decode(encode_cursor({"id": "x", "n": 1})) == b'{"id":"x","n":1}'


@pytest.mark.parametrize(
    "value",
    [
        "not-base64!!!",
        base64.b64encode(b"not json").decode(),
        base64.b64encode(b"[1, 2]").decode(),
        base64.b64encode(b"\xff\xfe").decode(),
        "",
        None,
        123,
        "ünïcode",
        base64.b64encode(b"[" * 200000).decode(),
        base64.b64encode(b"{\"a\":" * 100000).decode(),
    ],
)
def test_decode_cursor_fails_soft(value):
    assert decode_cursor(value) is None


def test_cursor_result_with_lookahead_row():
    items = [{"id": str(i)} for i in range(11)]
    result = build_cursor_paginated_result(items, 10)
    assert result.has_more is True
    assert len(result.items) == 10
    assert result.next_cursor == "9"


def test_cursor_result_exactly_limit_rows():
    items = [{"id": str(i)} for i in range(10)]
    result = build_cursor_paginated_result(items, 10)
    assert result.has_more is False
    assert result.next_cursor is None
    assert len(result.items) == 10


def test_cursor_result_empty():
    result = build_cursor_paginated_result([], 10)
    assert result.items == []
    assert result.has_more is False
    assert result.next_cursor is None


class _Row:
    def __init__(self, id: str, rank: int):
        self.id = id
        self.rank = rank


def test_cursor_result_reads_attribute_ids_and_custom_keys():
    rows = [_Row("a", 1), _Row("b", 2), _Row("c", 3)]
    assert build_cursor_paginated_result(rows, 2).next_cursor == "b"
    keyed = build_cursor_paginated_result(rows, 2, key=lambda r: encode_cursor({"rank": r.rank}))
    assert decode_cursor(keyed.next_cursor) == {"rank": 2}
