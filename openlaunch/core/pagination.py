"""Offset and cursor pagination helpers.

Every function here is pure and total: malformed page/limit input is clamped
to defaults and malformed cursors decode to ``None``. Nothing raises on bad
pagination input.
"""

from __future__ import annotations

import base64
import json
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class OffsetPaginationParams:
    page: Any = None
    limit: Any = None


@dataclass(frozen=True)
class NormalizedOffsetParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return calculate_offset(self.page, self.limit)


@dataclass(frozen=True)
class OffsetPaginatedResult(Generic[T]):
    items: list[T]
    total: int
    page: int
    total_pages: int
    has_more: bool


@dataclass(frozen=True)
class CursorPaginationParams:
    cursor: str | None = None
    limit: Any = None


@dataclass(frozen=True)
class NormalizedCursorParams:
    cursor: str | None
    limit: int


@dataclass(frozen=True)
class CursorPaginatedResult(Generic[T]):
    items: list[T]
    next_cursor: Any
    has_more: bool


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_previous_page: bool
    has_next_page: bool
    start_index: int
    end_index: int


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    # "2.5" style strings
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def _clamp_limit(limit: Any, default_limit: int, max_limit: int) -> int:
    value = _as_int(limit)
    if value is None:
        value = default_limit
    return min(max_limit, max(1, value))


def _total_pages(total: int, limit: int) -> int:
    if total <= 0 or limit <= 0:
        return 0
    return math.ceil(total / limit)


def normalize_offset_params(
    params: OffsetPaginationParams | None = None,
    *,
    default_limit: int = DEFAULT_PAGE_SIZE,
    max_limit: int = MAX_PAGE_SIZE,
) -> NormalizedOffsetParams:
    params = params or OffsetPaginationParams()
    page = _as_int(params.page)
    return NormalizedOffsetParams(
        page=max(1, page if page is not None else 1),
        limit=_clamp_limit(params.limit, default_limit, max_limit),
    )


def normalize_cursor_params(
    params: CursorPaginationParams | None = None,
    *,
    default_limit: int = DEFAULT_PAGE_SIZE,
    max_limit: int = MAX_PAGE_SIZE,
) -> NormalizedCursorParams:
    params = params or CursorPaginationParams()
    return NormalizedCursorParams(
        cursor=params.cursor,
        limit=_clamp_limit(params.limit, default_limit, max_limit),
    )


def calculate_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def build_offset_paginated_result(
    items: Sequence[T],
    total: int,
    params: NormalizedOffsetParams,
) -> OffsetPaginatedResult[T]:
    """Shape an already fetched page; ``total`` comes from a separate count."""
    total_pages = _total_pages(total, params.limit)
    return OffsetPaginatedResult(
        items=list(items),
        total=total,
        page=params.page,
        total_pages=total_pages,
        has_more=params.page < total_pages,
    )


def get_pagination_info(total: int, page: int, limit: int) -> PaginationInfo:
    total_pages = _total_pages(total, limit)
    start_index = (page - 1) * limit + 1
    return PaginationInfo(
        current_page=page,
        total_pages=total_pages,
        total_items=total,
        items_per_page=limit,
        has_previous_page=page > 1,
        has_next_page=page < total_pages,
        start_index=start_index if total > 0 else 0,
        end_index=min(page * limit, total),
    )


def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def build_cursor_paginated_result(
    items: Sequence[T],
    limit: int,
    key: Callable[[T], Any] = _item_id,
) -> CursorPaginatedResult[T]:
    """Shape a page fetched with ``limit + 1`` rows.

    The extra row only signals that another page exists and is dropped. If the
    caller fetched exactly ``limit`` rows, ``has_more`` is always False.
    """
    has_more = len(items) > limit
    trimmed = list(items[:limit]) if has_more else list(items)
    next_cursor = key(trimmed[-1]) if has_more and trimmed else None
    return CursorPaginatedResult(items=trimmed, next_cursor=next_cursor, has_more=has_more)


def encode_cursor(data: Mapping[str, Any]) -> str:
    text = json.dumps(dict(data), separators=(",", ":"), ensure_ascii=False, default=str)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str | None) -> dict[str, Any] | None:
    if not cursor:
        return None
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except Exception:
        return None
    if not isinstance(payload, dict):
        return None
    return payload
