from __future__ import annotations

from datetime import datetime
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from openlaunch.core.pagination import decode_cursor, encode_cursor


T = TypeVar("T")


class PaginationInfoOut(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_previous_page: bool
    has_next_page: bool
    start_index: int
    end_index: int
    pages: list[int | Literal["ellipsis"]] = Field(default_factory=list)


class OffsetPage(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    total_pages: int
    has_more: bool
    pagination: PaginationInfoOut


class CursorPage(BaseModel, Generic[T]):
    items: list[T]
    next_cursor: str | None = None
    has_more: bool = False


class KeysetCursor(BaseModel):
    """Position after the last row of a ``(created_at desc, id desc)`` listing.

    Clients only ever see the encoded form.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    v: Literal[1] = 1
    created_at: datetime
    id: str

    def encode(self) -> str:
        return encode_cursor(self.model_dump(mode="json"))

    @classmethod
    def decode(cls, value: str | None) -> KeysetCursor | None:
        payload = decode_cursor(value)
        if payload is None:
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return None

