"""Query helpers shared by the offset lists and keyset feeds."""

from __future__ import annotations

from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import (
    CursorPaginatedResult,
    NormalizedCursorParams,
    NormalizedOffsetParams,
    OffsetPaginatedResult,
    build_cursor_paginated_result,
    build_offset_paginated_result,
)
from openlaunch.schemas.common import KeysetCursor

log = get_logger(__name__)


async def offset_page(
    session: AsyncSession,
    model: type,
    conditions: list[Any],
    order_by: list[Any],
    params: NormalizedOffsetParams,
) -> OffsetPaginatedResult:
    total = await session.scalar(select(func.count()).select_from(model).where(*conditions))
    stmt = select(model).where(*conditions).order_by(*order_by).offset(params.offset).limit(params.limit)
    result = await session.execute(stmt)
    return build_offset_paginated_result(list(result.scalars().all()), total or 0, params)


async def keyset_page(
    session: AsyncSession,
    model: type,
    created_col: InstrumentedAttribute,
    id_col: InstrumentedAttribute,
    conditions: list[Any],
    params: NormalizedCursorParams,
) -> CursorPaginatedResult:
    """Newest-first feed ordered by ``(created_col desc, id_col desc)``.

    An unreadable cursor restarts the feed from the top.
    """
    where = list(conditions)
    cursor = KeysetCursor.decode(params.cursor)
    if params.cursor and cursor is None:
        log.info("cursor_rejected", model=model.__name__)
    if cursor is not None:
        where.append(
            or_(
                created_col < cursor.created_at,
                and_(created_col == cursor.created_at, id_col < cursor.id),
            )
        )

    stmt = select(model).where(*where).order_by(created_col.desc(), id_col.desc()).limit(params.limit + 1)
    result = await session.execute(stmt)
    rows = list(result.scalars().all())

    def _cursor_for(row: Any) -> str:
        return KeysetCursor(created_at=getattr(row, created_col.key), id=getattr(row, id_col.key)).encode()

    return build_cursor_paginated_result(rows, params.limit, key=_cursor_for)
