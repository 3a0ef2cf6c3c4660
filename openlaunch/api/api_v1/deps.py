from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.config import Settings
from openlaunch.core.pagination import (
    CursorPaginationParams,
    NormalizedCursorParams,
    NormalizedOffsetParams,
    OffsetPaginationParams,
    normalize_cursor_params,
    normalize_offset_params,
)
from openlaunch.db.session import get_session
from openlaunch.models import Profile
from openlaunch.services.profile_service import ProfileService


# OFFSET binds as a signed 64-bit integer.
MAX_SQL_OFFSET = 2**63 - 1


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# page/limit arrive as raw strings so garbage falls back to defaults instead of a 422.
def offset_params(
    page: str | None = Query(default=None, description="1-based page number"),
    limit: str | None = Query(default=None, description="Page size"),
    settings: Settings = Depends(get_app_settings),
) -> NormalizedOffsetParams:
    params = normalize_offset_params(
        OffsetPaginationParams(page=page, limit=limit),
        default_limit=settings.page_size_default,
        max_limit=settings.page_size_max,
    )
    max_page = MAX_SQL_OFFSET // params.limit
    if params.page > max_page:
        return NormalizedOffsetParams(page=max_page, limit=params.limit)
    return params


def cursor_params(
    cursor: str | None = Query(default=None, description="Opaque cursor from a previous page"),
    limit: str | None = Query(default=None, description="Page size"),
    settings: Settings = Depends(get_app_settings),
) -> NormalizedCursorParams:
    return normalize_cursor_params(
        CursorPaginationParams(cursor=cursor, limit=limit),
        default_limit=settings.page_size_default,
        max_limit=settings.page_size_max,
    )


async def require_profile(
    username: str,
    session: AsyncSession = Depends(get_session),
) -> Profile:
    svc = ProfileService(session)
    return await svc.get_by_username(username)
