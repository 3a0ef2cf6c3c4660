from typing import get_args

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import get_app_settings, offset_params
from openlaunch.core.config import Settings
from openlaunch.core.errors import require_choice
from openlaunch.core.pagination import NormalizedOffsetParams
from openlaunch.db.session import get_session
from openlaunch.schemas.article import ArticleOut, ArticleSortBy, CreateArticleRequest
from openlaunch.schemas.common import OffsetPage
from openlaunch.services.article_service import ArticleService
from openlaunch.services.serializers import article_out, offset_page_out

router = APIRouter(prefix="/articles")


@router.post("", response_model=ArticleOut)
async def create_article(request: CreateArticleRequest, session: AsyncSession = Depends(get_session)):
    svc = ArticleService(session)
    row = await svc.create(request)
    return article_out(row)


@router.get("", response_model=OffsetPage[ArticleOut])
async def list_articles(
    author: str | None = Query(default=None, description="Author username"),
    search: str | None = Query(default=None),
    is_published: bool | None = Query(default=None),
    sort_by: str = Query(default="newest"),
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_session),
):
    require_choice(sort_by, set(get_args(ArticleSortBy)), code="invalid_sort", message="Unsupported sort order", field="sort_by")
    svc = ArticleService(session)
    result = await svc.list(params, author=author, search=search, is_published=is_published, sort_by=sort_by)
    return offset_page_out(result, params, article_out, settings.page_numbers_visible)


@router.get("/{slug}", response_model=ArticleOut)
async def get_article(slug: str, session: AsyncSession = Depends(get_session)):
    svc = ArticleService(session)
    row = await svc.get_by_slug(slug)
    return article_out(row)
