from typing import get_args

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import get_app_settings, offset_params
from openlaunch.core.config import Settings
from openlaunch.core.errors import require_choice
from openlaunch.core.pagination import NormalizedOffsetParams
from openlaunch.db.session import get_session
from openlaunch.schemas.comment import CommentOut, CommentSortBy, CreateCommentRequest
from openlaunch.schemas.common import OffsetPage
from openlaunch.schemas.social import ActorRequest, UpvoteResult
from openlaunch.services.comment_service import CommentService
from openlaunch.services.serializers import comment_out, offset_page_out

router = APIRouter()


@router.post("/projects/{slug}/comments", response_model=CommentOut)
async def create_comment(slug: str, request: CreateCommentRequest, session: AsyncSession = Depends(get_session)):
    svc = CommentService(session)
    row = await svc.create(slug, request)
    return comment_out(row)


@router.get("/projects/{slug}/comments", response_model=OffsetPage[CommentOut])
async def list_project_comments(
    slug: str,
    sort_by: str = Query(default="newest"),
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_session),
):
    require_choice(sort_by, set(get_args(CommentSortBy)), code="invalid_sort", message="Unsupported sort order", field="sort_by")
    svc = CommentService(session)
    result = await svc.list_for_project(slug, params, sort_by=sort_by)
    return offset_page_out(result, params, comment_out, settings.page_numbers_visible)


@router.get("/comments/{comment_id}/replies", response_model=OffsetPage[CommentOut])
async def list_comment_replies(
    comment_id: str,
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_session),
):
    svc = CommentService(session)
    result = await svc.list_replies(comment_id, params)
    return offset_page_out(result, params, comment_out, settings.page_numbers_visible)


@router.post("/comments/{comment_id}/upvote", response_model=UpvoteResult)
async def toggle_comment_upvote(comment_id: str, request: ActorRequest, session: AsyncSession = Depends(get_session)):
    svc = CommentService(session)
    upvoted, upvotes_count = await svc.toggle_upvote(comment_id, request.actor)
    return UpvoteResult(upvoted=upvoted, upvotes_count=upvotes_count)
