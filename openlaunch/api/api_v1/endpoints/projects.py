from typing import get_args

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import cursor_params, get_app_settings, offset_params
from openlaunch.core.config import Settings
from openlaunch.core.errors import require_choice
from openlaunch.core.pagination import NormalizedCursorParams, NormalizedOffsetParams
from openlaunch.db.session import get_session
from openlaunch.schemas.common import CursorPage, OffsetPage
from openlaunch.schemas.project import CreateProjectRequest, ProjectOut, ProjectSortBy, ProjectStatus
from openlaunch.schemas.social import ActorRequest, UpvoteResult
from openlaunch.services.project_service import ProjectService
from openlaunch.services.serializers import cursor_page_out, offset_page_out, project_out

router = APIRouter()


@router.post("/projects", response_model=ProjectOut)
async def create_project(request: CreateProjectRequest, session: AsyncSession = Depends(get_session)):
    svc = ProjectService(session)
    row = await svc.create(request)
    return project_out(row)


@router.get("/projects", response_model=OffsetPage[ProjectOut])
async def list_projects(
    status: str | None = Query(default=None),
    owner: str | None = Query(default=None, description="Owner username"),
    search: str | None = Query(default=None),
    sort_by: str = Query(default="newest"),
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_session),
):
    require_choice(sort_by, set(get_args(ProjectSortBy)), code="invalid_sort", message="Unsupported sort order", field="sort_by")
    if status is not None:
        require_choice(status, set(get_args(ProjectStatus)), code="invalid_status", message="Unknown project status", field="status")
    svc = ProjectService(session)
    result = await svc.list(params, status=status, owner=owner, search=search, sort_by=sort_by)
    return offset_page_out(result, params, project_out, settings.page_numbers_visible)


@router.get("/projects/{slug}", response_model=ProjectOut)
async def get_project(slug: str, session: AsyncSession = Depends(get_session)):
    svc = ProjectService(session)
    row = await svc.get_by_slug(slug)
    return project_out(row)


@router.get("/launches", response_model=CursorPage[ProjectOut])
async def list_launches(
    params: NormalizedCursorParams = Depends(cursor_params),
    session: AsyncSession = Depends(get_session),
):
    svc = ProjectService(session)
    result = await svc.launches(params)
    return cursor_page_out(result, project_out)


@router.post("/projects/{slug}/upvote", response_model=UpvoteResult)
async def toggle_project_upvote(slug: str, request: ActorRequest, session: AsyncSession = Depends(get_session)):
    svc = ProjectService(session)
    upvoted, upvotes_count = await svc.toggle_upvote(slug, request.actor)
    return UpvoteResult(upvoted=upvoted, upvotes_count=upvotes_count)
