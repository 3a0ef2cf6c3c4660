from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import cursor_params, require_profile
from openlaunch.core.pagination import NormalizedCursorParams
from openlaunch.db.session import get_session
from openlaunch.schemas.common import CursorPage
from openlaunch.schemas.notification import MarkReadResponse, NotificationOut, UnreadCountOut
from openlaunch.services.notification_service import NotificationService
from openlaunch.services.serializers import cursor_page_out, notification_out

router = APIRouter(prefix="/profiles/{username}/notifications")


@router.get("", response_model=CursorPage[NotificationOut])
async def list_notifications(
    unread_only: bool = Query(default=False),
    params: NormalizedCursorParams = Depends(cursor_params),
    profile=Depends(require_profile),
    session: AsyncSession = Depends(get_session),
):
    svc = NotificationService(session)
    result = await svc.feed(profile.profile_id, params, unread_only=unread_only)
    return cursor_page_out(result, notification_out)


@router.get("/unread_count", response_model=UnreadCountOut)
async def unread_count(profile=Depends(require_profile), session: AsyncSession = Depends(get_session)):
    svc = NotificationService(session)
    return UnreadCountOut(unread=await svc.unread_count(profile.profile_id))


@router.post("/read", response_model=MarkReadResponse)
async def mark_all_read(profile=Depends(require_profile), session: AsyncSession = Depends(get_session)):
    svc = NotificationService(session)
    updated = await svc.mark_all_read(profile.profile_id)
    return MarkReadResponse(ok=True, updated=updated)
