from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import get_app_settings, offset_params, require_profile
from openlaunch.core.config import Settings
from openlaunch.core.pagination import NormalizedOffsetParams
from openlaunch.db.session import get_session
from openlaunch.schemas.common import OffsetPage
from openlaunch.schemas.profile import ProfilePreview
from openlaunch.schemas.social import ActorRequest, FollowResult, FollowStatusOut
from openlaunch.services.serializers import offset_page_out, profile_preview
from openlaunch.services.social_service import SocialService

router = APIRouter(prefix="/profiles/{username}")


@router.post("/follow", response_model=FollowResult)
async def toggle_follow(
    request: ActorRequest,
    profile=Depends(require_profile),
    session: AsyncSession = Depends(get_session),
):
    svc = SocialService(session)
    following, followers_count = await svc.toggle_follow(profile, request.actor)
    return FollowResult(following=following, followers_count=followers_count)


@router.get("/follow", response_model=FollowStatusOut)
async def follow_status(
    actor: str = Query(min_length=1, max_length=50),
    profile=Depends(require_profile),
    session: AsyncSession = Depends(get_session),
):
    svc = SocialService(session)
    return FollowStatusOut(is_following=await svc.is_following(profile, actor))


@router.get("/followers", response_model=OffsetPage[ProfilePreview])
async def list_followers(
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    profile=Depends(require_profile),
    session: AsyncSession = Depends(get_session),
):
    svc = SocialService(session)
    result = await svc.followers(profile, params)
    return offset_page_out(result, params, profile_preview, settings.page_numbers_visible)


@router.get("/following", response_model=OffsetPage[ProfilePreview])
async def list_following(
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    profile=Depends(require_profile),
    session: AsyncSession = Depends(get_session),
):
    svc = SocialService(session)
    result = await svc.following(profile, params)
    return offset_page_out(result, params, profile_preview, settings.page_numbers_visible)
