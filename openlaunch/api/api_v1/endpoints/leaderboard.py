from typing import get_args

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import get_app_settings, offset_params
from openlaunch.core.config import Settings
from openlaunch.core.errors import require_choice
from openlaunch.core.pagination import NormalizedOffsetParams
from openlaunch.db.session import get_session
from openlaunch.schemas.common import OffsetPage
from openlaunch.schemas.leaderboard import LeaderboardEntry, LeaderboardType
from openlaunch.services.leaderboard_service import LeaderboardService
from openlaunch.services.serializers import leaderboard_entry_out, offset_page_out

router = APIRouter()


@router.get("/leaderboard", response_model=OffsetPage[LeaderboardEntry])
async def get_leaderboard(
    type: str = Query(default="reputation"),
    params: NormalizedOffsetParams = Depends(offset_params),
    settings: Settings = Depends(get_app_settings),
    session: AsyncSession = Depends(get_session),
):
    require_choice(
        type,
        set(get_args(LeaderboardType)),
        code="invalid_leaderboard_type",
        message="Invalid leaderboard type",
        field="type",
    )
    svc = LeaderboardService(session)
    result = await svc.get(type, params)
    return offset_page_out(result, params, leaderboard_entry_out, settings.page_numbers_visible)
