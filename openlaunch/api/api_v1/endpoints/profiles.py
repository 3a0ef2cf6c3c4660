from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.api.api_v1.deps import require_profile
from openlaunch.db.session import get_session
from openlaunch.schemas.profile import CreateProfileRequest, ProfileOut
from openlaunch.services.profile_service import ProfileService
from openlaunch.services.serializers import profile_out

router = APIRouter(prefix="/profiles")


@router.post("", response_model=ProfileOut)
async def create_profile(request: CreateProfileRequest, session: AsyncSession = Depends(get_session)):
    svc = ProfileService(session)
    row = await svc.create(request)
    return profile_out(row)


@router.get("/{username}", response_model=ProfileOut)
async def get_profile(profile=Depends(require_profile)):
    return profile_out(profile)
