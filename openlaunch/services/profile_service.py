from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.errors import api_error
from openlaunch.core.logging import get_logger
from openlaunch.models import Profile
from openlaunch.schemas.profile import CreateProfileRequest

log = get_logger(__name__)


class ProfileService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: CreateProfileRequest) -> Profile:
        existing = await self.session.scalar(select(Profile.profile_id).where(Profile.username == request.username))
        if existing:
            raise api_error(409, "username_taken", "Username is already taken", {"username": request.username})
        row = Profile(
            username=request.username,
            email=request.email,
            display_name=request.display_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
            reputation_score=request.reputation_score,
            followers_count=request.followers_count,
        )
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        log.info("profile_created", profile_id=row.profile_id, username=row.username)
        return row

    async def get_by_username(self, username: str) -> Profile:
        row = await self.session.scalar(select(Profile).where(Profile.username == username))
        if not row:
            raise api_error(404, "profile_not_found", "Profile not found", {"username": username})
        return row
