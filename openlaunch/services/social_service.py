from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.errors import api_error
from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import NormalizedOffsetParams, OffsetPaginatedResult, build_offset_paginated_result
from openlaunch.models import Follow, Profile
from openlaunch.services.notification_service import NotificationService
from openlaunch.services.profile_service import ProfileService

log = get_logger(__name__)


class SocialService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _find_follow(self, follower_id: str, following_id: str) -> Follow | None:
        stmt = select(Follow).where(Follow.follower_id == follower_id, Follow.following_id == following_id)
        return await self.session.scalar(stmt)

    async def toggle_follow(self, target: Profile, actor_username: str) -> tuple[bool, int]:
        """Follow ``target`` as ``actor_username``, or unfollow if already following.

        Returns the new state and the target's follower count.
        """
        actor = await ProfileService(self.session).get_by_username(actor_username)
        if actor.profile_id == target.profile_id:
            raise api_error(400, "cannot_follow_self", "You cannot follow yourself", {"username": target.username})

        existing = await self._find_follow(actor.profile_id, target.profile_id)
        if existing:
            await self.session.delete(existing)
            step = -1
        else:
            self.session.add(Follow(follower_id=actor.profile_id, following_id=target.profile_id))
            NotificationService(self.session).add(
                target.profile_id,
                "new_follower",
                f"{actor.display_name or actor.username} started following you",
                body="You have a new follower!",
                data={"actor_id": actor.profile_id, "actor_username": actor.username},
            )
            step = 1

        await self.session.execute(
            update(Profile)
            .where(Profile.profile_id == target.profile_id)
            .values(followers_count=Profile.followers_count + step)
        )
        await self.session.execute(
            update(Profile)
            .where(Profile.profile_id == actor.profile_id)
            .values(following_count=Profile.following_count + step)
        )
        await self.session.commit()
        await self.session.refresh(target)
        log.info("follow_toggled", follower=actor.username, following=target.username, active=existing is None)
        return existing is None, target.followers_count

    async def is_following(self, target: Profile, actor_username: str) -> bool:
        actor = await ProfileService(self.session).get_by_username(actor_username)
        return await self._find_follow(actor.profile_id, target.profile_id) is not None

    async def followers(self, profile: Profile, params: NormalizedOffsetParams) -> OffsetPaginatedResult[Profile]:
        return await self._follow_page(Follow.follower_id, Follow.following_id == profile.profile_id, params)

    async def following(self, profile: Profile, params: NormalizedOffsetParams) -> OffsetPaginatedResult[Profile]:
        return await self._follow_page(Follow.following_id, Follow.follower_id == profile.profile_id, params)

    async def _follow_page(self, profile_col, condition, params: NormalizedOffsetParams) -> OffsetPaginatedResult[Profile]:
        # most recent follow first
        total = await self.session.scalar(select(func.count()).select_from(Follow).where(condition))
        stmt = (
            select(Profile)
            .join(Follow, profile_col == Profile.profile_id)
            .where(condition)
            .order_by(Follow.created_at.desc(), Follow.follow_id.desc())
            .offset(params.offset)
            .limit(params.limit)
        )
        result = await self.session.execute(stmt)
        return build_offset_paginated_result(list(result.scalars().all()), total or 0, params)
