from dataclasses import dataclass

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.pagination import NormalizedOffsetParams, OffsetPaginatedResult, build_offset_paginated_result
from openlaunch.models import PUBLIC_PROJECT_STATUSES, Profile, Project


@dataclass(frozen=True)
class LeaderboardRow:
    rank: int
    score: int
    profile: Profile


class LeaderboardService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, board: str, params: NormalizedOffsetParams) -> OffsetPaginatedResult[LeaderboardRow]:
        if board == "projects":
            ranked, total = await self._projects(params)
        else:
            score_col = Profile.followers_count if board == "followers" else Profile.reputation_score
            ranked, total = await self._profile_column(score_col, params)
        rows = [
            LeaderboardRow(rank=params.offset + position + 1, score=int(score or 0), profile=profile)
            for position, (profile, score) in enumerate(ranked)
        ]
        return build_offset_paginated_result(rows, total, params)

    async def _profile_column(self, score_col, params: NormalizedOffsetParams):
        total = await self.session.scalar(select(func.count()).select_from(Profile))
        stmt = (
            select(Profile, score_col)
            .order_by(score_col.desc(), Profile.created_at.asc(), Profile.profile_id.asc())
            .offset(params.offset)
            .limit(params.limit)
        )
        result = await self.session.execute(stmt)
        return list(result.all()), total or 0

    async def _projects(self, params: NormalizedOffsetParams):
        public = Project.status.in_(PUBLIC_PROJECT_STATUSES)
        total = await self.session.scalar(select(func.count(distinct(Project.owner_id))).where(public))
        score = func.count(Project.project_id).label("score")
        stmt = (
            select(Profile, score)
            .join(Project, Project.owner_id == Profile.profile_id)
            .where(public)
            .group_by(Profile.profile_id)
            .order_by(score.desc(), Profile.created_at.asc(), Profile.profile_id.asc())
            .offset(params.offset)
            .limit(params.limit)
        )
        result = await self.session.execute(stmt)
        return list(result.all()), total or 0
