from typing import Literal

from pydantic import BaseModel

from openlaunch.schemas.profile import ProfilePreview

LeaderboardType = Literal["reputation", "followers", "projects"]


class LeaderboardEntry(BaseModel):
    rank: int
    score: int
    profile: ProfilePreview
