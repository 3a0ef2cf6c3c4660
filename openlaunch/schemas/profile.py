from datetime import datetime

from pydantic import BaseModel, Field


class CreateProfileRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[a-zA-Z0-9_-]+$")
    email: str = Field(min_length=3, max_length=255)
    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None
    reputation_score: int = Field(default=0, ge=0)
    followers_count: int = Field(default=0, ge=0)


class ProfilePreview(BaseModel):
    profile_id: str
    username: str
    display_name: str | None = None
    avatar_url: str | None = None
    is_verified: bool = False
    reputation_score: int = 0


class ProfileOut(ProfilePreview):
    bio: str | None = None
    followers_count: int = 0
    following_count: int = 0
    created_at: datetime
