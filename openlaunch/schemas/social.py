from pydantic import BaseModel, Field


class ActorRequest(BaseModel):
    actor: str = Field(min_length=1, max_length=50, description="Username of the acting profile")


class FollowResult(BaseModel):
    following: bool
    followers_count: int


class FollowStatusOut(BaseModel):
    is_following: bool


class UpvoteResult(BaseModel):
    upvoted: bool
    upvotes_count: int
