from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from openlaunch.schemas.profile import ProfilePreview

CommentSortBy = Literal["newest", "oldest", "top"]


class CreateCommentRequest(BaseModel):
    author: str = Field(min_length=1, max_length=50)
    content: str = Field(min_length=1, max_length=5000)
    parent_id: str | None = None


class CommentOut(BaseModel):
    comment_id: str
    project_id: str
    parent_id: str | None = None
    content: str
    upvotes_count: int
    replies_count: int
    created_at: datetime
    author: ProfilePreview
