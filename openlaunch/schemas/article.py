from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from openlaunch.schemas.profile import ProfilePreview

ArticleSortBy = Literal["newest", "oldest", "popular", "most_commented"]


class CreateArticleRequest(BaseModel):
    author: str = Field(min_length=1, max_length=50, description="Username of the author")
    title: str = Field(min_length=1, max_length=200)
    subtitle: str | None = Field(default=None, max_length=300)
    slug: str | None = Field(default=None, min_length=1, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    content: str | None = None
    is_published: bool = False
    tags: list[str] = Field(default_factory=list, max_length=10)


class ArticleOut(BaseModel):
    article_id: str
    slug: str
    title: str
    subtitle: str | None = None
    reading_time_minutes: int
    is_published: bool
    published_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    views_count: int
    likes_count: int
    comments_count: int
    created_at: datetime
    author: ProfilePreview
