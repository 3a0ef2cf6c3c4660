from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from openlaunch.schemas.profile import ProfilePreview

ProjectStatus = Literal["draft", "pending", "launched", "featured"]
ProjectSortBy = Literal["newest", "oldest", "popular", "most_commented"]


class CreateProjectRequest(BaseModel):
    owner: str = Field(min_length=1, max_length=50, description="Username of the owning profile")
    name: str = Field(min_length=1, max_length=100)
    tagline: str = Field(min_length=1, max_length=140)
    slug: str | None = Field(default=None, min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    website_url: str | None = Field(default=None, max_length=500)
    github_url: str | None = Field(default=None, max_length=500)
    status: ProjectStatus = "draft"
    is_open_source: bool = False
    tech_stack: list[str] = Field(default_factory=list, max_length=20)


class ProjectOut(BaseModel):
    project_id: str
    slug: str
    name: str
    tagline: str
    description: str | None = None
    website_url: str | None = None
    github_url: str | None = None
    status: ProjectStatus
    is_open_source: bool
    tech_stack: list[str] = Field(default_factory=list)
    upvotes_count: int
    views_count: int
    comments_count: int
    launch_date: datetime | None = None
    created_at: datetime
    owner: ProfilePreview
