from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.errors import api_error
from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import (
    CursorPaginatedResult,
    NormalizedCursorParams,
    NormalizedOffsetParams,
    OffsetPaginatedResult,
)
from openlaunch.core.slugs import slugify
from openlaunch.models import PUBLIC_PROJECT_STATUSES, Project, ProjectUpvote
from openlaunch.models.entities import now_utc
from openlaunch.schemas.project import CreateProjectRequest
from openlaunch.services.listing import keyset_page, offset_page
from openlaunch.services.notification_service import NotificationService
from openlaunch.services.profile_service import ProfileService

log = get_logger(__name__)

PROJECT_ORDERING = {
    "newest": [Project.created_at.desc(), Project.project_id.desc()],
    "oldest": [Project.created_at.asc(), Project.project_id.asc()],
    "popular": [Project.upvotes_count.desc(), Project.created_at.desc(), Project.project_id.desc()],
    "most_commented": [Project.comments_count.desc(), Project.created_at.desc(), Project.project_id.desc()],
}


class ProjectService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: CreateProjectRequest) -> Project:
        owner = await ProfileService(self.session).get_by_username(request.owner)
        slug = request.slug or slugify(request.name)
        existing = await self.session.scalar(select(Project.project_id).where(Project.slug == slug))
        if existing:
            raise api_error(409, "slug_taken", "A project with this slug already exists", {"slug": slug})
        row = Project(
            owner=owner,
            slug=slug,
            name=request.name,
            tagline=request.tagline,
            description=request.description,
            website_url=request.website_url,
            github_url=request.github_url,
            status=request.status,
            is_open_source=request.is_open_source,
            tech_stack_json=request.tech_stack,
            launch_date=now_utc() if request.status in PUBLIC_PROJECT_STATUSES else None,
        )
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        log.info("project_created", project_id=row.project_id, slug=slug, status=row.status)
        return row

    async def get_by_slug(self, slug: str) -> Project:
        row = await self.session.scalar(select(Project).where(Project.slug == slug))
        if not row:
            raise api_error(404, "project_not_found", "Project not found", {"slug": slug})
        return row

    async def list(
        self,
        params: NormalizedOffsetParams,
        *,
        status: str | None = None,
        owner: str | None = None,
        search: str | None = None,
        sort_by: str = "newest",
    ) -> OffsetPaginatedResult[Project]:
        conditions = []
        if status:
            conditions.append(Project.status == status)
        else:
            conditions.append(Project.status.in_(PUBLIC_PROJECT_STATUSES))
        if owner:
            profile = await ProfileService(self.session).get_by_username(owner)
            conditions.append(Project.owner_id == profile.profile_id)
        if search:
            pattern = f"%{search}%"
            conditions.append(or_(Project.name.ilike(pattern), Project.tagline.ilike(pattern)))
        return await offset_page(self.session, Project, conditions, PROJECT_ORDERING[sort_by], params)

    async def toggle_upvote(self, slug: str, actor_username: str) -> tuple[bool, int]:
        project = await self.get_by_slug(slug)
        actor = await ProfileService(self.session).get_by_username(actor_username)
        existing = await self.session.scalar(
            select(ProjectUpvote).where(
                ProjectUpvote.profile_id == actor.profile_id,
                ProjectUpvote.project_id == project.project_id,
            )
        )
        if existing:
            await self.session.delete(existing)
            step = -1
        else:
            self.session.add(ProjectUpvote(profile_id=actor.profile_id, project_id=project.project_id))
            if project.owner_id != actor.profile_id:
                NotificationService(self.session).add(
                    project.owner_id,
                    "project_upvoted",
                    f"{actor.display_name or actor.username} upvoted {project.name}",
                    body="Your project received an upvote!",
                    data={"project_slug": project.slug, "actor_username": actor.username},
                )
            step = 1

        await self.session.execute(
            update(Project)
            .where(Project.project_id == project.project_id)
            .values(upvotes_count=Project.upvotes_count + step)
        )
        await self.session.commit()
        await self.session.refresh(project)
        log.info("project_upvote_toggled", project_id=project.project_id, actor=actor.username, active=existing is None)
        return existing is None, project.upvotes_count

    async def launches(self, params: NormalizedCursorParams) -> CursorPaginatedResult[Project]:
        return await keyset_page(
            self.session,
            Project,
            Project.created_at,
            Project.project_id,
            [Project.status.in_(PUBLIC_PROJECT_STATUSES)],
            params,
        )
