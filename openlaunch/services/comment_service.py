from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.errors import api_error
from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import NormalizedOffsetParams, OffsetPaginatedResult
from openlaunch.models import Comment, CommentUpvote
from openlaunch.schemas.comment import CreateCommentRequest
from openlaunch.services.listing import offset_page
from openlaunch.services.notification_service import NotificationService
from openlaunch.services.profile_service import ProfileService
from openlaunch.services.project_service import ProjectService

log = get_logger(__name__)

COMMENT_ORDERING = {
    "newest": [Comment.created_at.desc(), Comment.comment_id.desc()],
    "oldest": [Comment.created_at.asc(), Comment.comment_id.asc()],
    "top": [Comment.upvotes_count.desc(), Comment.created_at.desc(), Comment.comment_id.desc()],
}

PREVIEW_LENGTH = 120


class CommentService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project_slug: str, request: CreateCommentRequest) -> Comment:
        project = await ProjectService(self.session).get_by_slug(project_slug)
        author = await ProfileService(self.session).get_by_username(request.author)

        parent = None
        if request.parent_id:
            parent = await self.session.get(Comment, request.parent_id)
            if not parent or parent.project_id != project.project_id:
                raise api_error(
                    400,
                    "invalid_parent_comment",
                    "Parent comment does not belong to this project",
                    {"parent_id": request.parent_id, "project_slug": project_slug},
                )
            parent.replies_count += 1

        row = Comment(
            author=author,
            project_id=project.project_id,
            parent_id=parent.comment_id if parent else None,
            content=request.content,
        )
        self.session.add(row)
        project.comments_count += 1
        await self.session.flush()

        recipient_id = parent.author_id if parent else project.owner_id
        if recipient_id != author.profile_id:
            NotificationService(self.session).add(
                recipient_id,
                "comment_reply" if parent else "comment_received",
                f"{author.username} replied to your comment" if parent else f"{author.username} commented on {project.name}",
                body=request.content[:PREVIEW_LENGTH],
                data={"project_slug": project.slug, "comment_id": row.comment_id},
            )

        await self.session.commit()
        await self.session.refresh(row)
        log.info("comment_created", comment_id=row.comment_id, project_id=project.project_id, is_reply=parent is not None)
        return row

    async def get(self, comment_id: str) -> Comment:
        row = await self.session.scalar(select(Comment).where(Comment.comment_id == comment_id))
        if not row:
            raise api_error(404, "comment_not_found", "Comment not found", {"comment_id": comment_id})
        return row

    async def list_for_project(
        self,
        project_slug: str,
        params: NormalizedOffsetParams,
        sort_by: str = "newest",
    ) -> OffsetPaginatedResult[Comment]:
        project = await ProjectService(self.session).get_by_slug(project_slug)
        conditions = [Comment.project_id == project.project_id, Comment.parent_id.is_(None)]
        return await offset_page(self.session, Comment, conditions, COMMENT_ORDERING[sort_by], params)

    async def list_replies(self, comment_id: str, params: NormalizedOffsetParams) -> OffsetPaginatedResult[Comment]:
        parent = await self.get(comment_id)
        conditions = [Comment.parent_id == parent.comment_id]
        return await offset_page(self.session, Comment, conditions, COMMENT_ORDERING["oldest"], params)

    async def toggle_upvote(self, comment_id: str, actor_username: str) -> tuple[bool, int]:
        comment = await self.get(comment_id)
        actor = await ProfileService(self.session).get_by_username(actor_username)
        existing = await self.session.scalar(
            select(CommentUpvote).where(
                CommentUpvote.profile_id == actor.profile_id,
                CommentUpvote.comment_id == comment.comment_id,
            )
        )
        if existing:
            await self.session.delete(existing)
            step = -1
        else:
            self.session.add(CommentUpvote(profile_id=actor.profile_id, comment_id=comment.comment_id))
            step = 1
        await self.session.execute(
            update(Comment)
            .where(Comment.comment_id == comment.comment_id)
            .values(upvotes_count=Comment.upvotes_count + step)
        )
        await self.session.commit()
        await self.session.refresh(comment)
        return existing is None, comment.upvotes_count
