from collections.abc import Callable
from typing import Any

from openlaunch.core.page_numbers import generate_page_numbers
from openlaunch.core.pagination import (
    CursorPaginatedResult,
    NormalizedOffsetParams,
    OffsetPaginatedResult,
    get_pagination_info,
)
from openlaunch.models import Article, Comment, Notification, Profile, Project
from openlaunch.schemas.article import ArticleOut
from openlaunch.schemas.comment import CommentOut
from openlaunch.schemas.common import CursorPage, OffsetPage, PaginationInfoOut
from openlaunch.schemas.leaderboard import LeaderboardEntry
from openlaunch.schemas.notification import NotificationOut
from openlaunch.schemas.profile import ProfileOut, ProfilePreview
from openlaunch.schemas.project import ProjectOut
from openlaunch.services.leaderboard_service import LeaderboardRow


def profile_preview(m: Profile) -> ProfilePreview:
    return ProfilePreview(
        profile_id=m.profile_id,
        username=m.username,
        display_name=m.display_name,
        avatar_url=m.avatar_url,
        is_verified=m.is_verified,
        reputation_score=m.reputation_score,
    )


def profile_out(m: Profile) -> ProfileOut:
    return ProfileOut(
        profile_id=m.profile_id,
        username=m.username,
        display_name=m.display_name,
        avatar_url=m.avatar_url,
        is_verified=m.is_verified,
        reputation_score=m.reputation_score,
        bio=m.bio,
        followers_count=m.followers_count,
        following_count=m.following_count,
        created_at=m.created_at,
    )


def project_out(m: Project) -> ProjectOut:
    return ProjectOut(
        project_id=m.project_id,
        slug=m.slug,
        name=m.name,
        tagline=m.tagline,
        description=m.description,
        website_url=m.website_url,
        github_url=m.github_url,
        status=m.status,
        is_open_source=m.is_open_source,
        tech_stack=m.tech_stack_json or [],
        upvotes_count=m.upvotes_count,
        views_count=m.views_count,
        comments_count=m.comments_count,
        launch_date=m.launch_date,
        created_at=m.created_at,
        owner=profile_preview(m.owner),
    )


def article_out(m: Article) -> ArticleOut:
    return ArticleOut(
        article_id=m.article_id,
        slug=m.slug,
        title=m.title,
        subtitle=m.subtitle,
        reading_time_minutes=m.reading_time_minutes,
        is_published=m.is_published,
        published_at=m.published_at,
        tags=m.tags_json or [],
        views_count=m.views_count,
        likes_count=m.likes_count,
        comments_count=m.comments_count,
        created_at=m.created_at,
        author=profile_preview(m.author),
    )


def comment_out(m: Comment) -> CommentOut:
    return CommentOut(
        comment_id=m.comment_id,
        project_id=m.project_id,
        parent_id=m.parent_id,
        content=m.content,
        upvotes_count=m.upvotes_count,
        replies_count=m.replies_count,
        created_at=m.created_at,
        author=profile_preview(m.author),
    )


def notification_out(m: Notification) -> NotificationOut:
    return NotificationOut(
        notification_id=m.notification_id,
        type=m.type,
        title=m.title,
        body=m.body,
        data=m.data_json or {},
        is_read=m.is_read,
        created_at=m.created_at,
    )


def leaderboard_entry_out(row: LeaderboardRow) -> LeaderboardEntry:
    return LeaderboardEntry(rank=row.rank, score=row.score, profile=profile_preview(row.profile))


def pagination_info_out(result: OffsetPaginatedResult, params: NormalizedOffsetParams, max_visible: int = 7) -> PaginationInfoOut:
    info = get_pagination_info(result.total, result.page, params.limit)
    return PaginationInfoOut(
        current_page=info.current_page,
        total_pages=info.total_pages,
        total_items=info.total_items,
        items_per_page=info.items_per_page,
        has_previous_page=info.has_previous_page,
        has_next_page=info.has_next_page,
        start_index=info.start_index,
        end_index=info.end_index,
        pages=generate_page_numbers(info.current_page, info.total_pages, max_visible),
    )


def offset_page_out(
    result: OffsetPaginatedResult,
    params: NormalizedOffsetParams,
    item_out: Callable[[Any], Any],
    max_visible: int = 7,
) -> OffsetPage:
    return OffsetPage(
        items=[item_out(i) for i in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
        has_more=result.has_more,
        pagination=pagination_info_out(result, params, max_visible),
    )


def cursor_page_out(result: CursorPaginatedResult, item_out: Callable[[Any], Any]) -> CursorPage:
    return CursorPage(
        items=[item_out(i) for i in result.items],
        next_cursor=result.next_cursor,
        has_more=result.has_more,
    )
