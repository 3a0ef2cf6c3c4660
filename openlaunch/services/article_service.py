from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.errors import api_error
from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import NormalizedOffsetParams, OffsetPaginatedResult
from openlaunch.core.slugs import slugify
from openlaunch.models import Article
from openlaunch.models.entities import now_utc
from openlaunch.schemas.article import CreateArticleRequest
from openlaunch.services.listing import offset_page
from openlaunch.services.profile_service import ProfileService

log = get_logger(__name__)

WORDS_PER_MINUTE = 200

ARTICLE_ORDERING = {
    "newest": [Article.created_at.desc(), Article.article_id.desc()],
    "oldest": [Article.created_at.asc(), Article.article_id.asc()],
    "popular": [Article.views_count.desc(), Article.created_at.desc(), Article.article_id.desc()],
    "most_commented": [Article.comments_count.desc(), Article.created_at.desc(), Article.article_id.desc()],
}


def reading_time_minutes(content: str | None) -> int:
    if not content:
        return 0
    words = len(content.split())
    return max(1, round(words / WORDS_PER_MINUTE))


class ArticleService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: CreateArticleRequest) -> Article:
        author = await ProfileService(self.session).get_by_username(request.author)
        slug = request.slug or slugify(request.title, max_length=200)
        existing = await self.session.scalar(select(Article.article_id).where(Article.slug == slug))
        if existing:
            raise api_error(409, "slug_taken", "An article with this slug already exists", {"slug": slug})
        row = Article(
            author=author,
            slug=slug,
            title=request.title,
            subtitle=request.subtitle,
            content=request.content,
            reading_time_minutes=reading_time_minutes(request.content),
            is_published=request.is_published,
            published_at=now_utc() if request.is_published else None,
            tags_json=request.tags,
        )
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        log.info("article_created", article_id=row.article_id, slug=slug, published=row.is_published)
        return row

    async def get_by_slug(self, slug: str) -> Article:
        row = await self.session.scalar(select(Article).where(Article.slug == slug))
        if not row:
            raise api_error(404, "article_not_found", "Article not found", {"slug": slug})
        return row

    async def list(
        self,
        params: NormalizedOffsetParams,
        *,
        author: str | None = None,
        search: str | None = None,
        is_published: bool | None = None,
        sort_by: str = "newest",
    ) -> OffsetPaginatedResult[Article]:
        conditions = [Article.is_published.is_(True if is_published is None else is_published)]
        if author:
            profile = await ProfileService(self.session).get_by_username(author)
            conditions.append(Article.author_id == profile.profile_id)
        if search:
            pattern = f"%{search}%"
            conditions.append(or_(Article.title.ilike(pattern), Article.subtitle.ilike(pattern)))
        return await offset_page(self.session, Article, conditions, ARTICLE_ORDERING[sort_by], params)
