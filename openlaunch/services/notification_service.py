from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from openlaunch.core.logging import get_logger
from openlaunch.core.pagination import CursorPaginatedResult, NormalizedCursorParams
from openlaunch.models import Notification
from openlaunch.services.listing import keyset_page

log = get_logger(__name__)


class NotificationService:
    def __init__(self, session: AsyncSession):
        self.session = session

    def add(self, profile_id: str, notification_type: str, title: str, body: str | None = None, data: dict | None = None) -> Notification:
        """Stage a notification in the current transaction; the caller commits."""
        row = Notification(profile_id=profile_id, type=notification_type, title=title, body=body, data_json=data or {})
        self.session.add(row)
        log.info("notification_created", profile_id=profile_id, type=notification_type)
        return row

    async def feed(self, profile_id: str, params: NormalizedCursorParams, unread_only: bool = False) -> CursorPaginatedResult[Notification]:
        conditions = [Notification.profile_id == profile_id]
        if unread_only:
            conditions.append(Notification.is_read.is_(False))
        return await keyset_page(
            self.session,
            Notification,
            Notification.created_at,
            Notification.notification_id,
            conditions,
            params,
        )

    async def unread_count(self, profile_id: str) -> int:
        stmt = select(func.count()).select_from(Notification).where(
            Notification.profile_id == profile_id, Notification.is_read.is_(False)
        )
        return await self.session.scalar(stmt) or 0

    async def mark_all_read(self, profile_id: str) -> int:
        stmt = (
            update(Notification)
            .where(Notification.profile_id == profile_id, Notification.is_read.is_(False))
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0
