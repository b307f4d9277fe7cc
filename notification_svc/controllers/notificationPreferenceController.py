# notification_svc/controllers/notificationPreferenceController.py

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from notification_svc.controllers.base import CRUDBase
from notification_svc.models.notificationPreferenceModel import NotificationPreference


class CRUDNotificationPreference(CRUDBase[NotificationPreference]):

    async def get_by_user_id(self, db: AsyncSession, *, user_id: UUID) -> Optional[NotificationPreference]:
        result = await db.execute(
            select(self.model).where(self.model.user_id == user_id)
        )
        return result.scalars().first()


preference_controller = CRUDNotificationPreference(NotificationPreference)
