# notification_svc/controllers/notificationController.py

from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from notification_svc.controllers.base import CRUDBase
from notification_svc.models.notificationModel import Notification


class CRUDNotification(CRUDBase[Notification]):

    async def get_active_by_user_id(self, db: AsyncSession, *, user_id: UUID) -> List[Notification]:
        # Registros com deleted=True ficam fora do histórico
        result = await db.execute(
            select(self.model)
            .where(self.model.user_id == user_id, self.model.deleted.is_(False))
        )
        return list(result.scalars().all())


notification_controller = CRUDNotification(Notification)
