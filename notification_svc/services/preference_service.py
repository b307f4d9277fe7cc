# notification_svc/services/preference_service.py

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from notification_svc.controllers.notificationPreferenceController import preference_controller
from notification_svc.core.exceptions import NotFoundError
from notification_svc.models.enums import NotificationChannel
from notification_svc.models.notificationPreferenceModel import NotificationPreference
from notification_svc.schemas.notificationPreferenceSchema import PreferenceRequest


def detect_channel(contact_info: Optional[str]) -> NotificationChannel:
    """Heurística: '@' indica e-mail, qualquer outro texto é telefone. Vazio cai em EMAIL."""
    if contact_info is None or not contact_info.strip():
        return NotificationChannel.EMAIL
    if "@" in contact_info:
        return NotificationChannel.EMAIL
    return NotificationChannel.SMS


class PreferenceService:
    def __init__(self, controller=preference_controller, clock=datetime.now):
        self.controller = controller
        self.clock = clock

    async def upsert(self, db: AsyncSession, request: PreferenceRequest) -> NotificationPreference:
        """
        Cria ou atualiza a preferência do usuário.

        Sem canal explícito, o canal é detectado de novo a partir de
        contact_info, inclusive em atualizações.
        """
        channel = request.channel or detect_channel(request.contact_info)
        now = self.clock()

        preference = await self.controller.get_by_user_id(db, user_id=request.user_id)
        if preference is not None:
            preference.enabled = request.enabled
            preference.contact_info = request.contact_info
            preference.channel = channel
            # updated_on precisa avançar mesmo se o relógio não andou
            if preference.updated_on is not None and now <= preference.updated_on:
                now = preference.updated_on + timedelta(microseconds=1)
            preference.updated_on = now
            return await self.controller.save(db, db_obj=preference)

        preference = NotificationPreference(
            user_id=request.user_id,
            channel=channel,
            enabled=request.enabled,
            contact_info=request.contact_info,
            created_on=now,
            updated_on=now,
        )
        return await self.controller.save(db, db_obj=preference)

    async def get_by_user_id(self, db: AsyncSession, user_id: UUID) -> NotificationPreference:
        preference = await self.controller.get_by_user_id(db, user_id=user_id)
        if preference is None:
            raise NotFoundError(user_id)
        return preference


preference_service = PreferenceService()
