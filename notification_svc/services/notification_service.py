# notification_svc/services/notification_service.py

import logging
from datetime import datetime
from typing import Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from notification_svc.controllers.notificationController import notification_controller
from notification_svc.core.config import Settings, settings
from notification_svc.core.exceptions import DisabledError
from notification_svc.models.enums import NotificationChannel, NotificationStatus
from notification_svc.models.notificationModel import Notification
from notification_svc.schemas.notificationSchema import NotificationRequest
from notification_svc.services.email_services import build_email_service
from notification_svc.services.preference_service import PreferenceService, preference_service
from notification_svc.services.transports import DeliveryResult, EmailTransport, SmsTransport, Transport
from notification_svc.services.whatsapp_client_service import build_sms_service

logger = logging.getLogger(__name__)


def build_transports(settings: Settings) -> Dict[NotificationChannel, Transport]:
    """Escolhe, uma única vez, a variante de cada provedor conforme as credenciais."""
    return {
        NotificationChannel.EMAIL: EmailTransport(build_email_service(settings)),
        NotificationChannel.SMS: SmsTransport(build_sms_service(settings)),
    }


class NotificationService:
    def __init__(
        self,
        preference_service: PreferenceService,
        transports: Dict[NotificationChannel, Transport],
        controller=notification_controller,
        clock=datetime.now,
    ):
        self.preference_service = preference_service
        self.transports = transports
        self.controller = controller
        self.clock = clock

    async def send(self, db: AsyncSession, request: NotificationRequest) -> Notification:
        """
        Envia a notificação pelo canal preferido do usuário e registra o resultado.

        Só NotFoundError e DisabledError escapam daqui. Depois do gate,
        qualquer falha de entrega vira um registro com status FAILED.
        """
        preference = await self.preference_service.get_by_user_id(db, request.user_id)

        if not preference.enabled:
            logger.warning("Notification rejected: user %s has notifications disabled", request.user_id)
            raise DisabledError(request.user_id)

        notification = Notification(
            subject=request.subject,
            body=request.body,
            created_on=self.clock(),
            channel=preference.channel,
            user_id=request.user_id,
            deleted=False,
        )

        result = await self._deliver(preference.channel, preference.contact_info, request)
        notification.status = NotificationStatus.SUCCEEDED if result.success else NotificationStatus.FAILED
        if not result.success:
            logger.error(
                "Notification to user %s via %s failed: %s",
                request.user_id, preference.channel, result.error,
            )

        return await self.controller.save(db, db_obj=notification)

    async def _deliver(self, channel: NotificationChannel, recipient: str, request: NotificationRequest) -> DeliveryResult:
        transport = self.transports.get(channel)
        if transport is None:
            return DeliveryResult.failed(f"No transport registered for channel {channel}")
        return await transport.send(recipient, request.subject, request.body)

    async def get_history(self, db: AsyncSession, user_id: UUID) -> List[Notification]:
        return await self.controller.get_active_by_user_id(db, user_id=user_id)


# Instância global do serviço
notification_service = NotificationService(preference_service, build_transports(settings))
