"""Adaptadores de entrega usados pelo NotificationService.

Cada transporte expõe a mesma capacidade, `send(recipient, subject, body)`,
e devolve um DeliveryResult em vez de lançar exceção. O dispatcher só
conhece essa interface.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "DeliveryResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "DeliveryResult":
        return cls(success=False, error=error)


class Transport(Protocol):
    async def send(self, recipient: str, subject: str, body: str) -> DeliveryResult:
        ...


class EmailTransport:
    def __init__(self, email_service):
        self.email_service = email_service

    async def send(self, recipient: str, subject: str, body: str) -> DeliveryResult:
        try:
            await self.email_service.send_email(to=recipient, subject=subject, body=body)
        except Exception as e:
            logger.error("Failed email due to: %s", e)
            return DeliveryResult.failed(str(e))
        return DeliveryResult.ok()


class SmsTransport:
    def __init__(self, sms_service):
        self.sms_service = sms_service

    async def send(self, recipient: str, subject: str, body: str) -> DeliveryResult:
        # O assunto não existe em SMS/WhatsApp; só o corpo é enviado
        try:
            delivered = await self.sms_service.send_sms(to=recipient, message=body)
        except Exception as e:
            logger.error("Failed SMS due to: %s", e)
            return DeliveryResult.failed(str(e))
        if not delivered:
            return DeliveryResult.failed("SMS provider rejected the message")
        return DeliveryResult.ok()
