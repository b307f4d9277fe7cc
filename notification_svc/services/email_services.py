import logging

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from notification_svc.core.config import Settings

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self, settings: Settings):
        self.conf = ConnectionConfig(
            MAIL_USERNAME=settings.MAIL_USERNAME,
            MAIL_PASSWORD=settings.MAIL_PASSWORD,
            MAIL_FROM=settings.MAIL_FROM,
            MAIL_PORT=settings.MAIL_PORT,
            MAIL_SERVER=settings.MAIL_SERVER,
            MAIL_FROM_NAME=settings.MAIL_FROM_NAME,
            MAIL_STARTTLS=settings.MAIL_STARTTLS,
            MAIL_SSL_TLS=settings.MAIL_SSL_TLS,
            USE_CREDENTIALS=bool(settings.MAIL_USERNAME),
            TIMEOUT=settings.MAIL_TIMEOUT,
        )

    async def send_email(self, to: str, subject: str, body: str) -> None:
        """
        Envia um e-mail em texto puro.

        Args:
            to: O endereço do destinatário.
            subject: O assunto do e-mail.
            body: O corpo da mensagem.

        Qualquer falha (endereço inválido, SMTP fora do ar) é propagada.
        """
        message = MessageSchema(
            subject=subject,
            recipients=[to],
            body=body,
            subtype=MessageType.plain,
        )

        fm = FastMail(self.conf)
        await fm.send_message(message)
        logger.info("[EMAIL] Sent to %s (subject=%r)", to, subject)


class LoggingEmailService:
    """Usado quando o SMTP não está configurado: apenas registra a mensagem."""

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("[EMAIL] (LOG ONLY) To: %s Subject: %s Body: %s", to, subject, body)


def build_email_service(settings: Settings):
    if settings.mail_configured:
        logger.info("[EMAIL] Using SMTP server %s:%s", settings.MAIL_SERVER, settings.MAIL_PORT)
        return EmailService(settings)
    logger.warning("[EMAIL] SMTP not configured - emails will be logged only.")
    return LoggingEmailService()
