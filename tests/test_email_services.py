"""Tests for the SMTP email sender and the email transport adapter."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from notification_svc.core.config import Settings
from notification_svc.services.email_services import EmailService, LoggingEmailService, build_email_service
from notification_svc.services.transports import DeliveryResult, EmailTransport

from .conftest import FakeEmailService

SMTP_SETTINGS = Settings(
    MAIL_USERNAME="mailer",
    MAIL_PASSWORD="secret",
    MAIL_FROM="noreply@example.com",
    MAIL_SERVER="smtp.example.com",
    MAIL_PORT=587,
)


@pytest.mark.asyncio
async def test_send_email_sends_plain_text_message() -> None:
    with patch("notification_svc.services.email_services.FastMail") as fast_mail:
        fast_mail.return_value.send_message = AsyncMock()

        await EmailService(SMTP_SETTINGS).send_email(to="user@example.com", subject="Hello", body="World")

    message = fast_mail.return_value.send_message.await_args.args[0]
    assert message.subject == "Hello"
    assert message.body == "World"
    assert [str(recipient.email) for recipient in message.recipients] == ["user@example.com"]


@pytest.mark.asyncio
async def test_send_email_propagates_smtp_failure() -> None:
    with patch("notification_svc.services.email_services.FastMail") as fast_mail:
        fast_mail.return_value.send_message = AsyncMock(side_effect=ConnectionError("smtp down"))

        with pytest.raises(ConnectionError):
            await EmailService(SMTP_SETTINGS).send_email(to="user@example.com", subject="x", body="y")


def test_build_email_service_picks_variant_from_settings() -> None:
    assert isinstance(build_email_service(SMTP_SETTINGS), EmailService)
    assert isinstance(build_email_service(Settings(MAIL_SERVER="")), LoggingEmailService)


@pytest.mark.asyncio
async def test_email_transport_maps_exception_to_failed_result() -> None:
    transport = EmailTransport(FakeEmailService(error=RuntimeError("smtp down")))

    result = await transport.send("user@example.com", "S", "B")

    assert result == DeliveryResult(success=False, error="smtp down")


@pytest.mark.asyncio
async def test_email_transport_maps_invalid_address_to_failed_result() -> None:
    with patch("notification_svc.services.email_services.FastMail") as fast_mail:
        fast_mail.return_value.send_message = AsyncMock()
        transport = EmailTransport(EmailService(SMTP_SETTINGS))

        result = await transport.send("not-an-address", "S", "B")

    assert result.success is False
    fast_mail.return_value.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_logging_email_service_does_not_raise() -> None:
    result = await EmailTransport(LoggingEmailService()).send("user@example.com", "S", "B")

    assert result == DeliveryResult.ok()


def test_blank_mail_from_falls_back_to_logging_sender() -> None:
    settings = Settings(MAIL_SERVER="smtp.example.com", MAIL_FROM="")

    assert settings.MAIL_FROM is None
    assert settings.mail_configured is False
    assert isinstance(build_email_service(settings), LoggingEmailService)
