"""Shared fixtures: an in-memory database per test and fake delivery providers."""

from __future__ import annotations

import os

# Roda sem SMTP, GREEN-API ou banco externo
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["MAIL_SERVER"] = ""
os.environ["GREEN_API_INSTANCE_ID"] = ""
os.environ["GREEN_API_API_TOKEN"] = ""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notification_svc.database.database import Base
from notification_svc.models import notificationModel, notificationPreferenceModel  # noqa: F401
from notification_svc.models.enums import NotificationChannel
from notification_svc.services.notification_service import NotificationService
from notification_svc.services.preference_service import PreferenceService
from notification_svc.services.transports import EmailTransport, SmsTransport


class FakeEmailService:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent: list[dict[str, str]] = []

    async def send_email(self, to: str, subject: str, body: str) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "body": body})


class FakeSmsService:
    def __init__(self, delivered: bool = True, error: Exception | None = None):
        self.delivered = delivered
        self.error = error
        self.sent: list[dict[str, str]] = []

    async def send_sms(self, to: str, message: str) -> bool:
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "message": message})
        return self.delivered


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine) -> AsyncSession:
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def preference_service() -> PreferenceService:
    return PreferenceService()


@pytest.fixture
def email_service() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def sms_service() -> FakeSmsService:
    return FakeSmsService()


@pytest.fixture
def notification_service(preference_service, email_service, sms_service) -> NotificationService:
    return NotificationService(
        preference_service,
        {
            NotificationChannel.EMAIL: EmailTransport(email_service),
            NotificationChannel.SMS: SmsTransport(sms_service),
        },
    )
