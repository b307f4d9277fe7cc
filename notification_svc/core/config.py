# notification_svc/core/config.py
from dataclasses import dataclass
from typing import Optional

from pydantic import EmailStr, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Configurações do Banco de Dados
    DATABASE_URL: str = "sqlite+aiosqlite:///./notifications.db"
    DATABASE_ECHO: bool = False

    # Configurações de Email (sem MAIL_SERVER o envio é apenas logado)
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_FROM: Optional[EmailStr] = None
    MAIL_PORT: int = 587
    MAIL_SERVER: str = ""
    MAIL_FROM_NAME: str = "Notifications"
    MAIL_STARTTLS: bool = True
    MAIL_SSL_TLS: bool = False
    MAIL_TIMEOUT: int = 60

    # Configurações do GREEN-API (WhatsApp)
    GREEN_API_INSTANCE_ID: str = ""
    GREEN_API_API_TOKEN: str = ""
    GREEN_API_URL: str = "https://api.green-api.com"
    GREEN_API_TIMEOUT: float = 30.0
    SMS_COUNTRY_CODE: str = "359"
    SMS_NATIONAL_PATTERN: str = r"^[89]\d{8}$"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @field_validator("MAIL_FROM", mode="before")
    @classmethod
    def empty_mail_from_is_none(cls, value):
        # MAIL_FROM= vazio no .env equivale a não configurado
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def mail_configured(self) -> bool:
        return bool(self.MAIL_SERVER.strip()) and self.MAIL_FROM is not None


@dataclass(frozen=True)
class GreenApiConfig:
    instance_id: str
    api_token: str
    api_url: str = "https://api.green-api.com"
    timeout: float = 30.0
    country_code: str = "359"
    national_pattern: str = r"^[89]\d{8}$"

    @property
    def is_configured(self) -> bool:
        return bool(self.instance_id and self.instance_id.strip()) and bool(
            self.api_token and self.api_token.strip()
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GreenApiConfig":
        return cls(
            instance_id=settings.GREEN_API_INSTANCE_ID,
            api_token=settings.GREEN_API_API_TOKEN,
            api_url=settings.GREEN_API_URL.rstrip("/"),
            timeout=settings.GREEN_API_TIMEOUT,
            country_code=settings.SMS_COUNTRY_CODE,
            national_pattern=settings.SMS_NATIONAL_PATTERN,
        )


settings = Settings()
