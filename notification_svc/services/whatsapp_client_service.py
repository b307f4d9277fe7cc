import logging
import re
from typing import Optional

import httpx
from notification_svc.core.config import GreenApiConfig, Settings
from notification_svc.core.exceptions import InvalidContactFormatError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s\-().]")
_BARE_NUMBER = re.compile(r"^\d{7,15}$", re.ASCII)
_ASCII_DIGITS = re.compile(r"[0-9]+")


def format_phone_number(phone_number: Optional[str], country_code: str = "359",
                        national_pattern: str = r"^[89]\d{8}$") -> str:
    """
    Normaliza um número para a forma internacional só com dígitos (ex: 359893454943).

    Aceita +359..., 00359..., 0893... (prefixo nacional) e números nacionais
    curtos que casam com `national_pattern`. Qualquer outra coisa gera
    InvalidContactFormatError.
    """
    if phone_number is None or not phone_number.strip():
        raise InvalidContactFormatError(phone_number)

    cleaned = _SEPARATORS.sub("", phone_number.strip())

    if cleaned.startswith("+"):
        cleaned = cleaned[1:]
    if cleaned.startswith("00"):
        cleaned = cleaned[2:]
    if cleaned.startswith("0"):
        cleaned = country_code + cleaned[1:]

    if cleaned.startswith(country_code) and _ASCII_DIGITS.fullmatch(cleaned):
        return cleaned
    if re.match(national_pattern, cleaned, re.ASCII):
        return country_code + cleaned
    if _BARE_NUMBER.match(cleaned):
        return cleaned

    raise InvalidContactFormatError(phone_number)


class GreenApiSmsService:
    """Envia mensagens de WhatsApp pelo GREEN-API."""

    def __init__(self, config: GreenApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        # Permite injetar um httpx.MockTransport nos testes
        self._transport = transport
        logger.info("[GREEN-API] Service initialized with instanceId: %s", config.instance_id)

    @property
    def send_url(self) -> str:
        return f"{self.config.api_url}/waInstance{self.config.instance_id}/sendMessage/{self.config.api_token}"

    async def send_sms(self, to: str, message: str) -> bool:
        # InvalidContactFormatError sobe para quem chamou
        formatted_number = format_phone_number(
            to, self.config.country_code, self.config.national_pattern
        )
        logger.info("[GREEN-API] Sending WhatsApp message to: %s (formatted: %s)", to, formatted_number)

        payload = {"chatId": f"{formatted_number}@c.us", "message": message}
        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as client:
            try:
                response = await client.post(self.send_url, json=payload)
                response.raise_for_status()
                body = response.json()
            except httpx.HTTPStatusError as e:
                logger.error("[GREEN-API] HTTP error - Status: %s - Body: %s",
                             e.response.status_code, e.response.text)
                return False
            except httpx.RequestError as e:
                logger.error("[GREEN-API] Could not reach %s: %s", self.config.api_url, e)
                return False
            except ValueError:
                logger.error("[GREEN-API] Response is not valid JSON: %s", response.text)
                return False

        if not isinstance(body, dict):
            logger.warning("[GREEN-API] Unexpected response format: %s", body)
            return False
        if "idMessage" in body:
            logger.info("[GREEN-API] Message sent successfully - ID: %s", body["idMessage"])
            return True
        if "error" in body:
            logger.error("[GREEN-API] Error in response: %s", body["error"])
            return False

        logger.warning("[GREEN-API] Unexpected response format: %s", body)
        return False


class LoggingSmsService:
    """Variante sem credenciais: registra a mensagem e considera entregue."""

    async def send_sms(self, to: str, message: str) -> bool:
        logger.info("[GREEN-API] (LOG ONLY) To: %s Message: %s", to, message)
        return True


def build_sms_service(settings: Settings):
    config = GreenApiConfig.from_settings(settings)
    if config.is_configured:
        logger.info("[SMS Provider] Using GREEN-API (WhatsApp)")
        return GreenApiSmsService(config)
    logger.warning("[SMS Provider] GREEN-API not configured - SMS will be logged only")
    return LoggingSmsService()
