"""
SMS adapter using the Twilio REST API directly over httpx.

The Twilio SDK is not used; a single form-encoded POST per message is all
the adapter needs. SMS notifications carry the destination phone number in
`Notification.to`; the calling service is responsible for resolving and
validating it.
"""
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .base import BaseNotificationAdapter, BaseTemplateRenderer

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.twilio.com/2010-04-01"


@dataclass(frozen=True)
class TwilioConfig:
    """Twilio account credentials and sender number."""

    account_sid: str
    auth_token: str = field(repr=False)
    from_number: str
    base_url: str = DEFAULT_API_BASE_URL

    @classmethod
    def from_settings(cls, settings: Any = None) -> "TwilioConfig":
        """
        Build a config from Django settings.

        Reads TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_FROM_NUMBER and
        the optional TWILIO_API_BASE_URL.
        """
        if settings is None:
            from django.conf import settings

        values = {}
        for attr, name in (
            ("account_sid", "TWILIO_ACCOUNT_SID"),
            ("auth_token", "TWILIO_AUTH_TOKEN"),
            ("from_number", "TWILIO_FROM_NUMBER"),
        ):
            value = getattr(settings, name, None)
            if not value:
                raise ValueError(f"{name} is not configured")
            values[attr] = value

        base_url = getattr(settings, "TWILIO_API_BASE_URL", None) or DEFAULT_API_BASE_URL
        return cls(base_url=base_url.rstrip("/"), **values)


class TwilioSmsError(Exception):
    """Twilio rejected the request with a non-2xx response."""

    def __init__(self, status_code: int, response_text: str):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(f"Twilio SMS send failed ({status_code}): {response_text}")


class TwilioSmsAdapter(BaseNotificationAdapter):
    """Delivers SMS notifications through Twilio's Messages endpoint."""

    key = "twilio-sms"

    def __init__(
        self,
        template_renderer: BaseTemplateRenderer,
        enqueue_notifications: bool,
        config: TwilioConfig,
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(template_renderer, "SMS", enqueue_notifications)
        self.config = config
        self.http_client = http_client

    @property
    def messages_url(self) -> str:
        return f"{self.config.base_url}/Accounts/{self.config.account_sid}/Messages.json"

    def _get_auth_header(self) -> str:
        credentials = f"{self.config.account_sid}:{self.config.auth_token}"
        return "Basic " + base64.b64encode(credentials.encode()).decode()

    async def send(self, notification: Any, context: Mapping[str, Any]) -> None:
        template = await self.template_renderer.render(notification, context)
        recipient_phone = await self.get_recipient(notification)

        data = {
            "To": recipient_phone,
            "From": self.config.from_number,
            "Body": template.body,
        }
        headers = {
            "Authorization": self._get_auth_header(),
            "Content-Type": "application/x-www-form-urlencoded",
        }

        # Only the last digits of the recipient are logged
        log_extra = {
            "provider": self.key,
            "notification_id": str(getattr(notification, "id", "") or ""),
            "to_suffix": recipient_phone[-4:] if recipient_phone else None,
            "body_length": len(template.body),
        }

        try:
            if self.http_client is not None:
                response = await self.http_client.post(self.messages_url, data=data, headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self.messages_url, data=data, headers=headers)
        except httpx.HTTPError:
            logger.error("Twilio SMS request failed", exc_info=True, extra=log_extra)
            raise

        if not response.is_success:
            logger.warning(
                "Twilio rejected SMS",
                extra={**log_extra, "status_code": response.status_code},
            )
            raise TwilioSmsError(response.status_code, response.text)

        logger.info(
            "SMS sent via TwilioSmsAdapter",
            extra={**log_extra, "status_code": response.status_code},
        )


class TwilioSmsAdapterFactory:
    """Builds TwilioSmsAdapter instances with the dispatcher's uniform signature."""

    def create(
        self,
        template_renderer: BaseTemplateRenderer,
        enqueue_notifications: bool,
        config: TwilioConfig,
    ) -> TwilioSmsAdapter:
        return TwilioSmsAdapter(template_renderer, enqueue_notifications, config)
