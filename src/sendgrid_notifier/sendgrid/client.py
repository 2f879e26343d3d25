"""SendGrid v3 mail-send client using httpx."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..exceptions import SendGridDeliveryError
from ..message import OutboundMessage
from ..ports.transport import IEmailTransport

logger = logging.getLogger(__name__)

MAIL_SEND_PATH = "/v3/mail/send"


@dataclass(frozen=True)
class SendGridConfig:
    """Connection settings for the SendGrid API.

    Attributes:
        api_url: Base URL of the SendGrid API.
        timeout: Request timeout in seconds.
        user_agent: Value of the User-Agent header.
    """

    api_url: str = "https://api.sendgrid.com"
    timeout: float = 10.0
    user_agent: str = "sendgrid-notifier/0.1.0"


def build_payload(message: OutboundMessage) -> dict[str, Any]:
    """Map an OutboundMessage onto the SendGrid mail-send JSON body."""
    payload: dict[str, Any] = {
        "personalizations": [{"to": [{"email": message.to}]}],
        "from": {"email": message.from_},
        "subject": message.subject,
        # SendGrid rejects empty content values
        "content": [{"type": "text/html", "value": message.html_body or " "}],
    }
    if message.attachments:
        payload["attachments"] = [
            {
                "content": attachment.content,
                "filename": attachment.filename,
                "type": attachment.mime_type,
                "disposition": attachment.disposition,
            }
            for attachment in message.attachments
        ]
    return payload


class SendGridClient(IEmailTransport):
    """
    Stateless credential holder bound to one SendGrid API key.

    Construction does no I/O; each ``send`` opens its own HTTP client.
    """

    def __init__(
        self,
        api_key: str,
        config: SendGridConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self.config = config or SendGridConfig()
        self._http_transport = http_transport

    @property
    def api_key(self) -> str:
        return self._api_key

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }

    async def send(self, message: OutboundMessage) -> None:
        url = self.config.api_url.rstrip("/") + MAIL_SEND_PATH
        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=self._http_transport,
        ) as client:
            response = await client.post(
                url,
                json=build_payload(message),
                headers=self._headers(),
            )

        if not response.is_success:
            logger.error(
                "SendGrid rejected email to %s: %s %s",
                message.to,
                response.status_code,
                response.text,
            )
            raise SendGridDeliveryError(response.status_code, response.text, message.to)

        logger.debug(
            "SendGrid accepted email to %s (X-Message-Id: %s)",
            message.to,
            response.headers.get("X-Message-Id"),
        )
