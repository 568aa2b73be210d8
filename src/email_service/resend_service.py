import logging
from typing import Protocol

import httpx

from src.email_service.base import MailTransport

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str


class ResendMailTransport(MailTransport):
    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    async def send(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> None:
        """Send email via Resend. HTTP errors propagate to the caller."""
        payload = {
            "from": from_address,
            "to": [to_address],
            "subject": subject,
            "html": html_body,
        }
        if text_body:
            payload["text"] = text_body

        async with self._http_client_class() as client:
            response = await client.post(
                RESEND_EMAILS_URL,
                headers={
                    "Authorization": f"Bearer {self._config.resend_api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()

            resend_email_id = response.json().get("id")
            logger.debug(f"Resend accepted email to {to_address}: {resend_email_id}")
