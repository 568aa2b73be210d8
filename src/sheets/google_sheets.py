"""Google Sheets appender using the Sheets v4 REST API.

Authentication uses a service account through google-auth. The token refresh
is blocking, so it runs in a worker thread.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Protocol
from urllib.parse import quote

import httpx
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from src.sheets.base import SpreadsheetAppender

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class GoogleSheetsConfig(Protocol):
    google_service_account_email: str
    google_private_key: str


class ServiceAccountTokenProvider:
    """Returns a bearer token for the configured service account."""

    def __init__(self, config: GoogleSheetsConfig):
        self._config = config
        self._credentials: service_account.Credentials | None = None

    def _build_credentials(self) -> service_account.Credentials:
        return service_account.Credentials.from_service_account_info(
            {
                "client_email": self._config.google_service_account_email,
                "private_key": self._config.google_private_key,
                "token_uri": GOOGLE_TOKEN_URI,
            },
            scopes=SHEETS_SCOPES,
        )

    async def __call__(self) -> str:
        if self._credentials is None:
            self._credentials = self._build_credentials()
        if not self._credentials.valid:
            await asyncio.to_thread(self._credentials.refresh, Request())
        return self._credentials.token


class GoogleSheetsAppender(SpreadsheetAppender):
    def __init__(
        self,
        config: GoogleSheetsConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        token_provider: Callable[[], Awaitable[str]] | None = None,
    ):
        self._http_client_class = http_client_class
        self._token_provider = token_provider or ServiceAccountTokenProvider(config)

    async def append_row(self, target_id: str, range_: str, values: list[str]) -> dict:
        token = await self._token_provider()

        async with self._http_client_class() as client:
            response = await client.post(
                f"{SHEETS_API_URL}/{target_id}/values/{quote(range_, safe='')}:append",
                headers={"Authorization": f"Bearer {token}"},
                params={"valueInputOption": "USER_ENTERED"},
                json={"values": [values]},
            )
            response.raise_for_status()
            return response.json()
