"""HTTP client for the translation logging service."""

import logging
from typing import Optional

import httpx

from translation_app.errors import AuditLogError

logger = logging.getLogger(__name__)


class AuditLogClient:
    """Records translations and fetches the CSV export."""

    # Values the front-end has always sent with each record
    DEFAULT_RANKING = 4
    DEFAULT_RATING = 4
    DEFAULT_CLASSIFICATION = "translation"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def record(
        self,
        original_message: str,
        translated_message: str,
        language: str,
        model: str,
    ) -> dict:
        """
        Store one translation event.

        Returns:
            The stored row as returned by the service

        Raises:
            AuditLogError: on transport errors, non-2xx or non-JSON responses
        """
        payload = {
            "original_message": original_message,
            "translated_message": translated_message,
            "language": language,
            "model": model,
            "ranking": self.DEFAULT_RANKING,
            "rating": self.DEFAULT_RATING,
            "classification": self.DEFAULT_CLASSIFICATION,
        }
        try:
            async with self._client() as client:
                response = await client.post("/api/translations", json=payload)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise AuditLogError(f"Failed to record translation: {e}") from e

    async def export_csv(self) -> bytes:
        """Download the full translation log as CSV bytes."""
        try:
            async with self._client() as client:
                response = await client.get("/api/export")
                response.raise_for_status()
                return response.content
        except httpx.HTTPError as e:
            raise AuditLogError(f"Failed to export data to CSV: {e}") from e
