# app/core/http.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class HttpClient:
    """Owns the shared outbound httpx.AsyncClient; started and stopped by the app lifespan."""

    def __init__(self) -> None:
        self._client: Optional[httpx.AsyncClient] = None

    async def init(self) -> None:
        if self._client is None:
            self._client = self._build()

    def get(self) -> httpx.AsyncClient:
        # Used outside the lifespan (scripts, tests): create on first use
        if self._client is None or self._client.is_closed:
            self._client = self._build()
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _build() -> httpx.AsyncClient:
        logger.debug("creating outbound http client (timeout=%ss)", settings.http_timeout_seconds)
        return httpx.AsyncClient(
            timeout=settings.http_timeout_seconds,
            headers={"User-Agent": settings.http_user_agent},
            follow_redirects=True,
        )


http_client = HttpClient()
