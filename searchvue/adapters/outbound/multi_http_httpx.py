# searchvue/adapters/outbound/multi_http_httpx.py
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import httpx

from app.core.http import http_client
from searchvue.domain.entities import NamedRequest, NamedResponse, ResponseEnvelope
from searchvue.ports.outbound.multi_http_port import MultiHttpClientPort

logger = logging.getLogger(__name__)


class HttpxMultiClient(MultiHttpClientPort):
    """
    httpx implementation of MultiHttpClientPort.

    - All requests of a batch run concurrently on one AsyncClient.
    - Non-2xx answers are returned as envelopes (code + body), not raised.
    - Transport errors (connect, timeout, ...) propagate and fail the batch;
      requests still in flight are cancelled.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or http_client.get()

    async def run_multi(self, requests: Dict[str, NamedRequest]) -> Dict[str, NamedResponse]:
        keys = list(requests)
        tasks = [asyncio.ensure_future(self._send(k, requests[k])) for k in keys]
        try:
            responses = await asyncio.gather(*tasks)
        except BaseException:
            # One failure fails the batch; stop the requests still in flight
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return dict(zip(keys, responses))

    async def _send(self, key: str, req: NamedRequest) -> NamedResponse:
        logger.debug("multi-http [%s] %s %s", key, req.method, req.url)
        r = await self.client.request(req.method, req.url)
        if r.is_error:
            logger.info("multi-http [%s] upstream answered %s", key, r.status_code)
        return NamedResponse(
            response=ResponseEnvelope(
                code=r.status_code,
                reason=r.reason_phrase,
                headers=dict(r.headers),
                body=r.text,
            )
        )
