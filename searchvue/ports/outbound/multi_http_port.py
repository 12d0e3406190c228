from typing import Dict, Protocol

from searchvue.domain.entities import NamedRequest, NamedResponse


class MultiHttpClientPort(Protocol):
    """
    Outbound port for a batch of HTTP calls issued concurrently.
    Returns once every request has completed, keyed like the input.
    """

    async def run_multi(self, requests: Dict[str, NamedRequest]) -> Dict[str, NamedResponse]: ...
