# searchvue/services/dispatch.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Tuple

from searchvue.domain.entities import NamedRequest, NamedResponse, ResponseHandler, SearchContext
from searchvue.domain.errors import MissingHandlerError, MissingResponseError
from searchvue.ports.outbound.multi_http_port import MultiHttpClientPort

logger = logging.getLogger(__name__)

SEARCH_LINK_FIELD = "searchlink"


async def dispatch(
    client: MultiHttpClientPort,
    requests: Dict[str, NamedRequest],
) -> Dict[str, NamedResponse]:
    """Run the whole batch in one concurrent call; errors from the client propagate."""
    if not requests:
        return {}
    logger.debug("dispatching %d request(s): %s", len(requests), ", ".join(requests))
    return await client.run_multi(requests)


def zip_by_key(
    responses: Mapping[str, NamedResponse],
    handlers: Mapping[str, ResponseHandler],
) -> List[Tuple[str, NamedResponse, ResponseHandler]]:
    for key in sorted(responses):
        if key not in handlers:
            raise MissingHandlerError(key)
    for key in sorted(handlers):
        if key not in responses:
            raise MissingResponseError(key)
    return [(key, responses[key], handlers[key]) for key in sorted(responses)]


def transform(
    responses: Mapping[str, NamedResponse],
    handlers: Mapping[str, ResponseHandler],
) -> Dict[str, Any]:
    """
    Fold every response through the handler registered under the same key.

    Raises MissingHandlerError / MissingResponseError (both ValueError) when the
    two key sets differ; nothing is transformed in that case.
    """
    return {key: handler(response) for key, response, handler in zip_by_key(responses, handlers)}


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def decode_body(body: str) -> Dict[str, Any]:
    """Best-effort JSON object decoding; anything else becomes an empty dict."""
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError):
        logger.warning("response body is not valid JSON, using empty payload: %.200r", body)
        return {}
    if not isinstance(data, dict):
        if data:
            logger.warning("response body is JSON %s, expected an object", type(data).__name__)
        return {}
    return data


def merge_search_link(response: NamedResponse, context: SearchContext) -> Dict[str, Any]:
    data = decode_body(response.response.body)
    return {**data, SEARCH_LINK_FIELD: context.search_link}
