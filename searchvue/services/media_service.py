import logging
from typing import Any, Dict, Optional

from searchvue.domain.entities import NamedRequest, ResponseHandler, SearchContext
from searchvue.ports.outbound.multi_http_port import MultiHttpClientPort
from searchvue.services.dispatch import dispatch, merge_search_link, transform
from searchvue.services.query_builder import MediaQueryBuilder

logger = logging.getLogger(__name__)

MEDIA_KEY = "media"


class SearchVueMediaService:
    """
    Media for the search preview of one identifier.

    Builds the keyed request/handler pairs, sends the batch through the
    multi-request client and folds the responses through their handlers.
    A missing builder (incomplete configuration) yields an empty result
    without any network call.
    """

    def __init__(self, builder: Optional[MediaQueryBuilder], http: MultiHttpClientPort):
        self.builder = builder
        self.http = http

    async def get_media(self, qid: str) -> Dict[str, Any]:
        requests: Dict[str, NamedRequest] = {}
        handlers: Dict[str, ResponseHandler] = {}

        if self.builder is not None:
            search_term = self.builder.build_search_term(qid)
            requests[MEDIA_KEY] = self.builder.build_media_request(search_term)
            handlers[MEDIA_KEY] = ResponseHandler(
                context=SearchContext(
                    search_term=search_term,
                    search_link=self.builder.build_search_link(search_term),
                ),
                transform=merge_search_link,
            )
        else:
            logger.debug("quick view media search not configured, skipping %r", qid)

        if not requests:
            return {}

        responses = await dispatch(self.http, requests)
        return transform(responses, handlers)
