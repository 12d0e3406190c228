from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote_plus, urlencode

from app.core.config import Settings
from searchvue.domain.entities import NamedRequest, Template

# Bitmaps and drawings only, skipping files without a resolution (e.g. audio)
MEDIA_SEARCH_PREFIX = "filetype:bitmap|drawing -fileres:0 "
FILE_NAMESPACE = 6
MEDIA_RESULT_LIMIT = 7
THUMBNAIL_WIDTH = 400


class MediaQueryBuilder:
    """
    Turns an identifier into the media search request and the public search link.

      identifier --(filter template)--> search term
      search term --> GET {base_uri}?action=query&generator=search&...
      search term --(search-link template, url-encoded)--> search link
    """

    def __init__(self, base_uri: str, search_filter: Template, search_link: Template):
        self.base_uri = base_uri
        self.search_filter = search_filter
        self.search_link = search_link

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["MediaQueryBuilder"]:
        """None when any of the three quick view settings is missing."""
        if not settings.quickview_enabled:
            return None
        return cls(
            base_uri=settings.quickview_media_repository_api_base_uri,
            search_filter=Template(settings.quickview_search_filter_for_qid),
            search_link=Template(settings.quickview_media_repository_search_uri),
        )

    def build_search_term(self, identifier: str) -> str:
        # Inserted verbatim; the template author owns the filter syntax
        return self.search_filter.render(identifier)

    def build_media_request(self, search_term: str) -> NamedRequest:
        params: Dict[str, Any] = {
            "action": "query",
            "format": "json",
            "generator": "search",
            "gsrsearch": MEDIA_SEARCH_PREFIX + search_term,
            "gsrnamespace": FILE_NAMESPACE,
            "gsrlimit": MEDIA_RESULT_LIMIT,
            "prop": "imageinfo",
            "iiprop": "url",
            "iiurlwidth": THUMBNAIL_WIDTH,
        }
        return NamedRequest(method="GET", url=f"{self.base_uri}?{urlencode(params)}")

    def build_search_link(self, search_term: str) -> str:
        return self.search_link.render(quote_plus(search_term))
