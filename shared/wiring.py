from fastapi import Depends

from app.core.config import Settings, settings

# Multi-request HTTP port + adapter
from searchvue.ports.outbound.multi_http_port import MultiHttpClientPort
from searchvue.adapters.outbound.multi_http_httpx import HttpxMultiClient

# SearchVue services
from searchvue.services.query_builder import MediaQueryBuilder
from searchvue.services.media_service import SearchVueMediaService


def get_settings() -> Settings:
    return settings


def get_multi_http_client() -> MultiHttpClientPort:
    return HttpxMultiClient()


def get_media_query_builder(cfg: Settings = Depends(get_settings)) -> MediaQueryBuilder | None:
    return MediaQueryBuilder.from_settings(cfg)


def get_media_service(
    builder: MediaQueryBuilder | None = Depends(get_media_query_builder),
    http: MultiHttpClientPort = Depends(get_multi_http_client),
) -> SearchVueMediaService:
    return SearchVueMediaService(builder=builder, http=http)
