from .requests import (
    HttpMethod,
    NamedRequest,
    NamedResponse,
    ResponseEnvelope,
    ResponseHandler,
    SearchContext,
)
from .template import Template

__all__ = [
    "HttpMethod",
    "NamedRequest",
    "NamedResponse",
    "ResponseEnvelope",
    "ResponseHandler",
    "SearchContext",
    "Template",
]
