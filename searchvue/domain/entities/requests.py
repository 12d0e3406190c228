from typing import Any, Callable, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

# Only GET is dispatched
HttpMethod = Literal["GET"]


class NamedRequest(BaseModel):
    """One entry of a dispatch batch; the key lives in the enclosing mapping."""
    model_config = ConfigDict(frozen=True)

    method: HttpMethod = "GET"
    url: str


class ResponseEnvelope(BaseModel):
    code: int = 0
    reason: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""


class NamedResponse(BaseModel):
    response: ResponseEnvelope


class SearchContext(BaseModel):
    """Per-request data a response handler needs to enrich its output."""
    model_config = ConfigDict(frozen=True)

    search_term: str
    search_link: str


class ResponseHandler(BaseModel):
    """
    Data record pairing a context with one generic transform function.
    Calling the handler applies ``transform(response, context)``.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    context: SearchContext
    transform: Callable[[NamedResponse, SearchContext], Any]

    def __call__(self, response: NamedResponse) -> Any:
        return self.transform(response, self.context)
