# conftest.py
from typing import AsyncGenerator, Dict, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.core.config import Settings
from searchvue.domain.entities import NamedRequest, NamedResponse, ResponseEnvelope
from searchvue.ports.outbound.multi_http_port import MultiHttpClientPort
from shared.wiring import get_multi_http_client, get_settings


# ---- Fakes ------------------------------------------------------------------

class FakeMultiHttpClient(MultiHttpClientPort):
    """Records every batch and answers each key with a canned body (default: empty JSON object)."""

    def __init__(self) -> None:
        self.bodies: Dict[str, str] = {}
        self.codes: Dict[str, int] = {}
        self.batches: List[Dict[str, NamedRequest]] = []
        self.error: Exception | None = None

    async def run_multi(self, requests: Dict[str, NamedRequest]) -> Dict[str, NamedResponse]:
        self.batches.append(dict(requests))
        if self.error is not None:
            raise self.error
        return {
            key: NamedResponse(
                response=ResponseEnvelope(
                    code=self.codes.get(key, 200),
                    body=self.bodies.get(key, "{}"),
                )
            )
            for key in requests
        }

    # handy helpers used by tests
    @property
    def urls(self) -> List[str]:
        return [req.url for batch in self.batches for req in batch.values()]


BASE_URI = "https://api.example/w/api.php"
FILTER_TEMPLATE = "haswbstatement:P180=%s"
SEARCH_LINK_TEMPLATE = "https://commons.example/w/index.php?search=%s&title=Special:MediaSearch"


def make_settings(**overrides) -> Settings:
    values = dict(
        quickview_media_repository_api_base_uri=BASE_URI,
        quickview_search_filter_for_qid=FILTER_TEMPLATE,
        quickview_media_repository_search_uri=SEARCH_LINK_TEMPLATE,
    )
    values.update(overrides)
    # _env_file=None keeps a developer's .env out of the tests
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def quickview_settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_http() -> FakeMultiHttpClient:
    return FakeMultiHttpClient()


@pytest.fixture
def override_settings():
    """Call with a Settings instance to make the app use it."""
    def _apply(cfg: Settings) -> None:
        app.dependency_overrides[get_settings] = lambda: cfg
    yield _apply
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture(autouse=True)
def override_http(fake_http: FakeMultiHttpClient):
    app.dependency_overrides[get_multi_http_client] = lambda: fake_http
    yield
    app.dependency_overrides.pop(get_multi_http_client, None)


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
