from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.config import settings
from app.core.http import http_client
from app.core.logging_config import configure_logging

# Routers
from searchvue.routers import media_router

configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one pooled outbound client for all batches
    await http_client.init()
    yield
    # Shutdown
    await http_client.close()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


# SearchVue
app.include_router(media_router)
