from .media import router as media_router

__all__ = ["media_router"]
