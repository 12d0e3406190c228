"""Process-wide logging setup for the API."""

from __future__ import annotations

import logging
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        return getattr(logging, str(level).strip().upper(), logging.INFO)


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Install a root handler once and align the project loggers to ``level``."""
    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    resolved = _resolve_level(level)
    logging.basicConfig(level=resolved, format=_DEFAULT_FORMAT, force=force)
    for name in ("app", "searchvue"):
        logging.getLogger(name).setLevel(resolved)
    _CONFIGURED = True


__all__ = ["configure_logging"]
