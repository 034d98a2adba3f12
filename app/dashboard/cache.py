from __future__ import annotations

import logging
import threading

from flask import Flask, current_app

logger = logging.getLogger(__name__)


class PageCache:
    """
    In-process cache of rendered page fragments, keyed by view path.

    A stale entry is dropped by `invalidate(path)` and re-rendered on the
    next view. Per worker process; there is no cross-process fan-out.
    """

    def __init__(self) -> None:
        self._pages: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> str | None:
        with self._lock:
            return self._pages.get(path)

    def set(self, path: str, body: str) -> None:
        with self._lock:
            self._pages[path] = body

    def invalidate(self, path: str) -> None:
        with self._lock:
            dropped = self._pages.pop(path, None) is not None
        logger.debug("Page cache invalidate path=%s dropped=%s", path, dropped)

    def clear(self) -> None:
        with self._lock:
            self._pages.clear()


def init_page_cache(app: Flask) -> None:
    app.extensions["page_cache"] = PageCache()


def page_cache(app: Flask | None = None) -> PageCache:
    return (app or current_app).extensions["page_cache"]
