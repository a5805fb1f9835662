"""News record data access service."""

import logging
from typing import Any

from common.config import ConfigSingleton
from ingest_news.clients import build_store
from news_api.config import get_config

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
}


class NewsService:
    """Returns recently stored news records via a bounded store scan."""

    def __init__(self, store, scan_limit: int = 50):
        self.store = store
        self.scan_limit = scan_limit

    def list_news(self, limit: int | None = None) -> list[dict[str, Any]]:
        """List up to ``limit`` records in store order (no defined sort)."""
        limit = limit or self.scan_limit
        items = self.store.scan(limit=limit)
        logger.info("Returning %d news items", len(items))
        return items


def _build_news_service() -> NewsService:
    config = get_config()
    return NewsService(build_store(config.store), scan_limit=config.scan_limit)


_service: ConfigSingleton[NewsService] = ConfigSingleton(_build_news_service)
get_news_service = _service.get
set_news_service = _service.set
reset_news_service = _service.reset
