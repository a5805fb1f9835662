"""Lambda-proxy entry point for the read path."""

import json
import logging
from typing import Any

from common.cli_helpers import setup_logging
from news_api.services.news_service import CORS_HEADERS, get_news_service

setup_logging()
logger = logging.getLogger(__name__)

RESPONSE_HEADERS = {**CORS_HEADERS, "Content-Type": "application/json"}


def handler(event: Any = None, context: Any = None) -> dict[str, Any]:
    """Scan recent records and return them with permissive CORS headers."""
    try:
        items = get_news_service().list_news()
    except Exception as e:
        logger.exception("Failed to fetch news: %s", e)
        return {
            "statusCode": 500,
            "headers": RESPONSE_HEADERS,
            "body": json.dumps({"error": "Failed to fetch news"}),
        }

    return {
        "statusCode": 200,
        "headers": RESPONSE_HEADERS,
        "body": json.dumps(items, default=str),
    }
