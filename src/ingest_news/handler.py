"""Scheduled-trigger entry point for news ingestion."""

import json
import logging
from typing import Any

from common.cli_helpers import setup_logging
from common.config import ConfigSingleton
from ingest_news.clients import build_pipeline
from ingest_news.config import get_config
from ingest_news.ingest_news import IngestionPipeline

setup_logging()
logger = logging.getLogger(__name__)

_pipeline: ConfigSingleton[IngestionPipeline] = ConfigSingleton(lambda: build_pipeline(get_config()))
get_pipeline = _pipeline.get
set_pipeline = _pipeline.set
reset_pipeline = _pipeline.reset


def success_response(articles_processed: int) -> dict[str, Any]:
    return {
        "statusCode": 200,
        "body": json.dumps({
            "message": "News ingestion completed",
            "articlesProcessed": articles_processed,
        }),
    }


def error_response(error: Exception) -> dict[str, Any]:
    return {
        "statusCode": 500,
        "body": json.dumps({"error": str(error)}),
    }


def handler(event: Any = None, context: Any = None) -> dict[str, Any]:
    """Run one ingestion; always returns a statusCode/body result."""
    try:
        outcome = get_pipeline().run()
    except Exception as e:
        logger.exception("Error: %s", e)
        return error_response(e)

    return success_response(outcome.processed_count)
