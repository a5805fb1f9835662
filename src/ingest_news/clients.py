"""Construct the pipeline and its collaborators from configuration."""

import logging

from ingest_news.config import FeedConfig, IngestConfig, NotifierConfig, StoreConfig
from ingest_news.errors import ConfigurationError
from ingest_news.fetch_news.fetch_news import FeedClient
from ingest_news.ingest_news import IngestionPipeline
from ingest_news.notify.eventbridge import EventBridgeNotifier
from ingest_news.notify.memory import InMemoryNotifier
from ingest_news.storage.dynamodb import DynamoStore
from ingest_news.storage.memory import InMemoryStore

logger = logging.getLogger(__name__)


def build_feed_client(config: FeedConfig) -> FeedClient:
    return FeedClient(
        endpoint=config.endpoint,
        api_key_mode=config.api_key_mode,
        timeout_ms=config.timeout_ms,
        params=config.params,
        user_agent=config.user_agent,
        api_key_param=config.api_key_param,
        api_key_header=config.api_key_header,
    )


def build_store(config: StoreConfig):
    if config.backend == "memory":
        return InMemoryStore()
    if config.backend == "dynamodb":
        return DynamoStore.from_table_name(
            config.table_name,
            region=config.region,
            endpoint_url=config.endpoint_url,
        )
    raise ConfigurationError(f"Unknown store backend: {config.backend}")


def build_notifier(config: NotifierConfig):
    if config.backend == "memory":
        return InMemoryNotifier(source=config.source, detail_type=config.detail_type)
    if config.backend == "eventbridge":
        return EventBridgeNotifier.from_config(
            source=config.source,
            detail_type=config.detail_type,
            event_bus_name=config.event_bus_name,
            region=config.region,
            endpoint_url=config.endpoint_url,
        )
    raise ConfigurationError(f"Unknown notifier backend: {config.backend}")


def build_pipeline(config: IngestConfig) -> IngestionPipeline:
    """Build a pipeline; meant to be called once per process and reused across runs."""
    logger.info(
        "Building pipeline (store=%s, notifier=%s, api_key_mode=%s)",
        config.store.backend,
        config.notifier.backend,
        config.feed.api_key_mode,
    )
    return IngestionPipeline(
        feed_client=build_feed_client(config.feed),
        store=build_store(config.store),
        notifier=build_notifier(config.notifier),
        api_key_env=config.feed.api_key_env,
        on_publish_failure=config.pipeline.on_publish_failure,
    )
