"""Helper functions for ingest_news CLI."""

from __future__ import annotations

import argparse

from ingest_news.config import IngestConfig


def parse_ingest_news_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for ingest_news.'''

    parser = argparse.ArgumentParser(description="Ingest top headlines from the news feed")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file. Defaults to $INGEST_NEWS_CONFIG or 'prod'.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Use in-memory store and notifier instead of DynamoDB/EventBridge.",
    )
    parser.add_argument("--output-local", action="store_true")
    return parser.parse_args(argv)


def apply_dry_run(config: IngestConfig) -> IngestConfig:
    '''Switch the store and notifier to in-memory backends.'''

    config.store.backend = "memory"
    config.notifier.backend = "memory"
    return config
