"""CLI for running one news ingestion."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

from common.cli_helpers import save_jsonl_local, setup_logging
from ingest_news.clients import build_pipeline
from ingest_news.config import load_config
from ingest_news.errors import IngestError
from ingest_news.helpers import apply_dry_run, parse_ingest_news_args

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = parse_ingest_news_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error("Failed to load config: %s", e)
        return 1

    if args.dry_run:
        config = apply_dry_run(config)

    try:
        pipeline = build_pipeline(config)
        outcome = pipeline.run()
    except IngestError as e:
        logger.error("News ingestion failed: %s", e)
        if e.__cause__ is not None:
            logger.error("Caused by: %r", e.__cause__)
        return 1
    except Exception as e:
        logger.exception("News ingestion failed: %s", e)
        return 1

    logger.info("Processed %d articles", outcome.processed_count)

    if args.output_local and outcome.records:
        now = datetime.now(timezone.utc)
        filepath = save_jsonl_local(
            [record.to_item() for record in outcome.records],
            "news_records",
            now,
        )
        logger.info("Saved %d records to %s", len(outcome.records), filepath)

    return 0


if __name__ == "__main__":
    sys.exit(main())
