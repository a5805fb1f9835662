"""Normalize raw feed articles into storage records."""

import math
from datetime import datetime, timedelta, timezone
from typing import Callable

from common.ids import RecordIdGenerator
from ingest_news.models import NewsRecord, RawArticle

DEFAULT_TITLE = "No title"
DEFAULT_SOURCE = "Unknown"
RECORD_TTL = timedelta(days=7)

default_id_generator = RecordIdGenerator()


def format_timestamp(now: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compute_ttl(now: datetime) -> int:
    """Expiry as epoch seconds, RECORD_TTL after ``now``."""
    return math.floor(now.timestamp()) + int(RECORD_TTL.total_seconds())


def normalize_article(
    raw: RawArticle,
    now: datetime,
    next_id: Callable[[datetime], str] = default_id_generator,
) -> NewsRecord:
    """Map a raw article to a NewsRecord, filling defaults for missing fields."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return NewsRecord(
        id=next_id(now),
        timestamp=format_timestamp(now),
        title=raw.title or DEFAULT_TITLE,
        content=raw.content or raw.description or "",
        source=raw.source_name or DEFAULT_SOURCE,
        url=raw.url or "",
        ttl=compute_ttl(now),
    )
