"""In-memory notifier (used when notifier backend="memory")."""

import json

from ingest_news.models import NewsRecord


class InMemoryNotifier:
    def __init__(self, source: str = "prism.news", detail_type: str = "news.ingested"):
        self.source = source
        self.detail_type = detail_type
        self.events: list[dict] = []

    def publish(self, record: NewsRecord) -> None:
        self.events.append({
            "Source": self.source,
            "DetailType": self.detail_type,
            "Detail": json.dumps(record.to_item(), ensure_ascii=False),
        })
