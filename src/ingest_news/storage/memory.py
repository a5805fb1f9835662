"""In-memory record store (used when store backend="memory")."""

from typing import Any

from ingest_news.models import NewsRecord


class InMemoryStore:
    def __init__(self):
        self.items: dict[str, dict[str, Any]] = {}

    def put(self, record: NewsRecord) -> None:
        self.items[record.id] = record.to_item()

    def scan(self, limit: int = 50) -> list[dict[str, Any]]:
        return list(self.items.values())[:limit]
