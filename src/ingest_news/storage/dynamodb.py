"""DynamoDB-backed record store."""

import logging
from typing import Any

from common.aws import from_dynamodb_item, get_dynamodb_table
from ingest_news.models import NewsRecord

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LIMIT = 50


class DynamoStore:
    """Stores NewsRecords in a DynamoDB table keyed by ``id``.

    The table is expected to have TTL enabled on the ``ttl`` attribute.
    """

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_table_name(
        cls,
        table_name: str,
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> "DynamoStore":
        return cls(get_dynamodb_table(table_name, region=region, endpoint_url=endpoint_url))

    def put(self, record: NewsRecord) -> None:
        self.table.put_item(Item=record.to_item())

    def scan(self, limit: int = DEFAULT_SCAN_LIMIT) -> list[dict[str, Any]]:
        """Return up to ``limit`` items in table order."""
        response = self.table.scan(Limit=limit)
        items = [from_dynamodb_item(item) for item in response.get("Items", [])]
        logger.info("Scanned %d items from %s", len(items), self.table.name)
        return items
