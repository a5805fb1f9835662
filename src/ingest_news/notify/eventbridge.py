"""EventBridge notifier for newly ingested records."""

import json
import logging

from common.aws import get_events_client
from ingest_news.errors import NotificationError
from ingest_news.models import NewsRecord

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "prism.news"
DEFAULT_DETAIL_TYPE = "news.ingested"


class EventBridgeNotifier:
    """Publishes one event per record with a fixed source and detail type."""

    def __init__(
        self,
        client,
        source: str = DEFAULT_SOURCE,
        detail_type: str = DEFAULT_DETAIL_TYPE,
        event_bus_name: str | None = None,
    ):
        self.client = client
        self.source = source
        self.detail_type = detail_type
        self.event_bus_name = event_bus_name

    @classmethod
    def from_config(
        cls,
        source: str = DEFAULT_SOURCE,
        detail_type: str = DEFAULT_DETAIL_TYPE,
        event_bus_name: str | None = None,
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> "EventBridgeNotifier":
        client = get_events_client(region=region, endpoint_url=endpoint_url)
        return cls(client, source=source, detail_type=detail_type, event_bus_name=event_bus_name)

    def build_entry(self, record: NewsRecord) -> dict:
        entry = {
            "Source": self.source,
            "DetailType": self.detail_type,
            "Detail": json.dumps(record.to_item(), ensure_ascii=False),
        }
        if self.event_bus_name:
            entry["EventBusName"] = self.event_bus_name
        return entry

    def publish(self, record: NewsRecord) -> None:
        response = self.client.put_events(Entries=[self.build_entry(record)])

        # put_events reports per-entry failures in the response instead of raising
        if response.get("FailedEntryCount", 0):
            entries = response.get("Entries") or [{}]
            error = entries[0].get("ErrorMessage") or entries[0].get("ErrorCode") or "unknown error"
            raise NotificationError(
                f"Failed to publish event for record {record.id}: {error}",
                record_id=record.id,
            )
