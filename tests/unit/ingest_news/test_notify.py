"""Tests for ingest_news.notify backends."""

import json
from unittest.mock import Mock, patch

import pytest

from ingest_news.errors import NotificationError
from ingest_news.models import NewsRecord
from ingest_news.notify.eventbridge import EventBridgeNotifier
from ingest_news.notify.memory import InMemoryNotifier

RECORD = NewsRecord(
    id="1704110400000-0-abcdefgh",
    timestamp="2024-01-01T12:00:00.000Z",
    title="Headline",
    content="Body",
    source="BBC News",
    url="https://bbc.com/1",
    ttl=1704715200,
)


class TestEventBridgeNotifier:
    def test_publishes_one_entry_with_record_detail(self) -> None:
        client = Mock()
        client.put_events.return_value = {"FailedEntryCount": 0, "Entries": [{"EventId": "e1"}]}

        EventBridgeNotifier(client).publish(RECORD)

        entries = client.put_events.call_args.kwargs["Entries"]
        assert len(entries) == 1
        assert entries[0]["Source"] == "prism.news"
        assert entries[0]["DetailType"] == "news.ingested"
        assert json.loads(entries[0]["Detail"]) == RECORD.to_item()
        assert "EventBusName" not in entries[0]

    def test_includes_event_bus_name_when_set(self) -> None:
        entry = EventBridgeNotifier(Mock(), event_bus_name="prism-bus").build_entry(RECORD)
        assert entry["EventBusName"] == "prism-bus"

    def test_failed_entry_raises_notification_error(self) -> None:
        client = Mock()
        client.put_events.return_value = {
            "FailedEntryCount": 1,
            "Entries": [{"ErrorCode": "InternalFailure", "ErrorMessage": "try again"}],
        }

        with pytest.raises(NotificationError, match="try again") as exc_info:
            EventBridgeNotifier(client).publish(RECORD)

        assert exc_info.value.record_id == RECORD.id

    def test_client_errors_propagate(self) -> None:
        client = Mock()
        client.put_events.side_effect = RuntimeError("AccessDenied")
        with pytest.raises(RuntimeError):
            EventBridgeNotifier(client).publish(RECORD)

    @patch("ingest_news.notify.eventbridge.get_events_client")
    def test_from_config(self, mock_get_client) -> None:
        notifier = EventBridgeNotifier.from_config(source="custom.source", region="eu-west-1")
        mock_get_client.assert_called_once_with(region="eu-west-1", endpoint_url=None)
        assert notifier.client is mock_get_client.return_value
        assert notifier.source == "custom.source"


class TestInMemoryNotifier:
    def test_records_events(self) -> None:
        notifier = InMemoryNotifier()
        notifier.publish(RECORD)
        assert len(notifier.events) == 1
        assert notifier.events[0]["Source"] == "prism.news"
        assert json.loads(notifier.events[0]["Detail"])["id"] == RECORD.id
