"""Exceptions raised by the news ingestion pipeline."""


class IngestError(Exception):
    """Base class for ingestion failures."""


class ConfigurationError(IngestError):
    """Required configuration (e.g. the feed API key) is missing or invalid."""


class FeedError(IngestError):
    """The news feed could not be fetched or understood."""


class FeedTimeout(FeedError):
    """The feed request did not complete before its deadline."""


class UpstreamError(FeedError):
    """The feed could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponse(FeedError):
    """The feed response body is not valid JSON."""


class InvalidResponse(FeedError):
    """The feed response is JSON but not a usable article list."""


class StorageError(IngestError):
    """Writing a record to the store failed; the run stops at that article."""

    def __init__(self, message: str, index: int | None = None, processed_count: int = 0):
        super().__init__(message)
        self.index = index
        self.processed_count = processed_count


class NotificationError(IngestError):
    """Publishing a record to the event bus failed after it was stored."""

    def __init__(self, message: str, record_id: str | None = None, processed_count: int = 0):
        super().__init__(message)
        self.record_id = record_id
        self.processed_count = processed_count
