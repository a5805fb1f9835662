"""Data models for the news ingestion pipeline."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from ingest_news.errors import IngestError


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class RawArticle:
    """Article as returned by the news feed. Every field may be missing."""
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    source_name: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "RawArticle":
        """Build from a feed JSON object; anything unexpected counts as absent."""
        if not isinstance(data, dict):
            return cls()
        source = data.get("source")
        source_name = source.get("name") if isinstance(source, dict) else None
        return cls(
            title=_optional_str(data.get("title")),
            description=_optional_str(data.get("description")),
            content=_optional_str(data.get("content")),
            source_name=_optional_str(source_name),
            url=_optional_str(data.get("url")),
        )


@dataclass(frozen=True)
class NewsRecord:
    """Canonical stored representation of one article."""
    id: str
    timestamp: str
    title: str
    content: str
    source: str
    url: str
    ttl: int

    def to_item(self) -> dict[str, Any]:
        return asdict(self)


class BatchState(str, Enum):
    FETCHED = "fetched"
    COMPLETED = "completed"
    ABORTED = "aborted"


class ArticleState(str, Enum):
    NORMALIZED = "normalized"
    STORED = "stored"
    PUBLISHED = "published"


@dataclass
class BatchOutcome:
    """Result of processing one feed poll's articles.

    ``processed_count`` is always the number of records durably written,
    whether the batch completed or was aborted at ``failed_index``.
    """
    state: BatchState = BatchState.FETCHED
    processed_count: int = 0
    records: list[NewsRecord] = field(default_factory=list)
    notification_failures: int = 0
    failed_index: Optional[int] = None
    cause: Optional[IngestError] = None

    @property
    def succeeded(self) -> bool:
        return self.state == BatchState.COMPLETED
