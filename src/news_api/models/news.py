"""News record Pydantic models."""

from pydantic import BaseModel


class NewsItem(BaseModel):
    """Stored news record as returned by the read API."""

    id: str
    timestamp: str
    title: str
    content: str = ""
    source: str = "Unknown"
    url: str = ""
    ttl: int | None = None


class ErrorResponse(BaseModel):
    error: str
