"""News feed fetching."""

import json
import logging
import threading
import time
from typing import Mapping

import requests

from ingest_news.errors import (
    ConfigurationError,
    FeedTimeout,
    InvalidResponse,
    MalformedResponse,
    UpstreamError,
)
from ingest_news.models import RawArticle

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://newsapi.org/v2/top-headlines"
DEFAULT_TIMEOUT_MS = 8000
DEFAULT_USER_AGENT = "Prism-News-Ingest/1.0"
API_KEY_MODES = ("query", "header")

CHUNK_SIZE = 8192
PREVIEW_CHARS = 200


class FeedClient:
    """Fetches the article list from a NewsAPI-style endpoint.

    The API key is sent either as a query parameter (``api_key_mode="query"``)
    or as a request header (``api_key_mode="header"``). The whole request,
    including reading the body, must finish within ``timeout_ms``.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        api_key_mode: str = "query",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        params: Mapping[str, str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        api_key_param: str = "apiKey",
        api_key_header: str = "X-Api-Key",
    ):
        if api_key_mode not in API_KEY_MODES:
            raise ConfigurationError(
                f"Invalid api_key_mode {api_key_mode!r}, expected one of {', '.join(API_KEY_MODES)}"
            )
        if timeout_ms <= 0:
            raise ConfigurationError(f"timeout_ms must be positive, got {timeout_ms}")

        self.endpoint = endpoint
        self.api_key_mode = api_key_mode
        self.timeout_ms = timeout_ms
        self.params = dict(params or {})
        self.user_agent = user_agent
        self.api_key_param = api_key_param
        self.api_key_header = api_key_header

    def build_request(self, api_key: str) -> tuple[dict[str, str], dict[str, str]]:
        """Return (params, headers) for a feed request."""
        params = dict(self.params)
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
        if self.api_key_mode == "query":
            params[self.api_key_param] = api_key
        else:
            headers[self.api_key_header] = api_key
        return params, headers

    def fetch(self, api_key: str) -> list[RawArticle]:
        """Fetch and parse the current article list."""
        params, headers = self.build_request(api_key)

        logger.info("Fetching news from %s", self.endpoint)
        status_code, body = self._get(params, headers)
        logger.info("Feed status: %d", status_code)

        articles = parse_feed_response(status_code, body)
        logger.info("Found %d articles", len(articles))
        return articles

    def _get(self, params: dict[str, str], headers: dict[str, str]) -> tuple[int, str]:
        """Run the request on a worker thread and wait at most ``timeout_ms`` for it.

        Socket timeouts only bound each read, so a feed that trickles its
        headers or body could otherwise hold the call open indefinitely.
        """
        timeout = self.timeout_ms / 1000
        state: dict = {}

        def worker() -> None:
            try:
                state["result"] = self._request(params, headers, timeout, state)
            except Exception as e:
                state["error"] = e

        thread = threading.Thread(target=worker, name="feed-fetch", daemon=True)
        thread.start()
        thread.join(timeout)

        if thread.is_alive():
            response = state.get("response")
            if response is not None:
                response.close()
            logger.error("Feed request exceeded %d ms deadline, aborting", self.timeout_ms)
            raise FeedTimeout(f"Feed request timed out after {self.timeout_ms} ms")

        if "error" in state:
            raise state["error"]
        return state["result"]

    def _request(
        self,
        params: dict[str, str],
        headers: dict[str, str],
        timeout: float,
        state: dict,
    ) -> tuple[int, str]:
        deadline = time.monotonic() + timeout

        try:
            response = requests.get(
                self.endpoint,
                params=params,
                headers=headers,
                timeout=timeout,
                stream=True,
            )
        except requests.Timeout as e:
            raise FeedTimeout(f"Feed request timed out after {self.timeout_ms} ms") from e
        except requests.RequestException as e:
            logger.error("Request error: %s", e)
            raise UpstreamError(f"Failed to fetch from news feed: {e}") from e

        state["response"] = response
        try:
            chunks = []
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise FeedTimeout(f"Feed request timed out after {self.timeout_ms} ms")
                chunks.append(chunk)
            if time.monotonic() > deadline:
                raise FeedTimeout(f"Feed request timed out after {self.timeout_ms} ms")
        except requests.RequestException as e:
            # Read timeouts surface from iter_content as ConnectionError.
            if isinstance(e, requests.Timeout) or time.monotonic() >= deadline:
                raise FeedTimeout(f"Feed request timed out after {self.timeout_ms} ms") from e
            logger.error("Request error while reading feed body: %s", e)
            raise UpstreamError(f"Failed to read news feed response: {e}") from e
        finally:
            response.close()

        return response.status_code, decode_body(b"".join(chunks), response.encoding)


def decode_body(content: bytes, encoding: str | None) -> str:
    """Decode a response body, falling back to UTF-8 for unknown charsets."""
    try:
        return content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        logger.warning("Unknown response charset %r, decoding as utf-8", encoding)
        return content.decode("utf-8", errors="replace")


def parse_feed_response(status_code: int, body: str) -> list[RawArticle]:
    """Validate a feed response and extract its articles."""
    if not 200 <= status_code < 300:
        logger.error("Feed error response (%d): %s", status_code, body[:PREVIEW_CHARS])
        raise UpstreamError(
            f"News feed returned status {status_code}",
            status_code=status_code,
            body=body,
        )

    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.error("Parse error: %s", e)
        raise MalformedResponse("Failed to parse news feed response") from e

    logger.debug("Response received: %s...", body[:PREVIEW_CHARS])

    if not isinstance(payload, dict):
        raise InvalidResponse("Invalid news feed response: expected a JSON object")

    if payload.get("status") == "error":
        message = payload.get("message") or payload.get("code") or "unknown error"
        raise InvalidResponse(f"News feed error: {message}")

    articles = payload.get("articles")
    if not isinstance(articles, list):
        raise InvalidResponse("Invalid news feed response: no articles found")

    return [RawArticle.from_dict(article) for article in articles]


def fetch_news(
    endpoint: str,
    api_key: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    api_key_mode: str = "query",
    params: Mapping[str, str] | None = None,
) -> list[RawArticle]:
    """Fetch articles from ``endpoint`` with a one-off client."""
    client = FeedClient(
        endpoint=endpoint,
        api_key_mode=api_key_mode,
        timeout_ms=timeout_ms,
        params=params,
    )
    return client.fetch(api_key)
