"""Fetch news articles, store them as records and announce each one.

One run processes one feed poll. Articles are handled strictly in feed
order; each goes through normalize -> store -> publish. A failed store
write stops the run at that article and leaves the already-written prefix
in place. A failed publish leaves the record stored and, depending on
``on_publish_failure``, either continues or stops the run.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Callable, Mapping, Protocol

from common.ids import RecordIdGenerator
from ingest_news.errors import ConfigurationError, NotificationError, StorageError
from ingest_news.models import ArticleState, BatchOutcome, BatchState, NewsRecord, RawArticle
from ingest_news.normalize.normalize import normalize_article

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_ENV = "NEWS_API_KEY"
PUBLISH_FAILURE_POLICIES = ("continue", "abort")


class ArticleFeed(Protocol):
    def fetch(self, api_key: str) -> list[RawArticle]: ...


class RecordStore(Protocol):
    def put(self, record: NewsRecord) -> None: ...


class RecordNotifier(Protocol):
    def publish(self, record: NewsRecord) -> None: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IngestionPipeline:
    """Orchestrates FeedClient -> normalize -> store -> notifier for one poll."""

    def __init__(
        self,
        feed_client: ArticleFeed,
        store: RecordStore,
        notifier: RecordNotifier,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        on_publish_failure: str = "continue",
        clock: Callable[[], datetime] = utc_now,
        next_id: Callable[[datetime], str] | None = None,
    ):
        if on_publish_failure not in PUBLISH_FAILURE_POLICIES:
            raise ConfigurationError(
                f"Invalid on_publish_failure {on_publish_failure!r}, "
                f"expected one of {', '.join(PUBLISH_FAILURE_POLICIES)}"
            )
        self.feed_client = feed_client
        self.store = store
        self.notifier = notifier
        self.api_key_env = api_key_env
        self.on_publish_failure = on_publish_failure
        self.clock = clock
        self.next_id = next_id or RecordIdGenerator()

    def get_api_key(self, environ: Mapping[str, str] | None = None) -> str:
        environ = os.environ if environ is None else environ
        api_key = environ.get(self.api_key_env)
        if not api_key:
            raise ConfigurationError(f"{self.api_key_env} environment variable is not set")
        return api_key

    def run(self, environ: Mapping[str, str] | None = None) -> BatchOutcome:
        """Run one ingestion and return the completed outcome.

        Raises:
            ConfigurationError: The feed API key is missing.
            FeedError: The feed could not be fetched or parsed.
            StorageError: A store write failed (earlier records stay stored).
            NotificationError: A publish failed and the policy is "abort".
        """
        logger.info("Starting news ingestion")
        api_key = self.get_api_key(environ)

        raw_articles = self.feed_client.fetch(api_key)
        outcome = self.process_batch(raw_articles)

        if outcome.state == BatchState.ABORTED:
            raise outcome.cause
        return outcome

    def process_batch(self, raw_articles: list[RawArticle]) -> BatchOutcome:
        """Process fetched articles sequentially and return the batch outcome."""
        outcome = BatchOutcome(state=BatchState.FETCHED)
        logger.info("Processing %d articles", len(raw_articles))

        for index, raw in enumerate(raw_articles):
            record = normalize_article(raw, self.clock(), self.next_id)
            state = ArticleState.NORMALIZED
            logger.info("Processing article: %s", record.title)

            try:
                self.store.put(record)
            except Exception as e:
                error = StorageError(
                    f"Failed to store article {index} ({record.id}): {e}",
                    index=index,
                    processed_count=outcome.processed_count,
                )
                error.__cause__ = e
                logger.error("%s", error)
                return self._abort(outcome, index, error)

            state = ArticleState.STORED
            outcome.processed_count += 1
            outcome.records.append(record)

            try:
                self.notifier.publish(record)
                state = ArticleState.PUBLISHED
            except Exception as e:
                if isinstance(e, NotificationError):
                    error = e
                else:
                    error = NotificationError(
                        f"Failed to publish event for record {record.id}: {e}",
                        record_id=record.id,
                    )
                    error.__cause__ = e
                error.processed_count = outcome.processed_count
                outcome.notification_failures += 1

                if self.on_publish_failure == "abort":
                    logger.error("%s", error)
                    return self._abort(outcome, index, error)
                logger.warning("%s (record is stored, continuing)", error)

            logger.info("Article %s: %s", state.value, record.id)

        outcome.state = BatchState.COMPLETED
        logger.info(
            "News ingestion completed: %d articles processed (%d notification failures)",
            outcome.processed_count,
            outcome.notification_failures,
        )
        return outcome

    @staticmethod
    def _abort(outcome: BatchOutcome, index: int, cause) -> BatchOutcome:
        outcome.state = BatchState.ABORTED
        outcome.failed_index = index
        outcome.cause = cause
        logger.error(
            "News ingestion aborted at article %d: %d articles stored before failure",
            index,
            outcome.processed_count,
        )
        return outcome
