"""Configuration loader for ingest_news."""

from dataclasses import dataclass, field

from dotenv import load_dotenv

from common.config import CONFIG_ROOT, ConfigSingleton, find_config_path, load_yaml

load_dotenv()

CONFIG_DIR = CONFIG_ROOT / "ingest_news"
CONFIG_ENV_VAR = "INGEST_NEWS_CONFIG"


@dataclass
class FeedConfig:
    endpoint: str = "https://newsapi.org/v2/top-headlines"
    params: dict[str, str] = field(default_factory=lambda: {"country": "us"})
    api_key_env: str = "NEWS_API_KEY"
    api_key_mode: str = "query"  # "query" or "header"
    api_key_param: str = "apiKey"
    api_key_header: str = "X-Api-Key"
    timeout_ms: int = 8000
    user_agent: str = "Prism-News-Ingest/1.0"


@dataclass
class StoreConfig:
    backend: str = "dynamodb"  # "dynamodb" or "memory"
    table_name: str = "prism-news"
    region: str | None = None
    endpoint_url: str | None = None


@dataclass
class NotifierConfig:
    backend: str = "eventbridge"  # "eventbridge" or "memory"
    source: str = "prism.news"
    detail_type: str = "news.ingested"
    event_bus_name: str | None = None
    region: str | None = None
    endpoint_url: str | None = None


@dataclass
class PipelineConfig:
    on_publish_failure: str = "continue"  # "continue" or "abort"


@dataclass
class IngestConfig:
    feed: FeedConfig = field(default_factory=FeedConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    notifier: NotifierConfig = field(default_factory=NotifierConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)


def load_config(config_name: str | None = None) -> IngestConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a path.
                    If None, uses INGEST_NEWS_CONFIG env var or "prod".

    Returns:
        Loaded IngestConfig object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    return parse_config(load_yaml(config_path))


def parse_config(data: dict) -> IngestConfig:
    """Parse config dictionary into IngestConfig object."""
    feed_raw = data.get("feed") or {}
    feed = FeedConfig(
        endpoint=feed_raw.get("endpoint", FeedConfig.endpoint),
        params={str(k): str(v) for k, v in (feed_raw.get("params", {"country": "us"}) or {}).items()},
        api_key_env=feed_raw.get("api_key_env", FeedConfig.api_key_env),
        api_key_mode=feed_raw.get("api_key_mode", FeedConfig.api_key_mode),
        api_key_param=feed_raw.get("api_key_param", FeedConfig.api_key_param),
        api_key_header=feed_raw.get("api_key_header", FeedConfig.api_key_header),
        timeout_ms=int(feed_raw.get("timeout_ms", FeedConfig.timeout_ms)),
        user_agent=feed_raw.get("user_agent", FeedConfig.user_agent),
    )

    store_raw = data.get("store") or {}
    store = StoreConfig(
        backend=store_raw.get("backend", StoreConfig.backend),
        table_name=store_raw.get("table_name", StoreConfig.table_name),
        region=store_raw.get("region"),
        endpoint_url=store_raw.get("endpoint_url"),
    )

    notifier_raw = data.get("notifier") or {}
    notifier = NotifierConfig(
        backend=notifier_raw.get("backend", NotifierConfig.backend),
        source=notifier_raw.get("source", NotifierConfig.source),
        detail_type=notifier_raw.get("detail_type", NotifierConfig.detail_type),
        event_bus_name=notifier_raw.get("event_bus_name"),
        region=notifier_raw.get("region"),
        endpoint_url=notifier_raw.get("endpoint_url"),
    )

    pipeline = PipelineConfig(
        on_publish_failure=(data.get("pipeline") or {}).get(
            "on_publish_failure", PipelineConfig.on_publish_failure
        ),
    )

    return IngestConfig(feed=feed, store=store, notifier=notifier, pipeline=pipeline)


_manager: ConfigSingleton[IngestConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
