"""Configuration loader for news-api."""

from dataclasses import dataclass, field

from dotenv import load_dotenv

from common.config import CONFIG_ROOT, ConfigSingleton, find_config_path, load_yaml
from ingest_news.config import StoreConfig

load_dotenv()

CONFIG_DIR = CONFIG_ROOT / "news_api"
CONFIG_ENV_VAR = "NEWS_API_CONFIG"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class APIConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    scan_limit: int = 50
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(config_name: str | None = None) -> APIConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses NEWS_API_CONFIG env var or "prod".

    Returns:
        APIConfig instance
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    raw = load_yaml(config_path)

    store_raw = raw.get("store") or {}
    store_config = StoreConfig(
        backend=store_raw.get("backend", "dynamodb"),
        table_name=store_raw.get("table_name", "prism-news"),
        region=store_raw.get("region"),
        endpoint_url=store_raw.get("endpoint_url"),
    )

    server_raw = raw.get("server") or {}
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(server_raw.get("port", 8000)),
    )

    return APIConfig(
        store=store_config,
        scan_limit=int(raw.get("scan_limit", 50)),
        server=server_config,
    )


_manager: ConfigSingleton[APIConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
