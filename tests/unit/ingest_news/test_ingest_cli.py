"""Tests for ingest_news.cli and ingest_news.helpers."""

import json
from unittest.mock import patch

from ingest_news.cli import main
from ingest_news.config import parse_config
from ingest_news.errors import UpstreamError
from ingest_news.helpers import apply_dry_run, parse_ingest_news_args
from ingest_news.models import RawArticle


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_ingest_news_args([])
        assert args.config is None
        assert args.dry_run is False
        assert args.output_local is False

    def test_flags(self) -> None:
        args = parse_ingest_news_args(["--config", "test", "--dry-run", "--output-local"])
        assert args.config == "test"
        assert args.dry_run is True
        assert args.output_local is True


class TestApplyDryRun:
    def test_switches_backends_to_memory(self) -> None:
        config = apply_dry_run(parse_config({}))
        assert config.store.backend == "memory"
        assert config.notifier.backend == "memory"


@patch("ingest_news.fetch_news.fetch_news.FeedClient.fetch")
class TestMain:
    def test_dry_run_succeeds(self, mock_fetch, monkeypatch) -> None:
        monkeypatch.setenv("NEWS_API_KEY", "secret")
        mock_fetch.return_value = [RawArticle(title="A")]

        assert main(["--config", "prod", "--dry-run"]) == 0
        mock_fetch.assert_called_once_with("secret")

    def test_missing_key_exits_1(self, mock_fetch, monkeypatch) -> None:
        monkeypatch.delenv("NEWS_API_KEY", raising=False)

        assert main(["--config", "test"]) == 1
        mock_fetch.assert_not_called()

    def test_feed_failure_exits_1(self, mock_fetch, monkeypatch) -> None:
        monkeypatch.setenv("NEWS_API_KEY", "secret")
        mock_fetch.side_effect = UpstreamError("News feed returned status 500", status_code=500)

        assert main(["--config", "test"]) == 1

    def test_unexpected_error_exits_1(self, mock_fetch, monkeypatch) -> None:
        monkeypatch.setenv("NEWS_API_KEY", "secret")
        mock_fetch.side_effect = LookupError("unknown encoding: x-bogus")

        assert main(["--config", "test"]) == 1

    def test_missing_config_exits_1(self, mock_fetch) -> None:
        assert main(["--config", "nope"]) == 1

    def test_output_local_writes_jsonl(self, mock_fetch, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("NEWS_API_KEY", "secret")
        monkeypatch.chdir(tmp_path)
        mock_fetch.return_value = [RawArticle(title="A"), RawArticle(title="B")]

        assert main(["--config", "test", "--output-local"]) == 0

        files = list((tmp_path / "output").glob("news_records_*.jsonl"))
        assert len(files) == 1
        lines = files[0].read_text().splitlines()
        assert [json.loads(line)["title"] for line in lines] == ["A", "B"]
