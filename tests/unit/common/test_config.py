"""Tests for common.config module."""

import pytest

from common.config import ConfigSingleton, find_config_path, load_yaml


class TestFindConfigPath:
    def test_finds_named_config(self, tmp_path) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        assert find_config_path("prod", tmp_path) == tmp_path / "prod.yaml"

    def test_uses_env_var_when_name_missing(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "test.yaml").write_text("a: 1\n")
        monkeypatch.setenv("MY_CONFIG", "test")
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "test.yaml"

    def test_falls_back_to_default_name(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        monkeypatch.delenv("MY_CONFIG", raising=False)
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "prod.yaml"

    def test_accepts_yaml_path(self, tmp_path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("a: 1\n")
        assert find_config_path(str(path), tmp_path / "elsewhere") == path

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("missing", tmp_path)


class TestLoadYaml:
    def test_empty_file_returns_empty_dict(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestConfigSingleton:
    def test_loads_lazily_once(self) -> None:
        calls = []

        def loader():
            calls.append(1)
            return {"loaded": True}

        manager = ConfigSingleton(loader)
        assert manager.get() == {"loaded": True}
        assert manager.get() == {"loaded": True}
        assert len(calls) == 1

    def test_set_and_reset(self) -> None:
        manager = ConfigSingleton(lambda: "from-loader")
        manager.set("explicit")
        assert manager.get() == "explicit"
        manager.reset()
        assert manager.get() == "from-loader"

    def test_get_without_loader_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ConfigSingleton().get()
