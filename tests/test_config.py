"""Tests for global/local configuration and settings resolution."""

import json

import pytest

from devskill.config import GlobalConfig, LocalConfig, resolve_settings
from devskill.config.global_config import DEFAULT_SERVICE_URL


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    home = tmp_path / "home"
    work = tmp_path / "work" / "nested"
    home.mkdir()
    work.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("DEVSKILL_URL", raising=False)
    monkeypatch.chdir(work)
    return tmp_path


class TestGlobalConfig:
    def test_defaults_when_missing(self):
        config = GlobalConfig.load()

        assert config.service_url == DEFAULT_SERVICE_URL
        assert config.default_runtime == "default"

    def test_round_trip(self):
        GlobalConfig(service_url="https://eval.example.com/", default_runtime="alt-engine-1").save()

        config = GlobalConfig.load()
        assert config.service_url == "https://eval.example.com"
        assert config.default_runtime == "alt-engine-1"

    def test_corrupt_file_gives_defaults(self):
        GlobalConfig.default_path().write_text("{not json", encoding="utf-8")

        assert GlobalConfig.load() == GlobalConfig()


class TestLocalConfig:
    def test_none_when_missing(self):
        assert LocalConfig.load() is None

    def test_found_in_parent_directory(self, isolated):
        config_path = isolated / "work" / ".devskill.local"
        config_path.write_text(
            json.dumps({"problem_id": "7", "document": "solution.js", "runtime": "alt-engine-2"}),
            encoding="utf-8",
        )

        config = LocalConfig.load()

        assert config.problem_id == "7"
        assert config.runtime == "alt-engine-2"
        # relative to the config file, not the cwd
        assert config.document == str(isolated / "work" / "solution.js")

    def test_save_in_cwd(self, isolated):
        LocalConfig(problem_id="3").save()

        assert (isolated / "work" / "nested" / ".devskill.local").exists()
        assert LocalConfig.load().problem_id == "3"


class TestResolveSettings:
    def test_builtin_defaults(self):
        settings = resolve_settings()

        assert settings.service_url == DEFAULT_SERVICE_URL
        assert settings.problem_id == "1"
        assert settings.runtime == "default"
        assert settings.document is None

    def test_local_over_global(self):
        GlobalConfig(default_runtime="alt-engine-1").save()
        LocalConfig(problem_id="9", runtime="alt-engine-2", document="/tmp/a.js").save()

        settings = resolve_settings()

        assert settings.problem_id == "9"
        assert settings.runtime == "alt-engine-2"
        assert settings.document == "/tmp/a.js"

    def test_options_win(self):
        LocalConfig(problem_id="9", runtime="alt-engine-2").save()

        settings = resolve_settings(service_url="http://other:9000/", problem_id="2", runtime="default")

        assert settings.service_url == "http://other:9000"
        assert settings.problem_id == "2"
        assert settings.runtime == "default"

    def test_environment_overrides_global_url(self, monkeypatch):
        GlobalConfig(service_url="http://configured:8080").save()
        monkeypatch.setenv("DEVSKILL_URL", "http://from-env:8080")

        assert resolve_settings().service_url == "http://from-env:8080"
        assert resolve_settings(service_url="http://option:1").service_url == "http://option:1"
