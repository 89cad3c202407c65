"""Tests for application settings and logging setup."""

import json
import logging

import pytest

from tfselect.config import DEFAULT_SETTINGS, Settings
from tfselect.utils.logger import setup_logging


@pytest.fixture(autouse=True)
def _no_env_level(monkeypatch):
    monkeypatch.delenv("TFSELECT_LOG_LEVEL", raising=False)


class TestSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = Settings(config_dir=tmp_path)
        assert settings.terraform_binary == "terraform"
        assert settings.check_module_dir is False
        assert settings.reserved_environment_dirs == ("terraform",)
        assert settings.get("log_level") == "WARNING"

    def test_file_overrides_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({
            "terraform_binary": "tofu",
            "check_module_dir": True,
        }))
        settings = Settings(config_dir=tmp_path)
        assert settings.terraform_binary == "tofu"
        assert settings.check_module_dir is True
        assert settings.get("log_file") is False

    def test_malformed_file_falls_back(self, tmp_path):
        (tmp_path / "settings.json").write_text("{not json")
        settings = Settings(config_dir=tmp_path)
        assert settings.terraform_binary == DEFAULT_SETTINGS["terraform_binary"]

    def test_non_object_ignored(self, tmp_path):
        (tmp_path / "settings.json").write_text("[1, 2]")
        assert Settings(config_dir=tmp_path).terraform_binary == "terraform"

    def test_env_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TFSELECT_LOG_LEVEL", "DEBUG")
        assert Settings(config_dir=tmp_path).get("log_level") == "DEBUG"

    def test_get_dotted(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({"a": {"b": 1}}))
        settings = Settings(config_dir=tmp_path)
        assert settings.get("a.b") == 1
        assert settings.get("a.c", "x") == "x"

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({"terraform_binary": "tofu"}))
        settings = Settings(config_dir=tmp_path)
        assert settings.terraform_binary == "tofu"
        assert settings.reserved_environment_dirs == ("terraform",)

    def test_defaults_not_mutated(self, tmp_path):
        settings = Settings(config_dir=tmp_path)
        settings.get("reserved_environment_dirs").append("modules")
        assert DEFAULT_SETTINGS["reserved_environment_dirs"] == ["terraform"]


class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_level(self):
        root = setup_logging("ERROR", log_file=False)
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.ERROR

    def test_file_handler(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
        root = setup_logging("INFO", log_file=True)
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert list((tmp_path / "tfselect" / "logs").glob("tfselect_*.log"))
