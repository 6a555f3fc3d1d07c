"""
Unit tests for configuration loading and logging setup.
"""

import json
import logging

import pytest

from capship.bootstrap import (
    CapshipConfig,
    JSONFormatter,
    ValidationConfig,
    get_config,
    load_config,
    reset_config,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in (
        "CAPSHIP_ALLOW_OVERWEIGHT",
        "CAPSHIP_PRINT_SIZE",
        "CAPSHIP_YEAR",
        "CAPSHIP_TECH_BASE",
        "CAPSHIP_ALLOW_UNOFFICIAL",
        "CAPSHIP_CATALOG",
        "CAPSHIP_LOG_LEVEL",
        "CAPSHIP_LOG_FILE",
        "CAPSHIP_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


class TestDefaults:
    """Tests for default configuration values."""

    def test_validation_defaults(self):
        config = ValidationConfig()
        assert config.allow_overweight_construction is False
        assert config.print_size == 40
        assert config.default_year == 3145
        assert config.tech_base == "all"

    def test_root_defaults(self):
        config = CapshipConfig()
        assert config.catalog.catalog_path is None
        assert config.logging.level == "WARNING"


class TestFromEnv:
    """Tests for environment configuration."""

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("CAPSHIP_ALLOW_OVERWEIGHT", "true")
        monkeypatch.setenv("CAPSHIP_PRINT_SIZE", "60")
        monkeypatch.setenv("CAPSHIP_CATALOG", "/data/catalog.json")
        monkeypatch.setenv("CAPSHIP_LOG_LEVEL", "DEBUG")
        config = CapshipConfig.from_env()
        assert config.validation.allow_overweight_construction is True
        assert config.validation.print_size == 60
        assert config.catalog.catalog_path == "/data/catalog.json"
        assert config.logging.level == "DEBUG"


class TestFromFile:
    """Tests for JSON file configuration."""

    def test_file_overrides(self, tmp_path):
        path = tmp_path / "capship.json"
        path.write_text(json.dumps({
            "validation": {"print_size": 50, "unknown_key": 1},
            "catalog": {"catalog_path": "catalog.json"},
            "plugins": {"x": 1},
        }))
        config = CapshipConfig.from_file(str(path))
        assert config.validation.print_size == 50
        assert not hasattr(config.validation, "unknown_key")
        assert config.catalog.catalog_path == "catalog.json"

    def test_missing_file_falls_back(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="bootstrap.config"):
            config = CapshipConfig.from_file(str(tmp_path / "missing.json"))
        assert config.validation.print_size == 40
        assert "Config file not found" in caplog.text

    def test_to_dict(self):
        data = CapshipConfig().to_dict()
        assert set(data) == {"version", "validation", "catalog", "logging"}
        assert data["validation"]["print_size"] == 40


class TestGlobalConfig:
    """Tests for load_config / get_config."""

    def test_get_config_caches(self):
        assert get_config() is get_config()

    def test_load_config_from_path(self, tmp_path):
        path = tmp_path / "capship.json"
        path.write_text(json.dumps({"validation": {"default_year": 3067}}))
        config = load_config(str(path))
        assert config.validation.default_year == 3067
        assert get_config() is config

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first


class TestLoggingSetup:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def _own_handlers(self):
        return [h for h in logging.getLogger().handlers if getattr(h, "_capship", False)]

    def test_level(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_repeat_calls_replace_handlers(self):
        setup_logging()
        setup_logging()
        assert len(self._own_handlers()) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "capship.log"
        setup_logging(level="INFO", log_file=str(path))
        assert len(self._own_handlers()) == 2
        logging.getLogger("capship.test").info("hello")
        for handler in self._own_handlers():
            handler.flush()
        assert "hello" in path.read_text()

    def test_json_formatter(self):
        record = logging.LogRecord("capship.x", logging.INFO, __file__, 1, "msg %s", ("a",), None)
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "msg a"
        assert data["level"] == "INFO"
        assert data["logger"] == "capship.x"
