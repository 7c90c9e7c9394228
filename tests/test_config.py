# ==============================================
# Tests for Configuration and Logger Levels
# ==============================================

import logging

from field_mappings.config import DEFAULT_CATALOG_DIR, get_config, reset_config
from field_mappings.logging_utils import config_log_level, create_logger


class TestAppConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOGGER_LEVEL", raising=False)
        config = get_config()
        assert config.catalog_dir == DEFAULT_CATALOG_DIR
        assert config.strict_validation is True
        assert config.log_level == "INFO"

    def test_cached_until_reset(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("STRICT_CATALOG", "no")
        assert get_config() is first
        reset_config()
        assert get_config().strict_validation is False


class TestLoggerLevel:

    def test_level_comes_from_config(self, monkeypatch):
        monkeypatch.setenv("LOGGER_LEVEL", "debug")
        assert get_config().log_level == "DEBUG"
        assert config_log_level() == logging.DEBUG
        assert create_logger("field_mappings.tests.config_level").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOGGER_LEVEL", "chatty")
        assert config_log_level() == logging.INFO

    def test_per_logger_override(self, monkeypatch):
        monkeypatch.setenv("LOGGER_LEVEL", "INFO")
        monkeypatch.setenv("LOGGER_LEVEL.field_mappings.tests.override", "ERROR")
        assert create_logger("field_mappings.tests.override").level == logging.ERROR

    def test_explicit_level_wins_over_config(self, monkeypatch):
        monkeypatch.setenv("LOGGER_LEVEL", "DEBUG")
        assert create_logger("field_mappings.tests.explicit", level=logging.WARNING).level == logging.WARNING
