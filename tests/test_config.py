"""Tests for settings and logging bootstrap."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from graph_voronoi.config import Settings
from graph_voronoi.utils.logging_setup import configure_logging


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "CALCULATIONS_ENABLED"):
            monkeypatch.delenv(f"GRAPH_VORONOI_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "plain"
        assert config.calculations_enabled is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GRAPH_VORONOI_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GRAPH_VORONOI_CALCULATIONS_ENABLED", "false")

        config = Settings(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.calculations_enabled is False

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("GRAPH_VORONOI_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    """Test structlog configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    @pytest.mark.parametrize("log_format", ["json", "plain"])
    def test_configures_structlog(self, log_format):
        configure_logging("debug", log_format)

        assert structlog.is_configured()
        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_json_events_reach_stdlib(self, caplog):
        configure_logging("INFO", "json")

        with caplog.at_level(logging.INFO):
            structlog.get_logger("graph_voronoi.test").info("pass finished", sites=2)

        assert any('"sites": 2' in record.getMessage() for record in caplog.records)
