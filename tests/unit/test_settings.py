"""Tests for application settings and logging setup."""

import pytest
import structlog

from txmonitor.config import Settings
from txmonitor.shared.logging import setup_logging


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "txmonitor"
        assert settings.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert settings.max_rows == 10_000

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("TXMONITOR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TXMONITOR_MAX_ROWS", "500")
        monkeypatch.setenv("TXMONITOR_LOG_JSON", "true")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.max_rows == 500
        assert settings.log_json is True


class TestSetupLogging:
    def test_json_logs_go_to_stderr(self, capsys):
        setup_logging("INFO", json_output=True)
        structlog.get_logger().info("probe_event", answer=42)
        out, err = capsys.readouterr()
        assert out == ""
        assert '"event": "probe_event"' in err
        assert '"answer": 42' in err

    def test_level_filters(self, capsys):
        setup_logging("WARNING")
        structlog.get_logger().info("quiet_event")
        assert "quiet_event" not in capsys.readouterr().err

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
