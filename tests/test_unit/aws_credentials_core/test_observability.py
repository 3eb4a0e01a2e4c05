"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from aws_credentials_core.observability import configure_logging


class TestConfigureLogging:
    """Test configure_logging output and level filtering."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="INFO")

        structlog.get_logger("test").info("SOMETHING_HAPPENED", count=3)

        line = capsys.readouterr().err.strip()
        record = json.loads(line)
        assert record["event"] == "SOMETHING_HAPPENED"
        assert record["count"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="WARNING")
        logger = structlog.get_logger("test")

        logger.info("DROPPED")
        logger.warning("KEPT")

        err = capsys.readouterr().err
        assert "DROPPED" not in err
        assert "KEPT" in err

    def test_unknown_level_defaults_to_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(log_level="chatty")
        logger = structlog.get_logger("test")

        logger.debug("DROPPED")
        logger.info("KEPT")

        err = capsys.readouterr().err
        assert "DROPPED" not in err
        assert "KEPT" in err

    def test_dev_mode_is_not_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="DEBUG", dev_mode=True)

        structlog.get_logger("test").debug("DEV_EVENT", key="value")

        err = capsys.readouterr().err
        assert "DEV_EVENT" in err
        assert "key" in err
        with pytest.raises(json.JSONDecodeError):
            json.loads(err.strip())
