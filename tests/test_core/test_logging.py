"""Tests for logging setup."""

import json
import logging
from pathlib import Path

from droidship.core.logging import format_timestamp_ms, setup_logging


def test_setup_logging_level():
    setup_logging(log_level_name="debug")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


def test_unknown_level_falls_back_to_info():
    setup_logging(log_level_name="chatty")

    assert logging.getLogger().level == logging.INFO


def test_noisy_loggers_quieted():
    setup_logging(log_level_name="DEBUG")

    assert logging.getLogger("urllib3").level == logging.WARNING


def test_log_file_receives_json(tmp_path: Path):
    log_file = tmp_path / "logs" / "droidship.log"
    setup_logging(log_level_name="INFO", log_file=str(log_file))

    logging.getLogger("droidship.test").info("Located %s", "app-release.aab")
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["event"] == "Located app-release.aab"
    assert record["level"] == "info"


def test_format_timestamp_ms():
    event = {"timestamp_raw": "12:00:00.123456"}

    assert format_timestamp_ms(None, "info", event) == {"timestamp": "12:00:00.123"}
