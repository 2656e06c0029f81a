# Area: Logging Tests
"""Tests for logging setup and advisory error logging."""

import json
import logging

import pytest

from mind_reader._shared import (
    disable_quiet_mode,
    enable_quiet_mode,
    is_quiet_mode_enabled,
    log_advisory_error,
    setup_logging,
)
from mind_reader._shared.logging_formatters import QuietFilter
from mind_reader.errors import AdvisoryTimeoutError


@pytest.fixture
def restore_package_logger():
    pkg_logger = logging.getLogger("mind_reader")
    level = pkg_logger.level
    yield pkg_logger
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(level)
    pkg_logger.propagate = True
    disable_quiet_mode()


class TestSetupLogging:

    def test_writes_json_lines_to_file(self, tmp_path, restore_package_logger):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(log_file_path=str(log_file))

        logging.getLogger("mind_reader.session").info("Status: PLAYING → WON")
        for handler in restore_package_logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["level"] == "INFO"
        assert entry["logger"] == "mind_reader.session"
        assert entry["message"] == "Status: PLAYING → WON"

    def test_replaces_existing_handlers(self, tmp_path, restore_package_logger):
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=str(tmp_path / "b.log"))
        assert len(restore_package_logger.handlers) == 2
        assert restore_package_logger.propagate is False


class TestQuietMode:

    def test_filter_follows_flag(self):
        record = logging.makeLogRecord({"msg": "hello"})
        quiet = QuietFilter()
        try:
            enable_quiet_mode()
            assert is_quiet_mode_enabled()
            assert not quiet.filter(record)
        finally:
            disable_quiet_mode()
        assert quiet.filter(record)


class TestLogAdvisoryError:

    def test_warning_summary_and_debug_block(self, caplog):
        error = AdvisoryTimeoutError({"guess": 1, "target": 2, "hint": "UP", "history": [1]}, 5)
        with caplog.at_level(logging.DEBUG, logger="mind_reader"):
            log_advisory_error(error)

        levels = {r.levelno for r in caplog.records if r.name == "mind_reader.advisory"}
        assert levels == {logging.WARNING, logging.DEBUG}
        warning = next(r for r in caplog.records if r.levelno == logging.WARNING)
        assert warning.error_type == "AdvisoryTimeoutError"
        assert any("ADVISORY_TIMEOUT" in r.getMessage() for r in caplog.records)
