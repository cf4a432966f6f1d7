# Area: Shared Tests
"""Tests for logging configuration."""

import json
import logging

import pytest

from photo_contest._shared.logging_config import (
    JSONFormatter,
    StatusModeFilter,
    TerminalFormatter,
    setup_logging,
    enable_status_mode,
    disable_status_mode,
    is_status_mode_enabled,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    disable_status_mode()
    pkg_logger = logging.getLogger("photo_contest")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True


def make_record(msg="hello", level=logging.INFO):
    return logging.LogRecord("photo_contest.test", level, __file__, 1, msg, None, None)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_terminal_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "contest.log"
        setup_logging(log_file_path=str(log_file), level=logging.DEBUG)
        pkg_logger = logging.getLogger("photo_contest")
        assert pkg_logger.level == logging.DEBUG
        assert len(pkg_logger.handlers) == 2
        assert pkg_logger.propagate is False
        assert log_file.parent.exists()

    def test_file_gets_json_lines(self, tmp_path):
        """Test that records written to the file are JSON objects."""
        log_file = tmp_path / "contest.log"
        setup_logging(log_file_path=str(log_file))
        logging.getLogger("photo_contest.contest").info("Phase APPLICATION -> REVIEW")
        for handler in logging.getLogger("photo_contest").handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        data = json.loads(line)
        assert data["message"] == "Phase APPLICATION -> REVIEW"
        assert data["logger"] == "photo_contest.contest"
        assert data["level"] == "INFO"

    def test_no_file_handler_when_path_is_none(self):
        setup_logging(log_file_path=None)
        assert len(logging.getLogger("photo_contest").handlers) == 1

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=str(tmp_path / "b.log"))
        assert len(logging.getLogger("photo_contest").handlers) == 2


class TestFormatters:
    """Tests for terminal and JSON formatters."""

    def test_terminal_formatter_colors_level(self):
        formatted = TerminalFormatter(fmt="%(levelname)s %(message)s").format(make_record())
        assert "\033[32m" in formatted
        assert "hello" in formatted

    def test_terminal_formatter_leaves_record_untouched(self):
        record = make_record()
        TerminalFormatter(fmt="%(levelname)s").format(record)
        assert record.levelname == "INFO"

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(make_record("x")))
        assert set(data) == {"timestamp", "level", "logger", "message"}


class TestStatusMode:
    """Tests for status mode toggling."""

    def test_toggle(self):
        assert is_status_mode_enabled() is False
        enable_status_mode()
        assert is_status_mode_enabled() is True
        disable_status_mode()
        assert is_status_mode_enabled() is False

    def test_filter_blocks_in_status_mode(self):
        log_filter = StatusModeFilter()
        assert log_filter.filter(make_record()) is True
        enable_status_mode()
        assert log_filter.filter(make_record()) is False
