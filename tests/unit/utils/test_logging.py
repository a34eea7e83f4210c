"""Test structured logging setup."""
import json

import pytest

from digit_group.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("numbers_grouped", count=3)
        record = json.loads(capsys.readouterr().err)
        assert record["event"] == "numbers_grouped"
        assert record["count"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")
        get_logger("test").info("dropped")
        assert capsys.readouterr().err == ""

    def test_lowercase_level(self, capsys):
        setup_logging("debug")
        get_logger("test").debug("kept")
        assert "kept" in capsys.readouterr().err

    def test_console_output(self, capsys):
        setup_logging("INFO", json=False)
        get_logger("test").info("readable_event")
        assert "readable_event" in capsys.readouterr().err

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("VERBOSE")
