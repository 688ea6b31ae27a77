# tests/test_logging.py

import json
import logging

from civiltime import CivilDay
from civiltime.core.log import configure_logging, get_logger


def test_library_is_silent_by_default(capfd):
    configure_logging()
    get_logger("civiltime.test").debug("hidden_event")
    get_logger("civiltime.test").info("hidden_info")
    out, err = capfd.readouterr()
    assert out == ""
    assert "hidden" not in err


def test_json_lines_on_stderr(capfd):
    configure_logging(level=logging.DEBUG, log_json=True)
    get_logger("civiltime.test").info("sample_event", value=7)
    out, err = capfd.readouterr()
    assert out == ""
    record = json.loads(err.strip().splitlines()[-1])
    assert record["event"] == "sample_event"
    assert record["value"] == 7
    assert record["level"] == "info"
    assert record["logger"] == "civiltime.test"
    assert "timestamp" in record


def test_console_renderer(capfd):
    configure_logging(level=logging.INFO)
    get_logger("civiltime.test").info("console_event", n=3)
    _, err = capfd.readouterr()
    assert "console_event" in err
    assert "n=3" in err


def test_level_applies_to_civiltime_loggers_only(capfd):
    configure_logging(level=logging.DEBUG, log_json=True)
    get_logger("elsewhere").info("foreign_info")
    get_logger("civiltime.test").debug("own_debug")
    _, err = capfd.readouterr()
    assert "foreign_info" not in err
    assert "own_debug" in err


def test_range_check_logs_at_debug(capfd, strict):
    configure_logging(level=logging.DEBUG, log_json=True)
    try:
        CivilDay.MAX + 1
    except OverflowError:
        pass
    _, err = capfd.readouterr()
    record = json.loads(err.strip().splitlines()[-1])
    assert record["event"] == "range_exceeded"
    assert record["what"] == "year"
