"""
ABOUTME: Tests for the logging setup and formatters
ABOUTME: JSON lines carry structured extras; the readable log shows gameplay events only
"""

import io
import json
import logging

import pytest

from logger import (
    LOGGER_NAME,
    HumanReadableFormatter,
    JSONFormatter,
    get_logger,
    parse_json_logs,
    setup_logging,
)


def make_record(message="hello", level=logging.INFO, **extra):
    record = logging.LogRecord(LOGGER_NAME, level, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def reset_game_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


class TestJSONFormatter:
    def test_includes_extras(self):
        line = JSONFormatter().format(
            make_record("Entered Hallway", event_type="room_entered", room="Hallway", turn=1)
        )
        data = json.loads(line)

        assert data["message"] == "Entered Hallway"
        assert data["level"] == "INFO"
        assert data["event_type"] == "room_entered"
        assert data["room"] == "Hallway"
        assert data["turn"] == 1
        assert "lineno" not in data
        assert "timestamp" in data

    def test_unserializable_extra_is_stringified(self):
        data = json.loads(JSONFormatter().format(make_record(value=object())))

        assert data["value"].startswith("<object object")


class TestHumanReadableFormatter:
    @pytest.mark.parametrize(
        "extra,expected",
        [
            ({"event_type": "room_entered", "room": "Hallway", "turn": 2}, "Turn 2: entered Hallway"),
            ({"event_type": "treasure_found", "turn": 3}, "Turn 3: 💎 treasure found"),
            ({"event_type": "command_rejected", "text": "dance", "turn": 1}, "Turn 1: rejected 'dance'"),
            (
                {"event_type": "movement_blocked", "direction": "south", "room": "Throne Room", "turn": 4},
                "Turn 4: blocked going south from Throne Room",
            ),
            (
                {"event_type": "session_ended", "reason": "quit", "turn": 5},
                "🏁 Session ended after 5 turns (quit)",
            ),
        ],
    )
    def test_gameplay_events(self, extra, expected):
        assert HumanReadableFormatter().format(make_record(**extra)) == expected

    def test_chatty_events_hidden(self):
        record = make_record(event_type="command_parsed", level=logging.DEBUG)

        assert HumanReadableFormatter().format(record) is None

    def test_warnings_always_shown(self):
        record = make_record("disk full", level=logging.WARNING)

        assert HumanReadableFormatter().format(record) == "WARNING: disk full"


class TestSetupLogging:
    def test_writes_both_files(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        json_log_file = tmp_path / "logs" / "game.jsonl"

        logger = setup_logging(str(log_file), str(json_log_file), log_level=logging.DEBUG, stream=io.StringIO())
        logger.info("Entered Hallway", extra={"event_type": "room_entered", "room": "Hallway", "turn": 1})
        logger.debug("Command: Look()", extra={"event_type": "command_parsed", "turn": 2})
        for handler in logger.handlers:
            handler.flush()

        entries = parse_json_logs(str(json_log_file))
        assert [entry["event_type"] for entry in entries] == ["room_entered", "command_parsed"]
        assert log_file.read_text(encoding="utf-8").strip() == "Turn 1: entered Hallway"

    def test_info_never_reaches_console(self):
        stream = io.StringIO()
        logger = setup_logging(log_level=logging.DEBUG, stream=stream)

        logger.info("Entered Hallway", extra={"event_type": "room_entered", "room": "Hallway"})
        logger.warning("Something odd")

        assert stream.getvalue() == "WARNING: Something odd\n"

    def test_setup_replaces_previous_handlers(self):
        setup_logging(stream=io.StringIO())
        logger = setup_logging(stream=io.StringIO())

        assert len(logger.handlers) == 1

    def test_get_logger_before_setup_is_silent(self):
        logger = get_logger()

        assert logger.name == LOGGER_NAME
        assert logger.handlers


class TestParseJsonLogs:
    def test_skips_malformed_lines(self, tmp_path):
        json_log_file = tmp_path / "game.jsonl"
        json_log_file.write_text('{"event_type": "session_started"}\nnot json\n{"a": 1}\n', encoding="utf-8")

        assert parse_json_logs(str(json_log_file)) == [{"event_type": "session_started"}, {"a": 1}]
