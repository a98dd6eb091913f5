import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

LOGGER_NAME = "dragons_escape"

# Attributes every LogRecord carries; anything else came in through extra={}
STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formatter that outputs log records as JSON objects, one per line."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr_name, attr_value in record.__dict__.items():
            if attr_name not in STANDARD_RECORD_ATTRS and not attr_name.startswith("_"):
                log_data[attr_name] = attr_value

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Formatter for human-readable log files focused on gameplay."""

    def format(self, record):
        message = record.getMessage()

        if record.levelname in ["ERROR", "WARNING", "CRITICAL"]:
            return f"{record.levelname}: {message}"

        event_type = getattr(record, "event_type", None)
        turn = getattr(record, "turn", "?")

        if event_type == "session_started":
            room = getattr(record, "room", "unknown")
            return f"\n🐉 NEW SESSION starting in {room}"

        elif event_type == "room_entered":
            room = getattr(record, "room", "unknown")
            return f"Turn {turn}: entered {room}"

        elif event_type == "treasure_found":
            return f"Turn {turn}: 💎 treasure found"

        elif event_type == "movement_blocked":
            direction = getattr(record, "direction", "?")
            room = getattr(record, "room", "unknown")
            return f"Turn {turn}: blocked going {direction} from {room}"

        elif event_type == "command_rejected":
            text = getattr(record, "text", "")
            return f"Turn {turn}: rejected '{text}'"

        elif event_type == "session_ended":
            reason = getattr(record, "reason", "quit")
            return f"🏁 Session ended after {turn} turns ({reason})"

        # command_parsed and other chatty events stay out of the readable log
        return None


class FilteringStreamHandler(logging.StreamHandler):
    """Stream handler that filters out None messages from formatter."""

    def emit(self, record):
        try:
            msg = self.format(record)
            if msg is not None:
                stream = self.stream
                stream.write(msg + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class FilteringFileHandler(logging.FileHandler):
    """File handler that filters out None messages from formatter."""

    def emit(self, record):
        try:
            msg = self.format(record)
            if msg is not None:
                if self.stream is None:
                    self.stream = self._open()
                stream = self.stream
                stream.write(msg + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(
    log_file: Optional[str] = None,
    json_log_file: Optional[str] = None,
    log_level: int = logging.WARNING,
    stream=None,
):
    """
    Set up the game logger.

    Standard output is the game screen, so nothing is logged there. Warnings
    and errors go to stderr; gameplay events go to the optional files.

    Args:
        log_file: Path to the human-readable log file (optional)
        json_log_file: Path to the JSON log file (optional)
        log_level: Logging level for the file handlers (default: WARNING)
        stream: Stream for warnings and errors (default: sys.stderr)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_handler = FilteringStreamHandler(stream or sys.stderr)
    console_handler.setLevel(max(log_level, logging.WARNING))
    console_handler.setFormatter(HumanReadableFormatter())
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = FilteringFileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(HumanReadableFormatter())
        logger.addHandler(file_handler)

    if json_log_file:
        Path(json_log_file).parent.mkdir(parents=True, exist_ok=True)
        json_handler = logging.FileHandler(json_log_file, mode="a", encoding="utf-8")
        json_handler.setLevel(log_level)
        json_handler.setFormatter(JSONFormatter())
        json_handler.is_json_handler = True  # Mark for identification
        logger.addHandler(json_handler)

    return logger


def get_logger() -> logging.Logger:
    """Return the game logger, silenced if setup_logging() was never called."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def parse_json_logs(json_log_file: str) -> List[Dict[str, Any]]:
    """Parse a JSON log file into a list of log entries."""
    logs = []
    with open(json_log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                logs.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                continue
    return logs
