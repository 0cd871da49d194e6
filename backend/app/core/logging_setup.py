"""JSON-lines logging for the hike log backend.

Every record carries `service` so hike-log lines can be picked out of a
shared stream. Context passed with `extra=` (hike_id, fields, raw_value,
...) is emitted as top-level keys.
"""
import json
import logging
from datetime import datetime, timezone
from logging.config import dictConfig

SERVICE_NAME = "hike-log"

# Corrupt photos/locationCoords cells are logged as they were read
MAX_RAW_VALUE_CHARS = 200

# Attributes every LogRecord has; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
    "taskName",
}


def _clip(value, limit: int = MAX_RAW_VALUE_CHARS):
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str) and len(value) > limit:
        return f"{value[:limit]}... ({len(value)} chars)"
    return value


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            entry[key] = _clip(value) if key == "raw_value" else value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, separators=(",", ":"))


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Route the app's loggers, and SQL statements when `sql_echo`, to stderr as JSON."""
    level_name = (level or "INFO").upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {"stderr": {"class": "logging.StreamHandler", "formatter": "json"}},
            "loggers": {
                # INFO on this logger is what SQLAlchemy's echo=True turns on
                "sqlalchemy.engine": {"level": "INFO" if sql_echo else "WARNING"},
            },
            "root": {"handlers": ["stderr"], "level": level_name},
        }
    )
