import logging
import sys
from typing import Any, Iterator, Tuple

# Extras written after level/logger/event, in this order.
LOG_EXTRA_FIELDS = (
    "tool",
    "method",
    "endpoint",
    "status",
    "duration_ms",
    "error_type",
    "error",
)

_NEEDS_QUOTES = (" ", "=", '"')


def _logfmt_value(val: Any) -> str:
    text = str(val)
    if isinstance(val, (int, float)) or not any(ch in text for ch in _NEEDS_QUOTES):
        return text
    return '"' + text.replace('"', '\\"') + '"'


class LogfmtFormatter(logging.Formatter):
    """One logfmt line per record: level, logger, event, then the API call extras."""

    def _pairs(self, record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
        yield "level", record.levelname.lower()
        yield "logger", record.name
        event = record.getMessage()
        if event:
            yield "event", event
        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                yield key, val
        if record.exc_info and record.exc_info[0] is not None:
            yield "exc_type", record.exc_info[0].__name__

    def format(self, record: logging.LogRecord) -> str:
        return " ".join(f"{key}={_logfmt_value(val)}" for key, val in self._pairs(record))


def setup_logging(level: str = "INFO") -> None:
    """Send logfmt lines to stderr; stdout is reserved for the MCP stdio stream."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LogfmtFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
