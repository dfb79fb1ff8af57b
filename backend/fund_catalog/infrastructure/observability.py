"""Logging Setup: one root handler, JSON lines or plain text.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Catalog extras (fund_name, data_file, ...) appear only when a call site set them
    - setup_logging is idempotent: a second call swaps the handler, never stacks one

Design Decisions:
    - stdlib logging with a small formatter pair, no logging dependency
    - Text format still shows the fund name, since most lines are about one fund
"""

import json
import logging
from datetime import datetime, timezone

CATALOG_EXTRAS = (
    "fund_name", "error_code", "path", "data_file", "operation", "count",
)

_HANDLER_NAME = "fund_catalog"


def _extras(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def __init__(self, extra_keys: tuple[str, ...] = CATALOG_EXTRAS):
        super().__init__()
        self.extra_keys = extra_keys

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record, self.extra_keys),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with the fund name appended when known."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fund_name = record.__dict__.get("fund_name")
        return f"{line} [fund={fund_name}]" if fund_name else line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the catalog handler on the root logger, replacing an earlier one."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
