"""JSON logging for the dispatch client entry points.

The library only emits records through module loggers; configuring
handlers is left to the process running it (see ``__main__``).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

# Attributes every LogRecord carries; anything else came in via `extra=`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)


def _error_chain(exc: BaseException) -> list[str]:
    """Describe *exc* and each exception it was raised from, outermost first."""
    chain: list[str] = []
    current: BaseException | None = exc
    while current is not None and len(chain) < 10:
        chain.append(f"{type(current).__name__}: {current}")
        current = current.__cause__
    return chain


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    Dispatch failures keep the provider's own error only as the chained
    cause of a DeliveryError, so records carrying an exception also get
    an ``error_chain`` listing it.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS
        )

        if record.exc_info and record.exc_info[1]:
            entry["error_chain"] = _error_chain(record.exc_info[1])
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Send all records at *level* and above to *stream* (stdout) as JSON.

    Replaces any handlers already on the root logger. An unknown level
    name falls back to INFO.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
