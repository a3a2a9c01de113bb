"""JSON-lines logging shared by the importer and the HTTP API.

Decoder, import and server events attach their context through ``extra=``
(``source_format``, ``count``, ``path``, ``applied`` and so on); the
formatter copies every such field into the emitted object so a log file can
be filtered by import run or source format.
"""
from __future__ import annotations

import json
import logging
from logging import LogRecord
from pathlib import Path
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render one record per line with its ``extra`` fields inlined."""

    def format(self, record: LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED and key not in payload:
                payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(log_path: str | Path | None = None, level: str = "INFO") -> None:
    """Route root logging to ``log_path`` (or stderr) as JSON lines.

    ``log_path`` usually comes from ``Settings.log_path`` (``HR_LOG_PATH``);
    missing parent directories are created.
    """
    handler: logging.Handler
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler])


__all__ = ["configure_logging", "JsonFormatter"]
