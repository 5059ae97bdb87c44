"""Structured JSON logging.

Catalog refreshes, store round trips and failed actions are logged as
single-line JSON so a session can be replayed from the log file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Merge extra structured data
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
            entry["error_type"] = type(record.exc_info[1]).__name__
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure logging for the ``workshop`` logger tree.

    Args:
        log_dir: Directory for ``workshop.jsonl``. If None, logs to stderr only.
        level: Logging level for the file handler.

    Returns:
        The root 'workshop' logger.
    """
    logger = logging.getLogger("workshop")
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = JSONFormatter()

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "workshop.jsonl", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    # Stderr handler (only warnings+)
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    sh.setLevel(logging.WARNING)
    logger.addHandler(sh)

    return logger
