# workflow_validator/utils/logger.py
from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from workflow_validator.utils.config import get_settings, LogLevel


__all__ = [
    "get_logger",
    "set_log_level",
    "RUN_ID",
]


_config_lock = threading.Lock()
_configured = False

# One validation pass per process; every file log line carries this id
RUN_ID = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line for the CI log artifact.
    Records logged with extra={"workflow": ...} keep that path as a field.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "run_id": RUN_ID,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        workflow = getattr(record, "workflow", None)
        if workflow is not None:
            payload["workflow"] = str(workflow)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


def _ensure_configured() -> None:
    """
    Configure root logging once from settings: rich console on stderr,
    plus the JSON file when LOG_TO_FILE is set.
    """
    global _configured
    if _configured:
        return

    with _config_lock:
        if _configured:
            return

        settings = get_settings()
        level = _LEVEL_MAP.get(settings.LOG_LEVEL, logging.INFO)

        root = logging.getLogger()
        root.setLevel(level)
        for h in list(root.handlers):
            root.removeHandler(h)

        # stdout belongs to the report
        console = Console(stderr=True, color_system="auto")
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=settings.COLORIZED_OUTPUT,
        )
        rich_handler.setFormatter(logging.Formatter("%(message)s"))
        rich_handler.setLevel(level)
        root.addHandler(rich_handler)

        if settings.LOG_TO_FILE:
            settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=str(settings.LOG_FILE),
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)

        logging.getLogger("asyncio").setLevel(max(level, logging.WARNING))

        _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    _ensure_configured()
    return logging.getLogger(name if name else "workflow-validator")


def set_log_level(level: LogLevel | str) -> None:
    """Adjust the root level and every handler at runtime (CLI --log-level)."""
    _ensure_configured()
    lvl = level if isinstance(level, str) else level.value
    py_level = getattr(logging, lvl.upper(), logging.INFO)
    logging.getLogger().setLevel(py_level)
    for h in logging.getLogger().handlers:
        h.setLevel(py_level)
