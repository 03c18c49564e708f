"""
# path: powerplant/app_logging.py

JSON logging for powerplant.

Usage:
    log = get_logger("service.battery")
    log.info({"event": "battery_create", "postcode": "6107"})

A dict message becomes the body of the JSON line; a plain string goes under
"message". The module is not named logging.py so it never shadows the stdlib
module that uvicorn imports on startup.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging import LoggerAdapter
from typing import Any, Dict

_DEFAULT_LEVEL = "INFO"


def _level_from_env() -> int:
    name = os.getenv("LOG_LEVEL", _DEFAULT_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


class JsonFormatter(logging.Formatter):
    """time, level, logger, func + the event dict (or "message")."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "func": record.funcName,
        }
        # events are logged as dicts and merged as is
        if isinstance(record.msg, dict):
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> LoggerAdapter:
    """
    LoggerAdapter over a stdout JSON handler.

    The handler is installed once per logger name; the level comes from
    LOG_LEVEL.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(_level_from_env())
    return LoggerAdapter(logger, extra={})
