from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from romancalc.core.context import current_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_correlation_id() or "-"
        return True


def _build_logging_config(level: str) -> Dict[str, Any]:
    def _logger(name_level: str) -> Dict[str, Any]:
        return {"handlers": ["default"], "level": name_level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "correlation_id": {
                "()": CorrelationIdFilter,
            }
        },
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "fmt": LOG_FORMAT,
                "datefmt": LOG_DATEFMT,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json",
                "filters": ["correlation_id"],
            }
        },
        "loggers": {
            "uvicorn": _logger(level),
            "uvicorn.error": _logger(level),
            "uvicorn.access": _logger(level),
            "romancalc": _logger(level),
        },
        "root": {"handlers": ["default"], "level": level},
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(_build_logging_config(level.upper()))
