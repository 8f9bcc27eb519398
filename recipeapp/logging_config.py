"""
Logging setup for the Recipe App server.

The app and uvicorn share one console format, and LOG_LEVEL applies to both.
uvicorn access lines for health checks are dropped so polling does not flood
the log.
"""

import logging
import logging.config
from typing import Any, Dict, Iterable

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
QUIET_PATHS = ("/health",)


class HealthCheckAccessFilter(logging.Filter):
    """Drop uvicorn access records for ``GET`` requests to quiet paths."""

    def __init__(self, paths: Iterable[str] = QUIET_PATHS):
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn.access args: (client, method, path, http_version, status)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        method, path = args[1], str(args[2])
        return not (method == "GET" and path.split("?", 1)[0] in self.paths)


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """dictConfig for the app, its module loggers and uvicorn."""
    level = level.upper()
    console = {
        "class": "logging.StreamHandler",
        "formatter": "console",
        "stream": "ext://sys.stdout",
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"health_check": {"()": HealthCheckAccessFilter}},
        "formatters": {"console": {"format": LOG_FORMAT}},
        "handlers": {
            "console": console,
            "access": {**console, "filters": ["health_check"]},
        },
        "loggers": {
            # recipeapp.* loggers propagate to root
            "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
        },
        "root": {"handlers": ["console"], "level": level},
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration to the running process."""
    logging.config.dictConfig(get_logging_config(level))
