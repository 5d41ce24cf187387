"""
Leveled logging configuration.

Call ``setup_logging()`` once at startup. Output goes to stdout either as
JSON (python-json-logger) or as plain text, selected by ``LOG_FORMAT``.

Besides the standard levels a ``SUCCESS`` level (between INFO and WARNING)
is registered for "operation completed" messages.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

from common_utils.config import LOG_FORMATS, LOG_LEVELS, env, is_production
from common_utils.parsers import parse_as_enum

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def success(logger: logging.Logger, msg: str, *args, **kwargs) -> None:
    """Log *msg* at the SUCCESS level."""
    if logger.isEnabledFor(SUCCESS):
        logger.log(SUCCESS, msg, *args, **kwargs)


def setup_logging(service_name: str = "service", level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger.

    *level* and *fmt* default to ``LOG_LEVEL`` / ``LOG_FORMAT``. An invalid
    value raises :class:`~common_utils.errors.ParseError`. When ``APP_ENV``
    is a production value, DEBUG is raised to INFO.
    """
    level = parse_as_enum((level or env("LOG_LEVEL", "INFO")).upper(), LOG_LEVELS)
    fmt = parse_as_enum((fmt or env("LOG_FORMAT", "json")).lower(), LOG_FORMATS)

    if level == "DEBUG" and is_production():
        level = "INFO"

    root = logging.getLogger()
    root.setLevel(logging.getLevelName(level))

    handler = logging.StreamHandler(sys.stdout)

    if fmt == "json":
        formatter = jsonlogger.JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    handler.setFormatter(formatter)

    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger(service_name).info("Logging initialised", extra={"service": service_name})
