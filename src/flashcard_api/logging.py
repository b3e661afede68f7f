"""Structured JSON logging for the flashcard API.

Every module calls ``setup_logging()`` at import time to get the root
logger. The handler is installed once per process; later calls return the
already configured logger.
"""

import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "flashcard-api"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# Vendor SDKs log every HTTP round trip at INFO.
_VENDOR_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore", "google")

_handler: logging.Handler | None = None


def setup_logging() -> logging.Logger:
    """
    Configures JSON logging on the root and Uvicorn loggers.

    Records carry ``timestamp``, ``level``, ``logger`` and ``service`` fields
    plus any ``extra`` passed by the caller. ``trace_id`` and ``span_id`` are
    filled in by ddtrace log injection and are null when tracing is off. The
    level comes from the ``LOG_LEVEL`` environment variable (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None and _handler in root_logger.handlers:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = JsonFormatter(
        LOG_FORMAT,
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": SERVICE_NAME},
    )
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    for logger_name in _VENDOR_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
