# app/utils/logger.py
"""
Centralised logging configuration for the entire application.
Everything goes to the console and to LOG_DIR/vehicles.log.
Record store failures (ERROR and above) also go to
LOG_DIR/store_errors.log, tracebacks included.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
LOG_DIR = settings.LOG_DIR
APP_LOG_FILE = "vehicles.log"
STORE_ERROR_LOG_FILE = "store_errors.log"
STORE_LOGGER_NAME = "app.services.vehicle_store"
os.makedirs(LOG_DIR, exist_ok=True)

_configured = False

_formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _rotating_file(filename: str, level) -> RotatingFileHandler:
    # keeps last 10 × 5MB files
    handler = RotatingFileHandler(
        filename=os.path.join(LOG_DIR, filename),
        maxBytes=5 * 1024 * 1024,
        backupCount=10,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(_formatter)
    return handler


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    console = logging.StreamHandler()
    console.setLevel(LOG_LEVEL)
    console.setFormatter(_formatter)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(console)
    root.addHandler(_rotating_file(APP_LOG_FILE, LOG_LEVEL))

    # Store failures still propagate to the root handlers as well
    logging.getLogger(STORE_LOGGER_NAME).addHandler(_rotating_file(STORE_ERROR_LOG_FILE, logging.ERROR))


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
