# logger.py
import logging
from logging.handlers import RotatingFileHandler
import os
import sys

from config import config

FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def build_logger(name: str, log_dir: str, level: str = "INFO") -> logging.Logger:
    """Return a logger writing to a rotating file under log_dir and to stdout."""
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    built = logging.getLogger(name)
    built.setLevel(level.upper())

    # Re-imports must not stack handlers
    if built.handlers:
        return built

    formatter = logging.Formatter(FORMAT)

    # 1MB per file, up to 5 backups
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"), maxBytes=1_000_000, backupCount=5
    )
    file_handler.setFormatter(formatter)
    built.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    built.addHandler(stream_handler)

    built.propagate = False
    return built


logger = build_logger("ProbeLogger", config.LOG_DIR, config.LOG_LEVEL)
