"""Logging configuration for the worker."""
import logging
import sys
from ingest_worker.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger(name: str, level: int) -> logging.Logger:
    """
    Set up a stdout logger that does not propagate to the root logger.

    Calling it again for the same name only updates the level.
    """
    worker_logger = logging.getLogger(name)
    worker_logger.setLevel(level)

    if not worker_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        worker_logger.addHandler(handler)

    for handler in worker_logger.handlers:
        handler.setLevel(level)

    worker_logger.propagate = False
    return worker_logger


logger = configure_logger("ingest_worker", settings.resolved_log_level)

__all__ = ["logger", "configure_logger"]
