import logging
import sys

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str = None) -> None:
    """Send log records to stdout at ``level`` (RECIPES_LOG_LEVEL by default).

    A handler is only added when the root logger has none, so uvicorn's or
    pytest's logging setup is left alone.
    """
    global _configured
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(level or config.LOG_LEVEL)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        setup_logging()
    return logging.getLogger(name)
