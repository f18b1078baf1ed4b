# flake8: noqa
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import logging

from src.logger import get_logger, setup_logging


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    existing = logging.NullHandler()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = [existing]
    try:
        setup_logging("DEBUG")
        assert root.handlers == [existing]
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_get_logger_is_named():
    assert get_logger("src.crud").name == "src.crud"
