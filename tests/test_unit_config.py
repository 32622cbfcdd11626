import logging

import pytest

from vehicle_rental.config import setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's level and handlers after setup_logging()."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_setup_logging_accepts_lowercase(root_logger):
    setup_logging("debug")
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_warning(root_logger):
    setup_logging("verbose")
    assert root_logger.level == logging.WARNING
