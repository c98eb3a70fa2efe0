# tests/test_log_config.py
import logging

import pytest

from dcsim_core.log_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_installs_single_handler(restore_root_logger):
    setup_logging(logging.DEBUG)
    setup_logging(logging.WARNING)
    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert "[%(name)s]" in root.handlers[0].formatter._fmt
