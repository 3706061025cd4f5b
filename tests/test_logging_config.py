import logging

import pytest

from measureconverter.logging_config import setup_logging


def test_setup_logging_by_name(tmp_path):
    log_file = tmp_path / "app.log"
    logger = setup_logging("debug", log_file=str(log_file), capture_qt=False)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("measureconverter.model.catalog").debug("catalog message")
    for handler in logger.handlers:
        handler.flush()
    assert "catalog message" in log_file.read_text(encoding="utf-8")


def test_setup_logging_twice_does_not_duplicate_handlers():
    setup_logging(logging.INFO, capture_qt=False)
    logger = setup_logging(logging.WARNING, capture_qt=False)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty", capture_qt=False)
