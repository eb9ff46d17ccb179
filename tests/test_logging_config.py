import logging

import pytest

from gboard_dictionary.utils.logging_config import get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("gboard_dictionary")
    saved = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], logger.level = saved[0], saved[1]


def test_get_logger_namespace():
    assert get_logger("data.text").name == "gboard_dictionary.data.text"


def test_setup_installs_handlers_once(package_logger, tmp_path):
    setup_logging(logging.INFO, log_dir=tmp_path)
    setup_logging(logging.DEBUG, log_dir=tmp_path)
    assert len(package_logger.handlers) == 2
    assert package_logger.level == logging.DEBUG
    assert (tmp_path / "gboard_dictionary.log").exists()


def test_console_only(package_logger, tmp_path):
    setup_logging(logging.WARNING, log_dir=tmp_path, log_to_file=False)
    assert len(package_logger.handlers) == 1
    assert package_logger.handlers[0].level == logging.WARNING
    assert not any(tmp_path.iterdir())
