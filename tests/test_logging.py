import logging

import pytest

from simscope.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_simscope_logger():
    logger = logging.getLogger("simscope")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_module_loggers_live_under_namespace():
    assert get_logger("simscope.gui.monitor").name == "simscope.gui.monitor"
    assert get_logger("tests.helper").name == "simscope.tests.helper"
    assert get_logger("simscopex").name == "simscope.simscopex"


def test_quiet_level_writes_no_file(tmp_path):
    log_file = tmp_path / "debug.log"
    logger = setup_logging("WARNING", log_file=str(log_file))

    assert not log_file.exists()
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]


def test_debug_level_writes_file(tmp_path):
    log_file = tmp_path / "debug.log"
    logger = setup_logging("debug", log_file=str(log_file))

    get_logger("simscope.core").debug("hello from core")
    for handler in logger.handlers:
        handler.flush()

    assert "hello from core" in log_file.read_text()
    for handler in logger.handlers:
        handler.close()


def test_unknown_level_falls_back_to_warning():
    logger = setup_logging("CHATTY", log_file=None)
    assert logger.level == logging.WARNING
