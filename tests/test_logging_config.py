import logging

import pytest

from codewheel.logging_config import (
    CONSOLE_HANDLER,
    LOGGER_NAME,
    level_for,
    setup_logging,
)


@pytest.fixture(autouse=True)
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def _named(logger, name):
    return [h for h in logger.handlers if h.get_name() == name]


@pytest.mark.parametrize("verbose, debug, expected", [
    (False, False, logging.WARNING),
    (False, True, logging.INFO),
    (True, False, logging.DEBUG),
    (True, True, logging.DEBUG),
])
def test_level_for(verbose, debug, expected):
    assert level_for(verbose, debug) == expected


def test_returns_package_logger(package_logger):
    logger = setup_logging(logging.INFO)
    assert logger is package_logger
    assert logger.level == logging.INFO


def test_repeated_setup_keeps_one_console_handler(package_logger):
    setup_logging()
    setup_logging(logging.DEBUG)
    assert len(_named(package_logger, CONSOLE_HANDLER)) == 1


def test_foreign_handlers_survive(package_logger):
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging()
    setup_logging()
    assert foreign in package_logger.handlers


def test_console_writes_to_stderr(capsys):
    setup_logging(logging.INFO)
    logging.getLogger("codewheel.viewport").info("scaled to fit")
    captured = capsys.readouterr()
    assert "scaled to fit" in captured.err
    assert "scaled to fit" not in captured.out


def test_log_file(tmp_path):
    path = tmp_path / "wheel.log"
    setup_logging(logging.DEBUG, str(path))
    logging.getLogger("codewheel.drag").debug("drag started")
    text = path.read_text(encoding="utf-8")
    assert "codewheel.drag - DEBUG - drag started" in text


def test_level_filters_messages(capsys):
    setup_logging(logging.WARNING)
    logging.getLogger("codewheel.drag").debug("hidden")
    assert "hidden" not in capsys.readouterr().err
