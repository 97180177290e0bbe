import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from flagline.logger import logger
from flagline.parser import FlagParser
from flagline.utils import (
    CONSOLE_HANDLER_NAME,
    enable_debug_logging,
    running_in_container,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_flagline_logger():
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_setup_logging_cli_mode():
    root_handlers = logging.getLogger().handlers[:]

    setup_logging(mode="cli")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].level == logging.WARNING
    assert logger.propagate is False
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_json_mode_with_file(tmp_path):
    setup_logging(
        mode="json", log_filename=str(tmp_path / "flagline.log"), json_log_to_file=True
    )

    assert len(logger.handlers) == 2
    assert all(
        isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)
        for handler in logger.handlers
    )


def test_setup_logging_replaces_previous_handlers(tmp_path):
    setup_logging(mode="cli", log_filename=str(tmp_path / "first.log"))
    setup_logging(mode="cli")

    assert [handler.get_name() for handler in logger.handlers] == [CONSOLE_HANDLER_NAME]


def test_parse_records_reach_log_file(tmp_path):
    log_file = tmp_path / "flagline.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    parser = FlagParser()
    parser.register("--depth", "arg_required")

    parser.parse(["--depth82"])
    for handler in logger.handlers:
        handler.flush()

    contents = log_file.read_text(encoding="UTF-8")
    assert "Logging initialized in 'cli' mode." in contents
    assert "Registered flag '--depth' as arg_required" in contents
    assert "Flag '--depth' received value '82'" in contents


def test_setup_logging_invalid_mode_keeps_handlers():
    setup_logging(mode="cli")
    handlers = logger.handlers[:]

    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")

    assert logger.handlers == handlers


def test_enable_debug_logging_installs_console_handler():
    enable_debug_logging()

    assert [handler.get_name() for handler in logger.handlers] == [CONSOLE_HANDLER_NAME]
    assert logger.handlers[0].level == logging.DEBUG


def test_enable_debug_logging_lowers_existing_console_level(tmp_path):
    setup_logging(mode="json", log_filename=str(tmp_path / "flagline.log"))

    enable_debug_logging()

    levels = {handler.get_name(): handler.level for handler in logger.handlers}
    assert levels[CONSOLE_HANDLER_NAME] == logging.DEBUG


def test_debug_parser_enables_debug_logging():
    FlagParser(debug=True)

    assert logger.isEnabledFor(logging.DEBUG)
    assert logger.handlers[0].level == logging.DEBUG


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)
