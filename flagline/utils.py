# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py
Logging helpers for the `flagline` logger.

Flagline never touches the root logger. `setup_logging` installs its own console
handler (Rich or JSON) and an optional log file on the `flagline` logger, and
`enable_debug_logging` is what `FlagParser(debug=True)` uses to make the engine's
per-token DEBUG records visible.
"""
from __future__ import annotations

import logging

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagline.logger import logger

CONSOLE_HANDLER_NAME = "flagline.console"
FILE_HANDLER_NAME = "flagline.file"
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def _build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    handler.set_name(CONSOLE_HANDLER_NAME)
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Configure the `flagline` logger with CLI-friendly or structured JSON output.

    Any handlers previously attached to the `flagline` logger are closed and
    replaced. Records stop propagating to the root logger so an application's
    own logging setup does not print them twice.

    Args:
        mode (str | None):
            Console output mode. Can be:
                - "cli": Rich console logs (default outside containers)
                - "json": JSON lines on stderr (default inside containers)
        log_filename (str | None):
            Path of a log file. No file handler is installed when omitted.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Returns:
        logging.Logger: The configured `flagline` logger.

    Raises:
        ValueError: If an invalid logging `mode` is passed. The logger is left
            unchanged.
    """
    if not mode:
        mode = "json" if running_in_container() else "cli"
    console_handler = _build_console_handler(mode)
    console_handler.setLevel(console_log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger


def enable_debug_logging() -> logging.Logger:
    """
    Show the engine's DEBUG records on the console.

    Installs the default console handler when the `flagline` logger has none,
    otherwise lowers the level of the existing Flagline console handler.
    """
    if not logger.handlers:
        return setup_logging(console_log_level=logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(logging.DEBUG)
    return logger
