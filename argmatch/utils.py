# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argmatch.logger import logger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> list[logging.Handler]:
    """
    Route records from the "argmatch" logger to the console and, optionally, a file.

    Handlers are attached to the "argmatch" logger only. The root logger and any
    handlers the application installed are left alone. Calling this again
    replaces the handlers installed by the previous call.

    Args:
        mode (str | None):
            Console output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARGMATCH_LOG_MODE` environment
            variable or fallback based on container detection.
        log_filename (str | None):
            Path to a log file. File logging is skipped when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Returns:
        list[logging.Handler]: The handlers that were installed.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGMATCH_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    installed = [console_handler]

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        installed.append(file_handler)

    for handler in list(logger.handlers):
        if getattr(handler, "_argmatch_installed", False):
            logger.removeHandler(handler)
            handler.close()

    for handler in installed:
        setattr(handler, "_argmatch_installed", True)
        logger.addHandler(handler)
    logger.setLevel(min(handler.level for handler in installed))
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return installed
