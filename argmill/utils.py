# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging helpers for programs embedding argmill.

argmill only emits records on the "argmill" logger and installs no handlers on
import. `setup_logging()` routes those records to a Rich or JSON console
handler and, optionally, a log file. It never touches the root logger, so the
embedding program's own logging setup is left as it is.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argmill.logger import logger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    """Best-effort check of PID 1's cgroup for a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the "argmill" logger.

    Calling it again replaces the handlers installed by the previous call.
    Records stop propagating to the root logger once argmill has handlers of
    its own, so they are not printed twice.

    Args:
        mode (str | None):
            "cli" for Rich console logs or "json" for JSON lines on stderr.
            Falls back to `ARGMILL_LOG_MODE`, then to "json" inside a container
            and "cli" elsewhere.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write the file as JSON lines instead of text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Returns:
        logging.Logger: The configured "argmill" logger.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("ARGMILL_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    console_handler = _build_console_handler(mode)
    console_handler.setLevel(console_log_level)
    handlers = [console_handler]

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        handlers.append(file_handler)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    logger.setLevel(min(h.level for h in handlers))
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
