"""Centralized logging utilities for orglens entry points.

The parsers themselves only ever log through module-level loggers under the
``orglens`` namespace (logbook date failures are reported at WARNING). Host
applications that want those warnings on screen, or want them silenced while
keeping their own output, call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "orglens"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    parser_log_level: int | str | None = None,
) -> logging.Logger:
    """Configure root logging handlers shared across the CLI and host applications.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    parser_log_level : int | str, optional
        Separate threshold for the ``orglens`` logger hierarchy. Use ``"ERROR"``
        to hide per-entry logbook warnings while keeping the root level.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)
        except OSError as exc:  # pragma: no cover - handled at runtime
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if parser_log_level is None:
        package_logger.setLevel(logging.NOTSET)
    else:
        package_logger.setLevel(_resolve_level(parser_log_level))

    return root_logger
