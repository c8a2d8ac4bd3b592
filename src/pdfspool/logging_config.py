"""Logging configuration for pdfspool.

Console output is split the same way a shell user expects from a print tool:
progress and summaries on stdout, every diagnostic on stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "pdfspool"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for a pdfspool module.

    Args:
        name: Module name (e.g., __name__). If None, returns root pdfspool logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ConsoleFormatter(logging.Formatter):
    """Prefix diagnostics by severity; leave informational lines bare."""

    PREFIXES = {
        logging.DEBUG: "[debug] ",
        logging.WARNING: "Warning: ",
        logging.ERROR: "Error: ",
        logging.CRITICAL: "Error: ",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.PREFIXES.get(record.levelno, "")
        return f"{prefix}{record.getMessage()}"


class BelowWarningFilter(logging.Filter):
    """Only pass records below WARNING (routes them to stdout)."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the pdfspool CLI.

    Args:
        verbosity: 0=normal, 1+=debug (-v)
        quiet: If True, suppress everything except errors
        log_file: Optional file that receives all records with timestamps
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    if quiet:
        console_level = logging.ERROR
    elif verbosity >= 1:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO

    logger.setLevel(logging.DEBUG)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(console_level)
    stdout_handler.setFormatter(ConsoleFormatter())
    stdout_handler.addFilter(BelowWarningFilter())
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR if quiet else logging.WARNING)
    stderr_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
