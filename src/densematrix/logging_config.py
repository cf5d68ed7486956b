"""
Logging Configuration
Attaches console and optional file output to the package logger.
"""
import logging
import sys
from typing import Optional

from densematrix.config import LOGGER_NAMESPACE


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route records from every densematrix module to stdout, and optionally a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Threshold applied to the logger and its handlers.
        log_file: Path of a log file, truncated on each call.

    Returns:
        The logger named by `LOGGER_NAMESPACE`.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
