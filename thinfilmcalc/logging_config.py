"""
Logging Setup
Handlers for the ``thinfilmcalc`` logger. The prompts own standard output,
so log records never go there.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "thinfilmcalc"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Route package records to standard error and, optionally, a debug file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: File rewritten with the records of this run.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}.")
