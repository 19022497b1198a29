"""
Logging Configuration
Routes the 'orientationlabels' log records for the command-line tool.

The CLI prints labels (plain or JSON) on stdout, so log records always go to
stderr and can be captured or silenced without corrupting piped output.
Library users who never call setup_logging() get the host application's
logging configuration through normal propagation.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "orientationlabels"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stderr (and optionally file) handlers to the package logger.

    Degenerate camera warnings come from 'orientationlabels.model.orientation',
    per-recompute label updates are logged at DEBUG.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path; the file is truncated on every run.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # main() may run several times in one process (tests, embedding)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging to stderr at {logging.getLevelName(level)}"
                 + (f" and {log_file}" if log_file else ""))
    return logger
