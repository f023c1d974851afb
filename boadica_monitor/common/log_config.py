"""
Logging Configuration

Configures logging for monitor runs.
Output goes to stderr to keep stdout clean for the price report; an optional
log file keeps a copy of every run for the scheduled job.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_LOG_FORMAT = "%(asctime)s " + LOG_FORMAT


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure the package logger.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
        log_file: Optional path; records are appended there as well
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger("boadica_monitor")
    logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)
