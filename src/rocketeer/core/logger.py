"""
Logging Configuration Module
---------------------------

This module sets up the ``rocketeer`` logger that every module logs through:
a timestamped log file plus terse console output.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'rocketeer'

# Default location of the log file
LOG_DIR = Path.home() / ".rocketeer"

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(log_level: int = logging.INFO,
                      log_file: Optional[str] = None,
                      console: bool = True) -> str:
    """
    Route Rocketeer log records to a file and, optionally, the console.

    Calling it again replaces (and closes) the handlers installed by the
    previous call, so a run can switch level or file.

    Parameters
    ----------
    log_level : int, optional
        Level for the logger and both handlers (default: logging.INFO)
    log_file : str, optional
        Log file; its directory is created if needed. Defaults to
        ``~/.rocketeer/rocketeer.log``
    console : bool, optional
        Also write records to stdout (default: True)

    Returns
    -------
    str
        Path of the log file in use
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    path = Path(log_file) if log_file is not None else LOG_DIR / "rocketeer.log"
    path.parent.mkdir(parents=True, exist_ok=True)

    _attach(logger, logging.FileHandler(path), log_level, FILE_FORMAT)
    if console:
        _attach(logger, logging.StreamHandler(sys.stdout), log_level, CONSOLE_FORMAT)

    # Records stop at the package logger
    logger.propagate = False

    logger.debug(f"Logging to {path}")
    return str(path)


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, nested under the ``rocketeer`` logger.

    ``__name__`` of a package module is used as-is; any other name is
    prefixed with ``rocketeer.``.
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
