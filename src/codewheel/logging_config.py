"""
Logging Configuration
Routes the 'codewheel' logger namespace to the console and, optionally, a file.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "codewheel"

# Handlers installed here carry these names so a second call replaces them
# without touching handlers the host application added.
CONSOLE_HANDLER = "codewheel.console"
FILE_HANDLER = "codewheel.file"

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def level_for(verbose: bool = False, debug: bool = False) -> int:
    """
    Picks the logging level for a run.

    Args:
        verbose: Log every drag transition and section lookup (DEBUG).
        debug: Debug drawing is on; report viewport and viewer events (INFO).
    """
    if verbose:
        return logging.DEBUG
    if debug:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'codewheel' namespace.

    Console output goes to stderr so command output on stdout (for example
    ``resolve --json``) stays machine-readable.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.set_name(FILE_HANDLER)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger
