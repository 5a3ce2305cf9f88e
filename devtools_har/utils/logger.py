"""
devtools_har/utils/logger.py

Logger factory for devtools-har.
"""

import logging

from rich.logging import RichHandler

from devtools_har.config import Config

PACKAGE_LOGGER_NAME = "devtools_har"

# library code never configures output itself; applications call configure_logging()
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for the given module name.
    Args:
        name: Usually __name__ of the calling module.
    Returns:
        logging.Logger: The logger.
    """
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """
    Attach a rich handler to the package logger.
    Used by the command line scripts; calling it twice does not duplicate handlers.
    Args:
        level: Log level name. Defaults to Config.LOG_LEVEL.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level or Config.LOG_LEVEL)
    if any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(fmt=Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
