"""Shared application logger."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logger(level: str = "INFO") -> logging.Logger:
    """
    Configure and return the application logger.

    Calling it more than once only updates the level, the console handler is attached a single time.

    :param str level: Logging level name (e.g. "INFO", "DEBUG")

    :return: Configured application logger
    :rtype: logging.Logger
    """
    app_logger = logging.getLogger("calculator_app")
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
        app_logger.propagate = False
    app_logger.setLevel(level.upper())
    return app_logger


logger: logging.Logger = configure_logger()
