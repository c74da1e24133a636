import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Console-only logging for the ``busbooking`` package.

    Safe to call more than once: existing handlers are replaced rather than
    stacked.
    """
    logger = logging.getLogger("busbooking")
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(console_handler)
    return logger
