"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_engine"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the engine logger and return it.

    Calling this again only adjusts the level, so app factories and tests
    can invoke it freely.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
