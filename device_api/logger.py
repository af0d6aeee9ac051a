import logging
import os
import sys
from colorlog import ColoredFormatter

from device_api import constants as CONSTANTS

LOGGER_NAME = "device_api"
HANDLER_NAME = "device_api.stdout"


def _resolve_level(level_name):
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.INFO


def _own_handler(logger):
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logger(level_name=None):
    """
    Configure and return the package logger.

    Lambda forwards stdout to CloudWatch, so a single stdout handler is enough.

    Args:
        level_name: Log level name. Defaults to DEVICE_API_LOG_LEVEL or INFO.
    """
    if level_name is None:
        level_name = os.environ.get(CONSTANTS.ENV_LOG_LEVEL, CONSTANTS.DEFAULT_LOG_LEVEL)
    level = _resolve_level(level_name)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    handler = _own_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        formatter = ColoredFormatter(
            "%(log_color)s[%(levelname)s] %(name)s: %(message)s",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "red,bg_white",
            }
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    handler.setLevel(level)

    return logger


logger = setup_logger()
