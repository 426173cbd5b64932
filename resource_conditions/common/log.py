import logging
from typing import Union

from resource_conditions.app.config import PROJECT_LOG_LEVEL, ROOT_LOG_LEVEL

PROJECT_LOGGER_NAME = "resource_conditions"

log_format = "[%(asctime)s %(levelname)s %(name)s] %(message)s"

_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.FATAL,
    "critical": logging.CRITICAL,
    "notset": logging.NOTSET,
    "none": logging.NOTSET,
}


def to_log_level(level: Union[str, int]) -> int:
    """Map a level name or number to a logging level, falling back to INFO."""
    if isinstance(level, bool):
        return logging.INFO
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        return logging.INFO
    return _LEVEL_NAMES.get(level.strip().lower(), logging.INFO)


def init(project_log_level: Union[str, int] = PROJECT_LOG_LEVEL, root_log_level: Union[str, int] = ROOT_LOG_LEVEL):
    logging.basicConfig(format=log_format, level=to_log_level(root_log_level))
    logger = logging.getLogger(PROJECT_LOGGER_NAME)
    logger.setLevel(to_log_level(project_log_level))
    return logger
