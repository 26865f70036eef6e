"""
Simple API for Logging
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "mt4data"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def log(message: str, level: str = "INFO"):
    """
    Простой API для логирования

    Args:
        message: Сообщение для логирования
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Examples:
        log("History file written")
        log("Bar rejected", level="WARNING")
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.log(_LEVELS.get(level.upper(), logging.INFO), message)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Получить logger для модуля (advanced API)

    Args:
        name: Имя модуля (обычно __name__)

    Returns:
        logging.Logger instance
    """
    if name is None:
        name = ROOT_LOGGER_NAME
    return logging.getLogger(name)
