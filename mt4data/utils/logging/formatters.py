"""
Цветной вывод логов в консоль
"""

import logging
import re


class Colors:
    """ANSI-коды цветов"""
    RESET = '\033[0m'

    DEBUG = '\033[36m'
    INFO = '\033[32m'
    WARNING = '\033[33m'
    ERROR = '\033[31m'
    CRITICAL = '\033[35m'

    TIMESTAMP = '\033[90m'
    COMPONENT = '\033[94m'  # [STRUCT-CODEC], [HISTORY-WRITER], ...


# Тег компонента в начале сообщения: "[HISTORY-WRITER] Skipped: ..."
_COMPONENT_TAG = re.compile(r"^\[([A-Z][A-Z0-9-]*)\]")


class ColoredFormatter(logging.Formatter):
    """
    Форматтер консоли: уровень окрашен по важности, время - серым,
    тег компонента в начале сообщения - голубым
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def formatTime(self, record, datefmt=None):
        return f"{Colors.TIMESTAMP}{super().formatTime(record, datefmt)}{Colors.RESET}"

    def formatMessage(self, record):
        saved = record.levelname, record.message

        color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        record.levelname = f"{color}{record.levelname:<8}{Colors.RESET}"
        record.message = _COMPONENT_TAG.sub(
            lambda m: f"{Colors.COMPONENT}{m.group(0)}{Colors.RESET}", record.message
        )
        try:
            return super().formatMessage(record)
        finally:
            # другие handlers получают запись без ANSI-кодов
            record.levelname, record.message = saved
