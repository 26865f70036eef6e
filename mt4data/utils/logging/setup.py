"""
Logger Configuration and Setup
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .formatters import ColoredFormatter
from .api import ROOT_LOGGER_NAME


def _level(value: Union[int, str]) -> int:
    if isinstance(value, str):
        level = logging.getLevelName(value.upper())
        return level if isinstance(level, int) else logging.INFO
    return value


def setup_logging(
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
    console_level: Union[int, str, None] = None,
    file_level: Union[int, str] = logging.DEBUG,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB per file
    backup_count: int = 5,
    enable_colors: bool = True,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Настройка системы логирования

    Значения, не переданные явно, берутся из Settings (LOG_DIR, LOG_FILE,
    LOG_LEVEL, LOG_TO_FILE).

    Args:
        log_dir: Директория для логов
        log_file: Имя файла лога
        console_level: Уровень логирования для консоли
        file_level: Уровень логирования для файла
        max_bytes: Максимальный размер файла лога (байты)
        backup_count: Количество backup файлов
        enable_colors: Включить цветной вывод
        to_file: Писать ли лог в файл

    Returns:
        Настроенный logger пакета
    """
    from mt4data.config import get_settings

    settings = get_settings()
    log_dir = log_dir or settings.LOG_DIR
    log_file = log_file or settings.LOG_FILE
    console_level = _level(console_level if console_level is not None else settings.LOG_LEVEL)
    file_level = _level(file_level)
    to_file = settings.LOG_TO_FILE if to_file is None else to_file

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # Минимальный уровень

    # Очищаем существующие handlers (повторный вызов не дублирует вывод)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # ==================
    # CONSOLE HANDLER
    # ==================

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)

    if enable_colors and sys.stdout.isatty():
        console_formatter = ColoredFormatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        console_formatter = logging.Formatter(
            '[%(asctime)s.%(msecs)03d] [%(levelname)-8s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # ==================
    # FILE HANDLER (with rotation)
    # ==================

    if to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '[%(asctime)s.%(msecs)03d] [%(levelname)-8s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.debug(
        f"[LOGGING] Initialized: console={logging.getLevelName(console_level)}, "
        f"file={'%s/%s' % (log_dir, log_file) if to_file else 'disabled'}"
    )
    return logger
