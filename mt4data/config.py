"""
Конфигурация mt4data
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки библиотеки"""

    # Application
    APP_NAME: str = "mt4data"
    APP_VERSION: str = "1.0.0"

    # Data
    DATA_DIR: Path = Path("./data")
    SYMBOL_ENCODING: str = "cp1252"  # кодировка szchar-полей терминала

    # Account export (*.ini)
    EXPORT_SUBDIR: str = "simpletrader"
    EXPORT_ATOMIC_REWRITE: bool = False
    EXPORT_ENCODING: str = "utf-8"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE: str = "mt4data.log"
    LOG_TO_FILE: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "MT4DATA_"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Получить настройки (кэшируется)"""
    return Settings()
