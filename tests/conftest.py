"""
Pytest fixtures для тестов mt4data

Содержит общие fixtures для всех тестов:
- In-memory потоки для записи баров
- Временный каталог данных и настройки
- Фейковый источник позиций для экспорта
- Эмуляция big-endian хоста
"""
import io
import random
from datetime import datetime
from pathlib import Path
from typing import Generator, List

import pytest

from mt4data.config import Settings, get_settings
from mt4data.services.account_export import ClosedPosition, OpenPosition, Signal
from mt4data.services.struct_codec import compiler, endianness


# ==================== CODEC FIXTURES ====================

@pytest.fixture(autouse=True)
def clean_format_cache() -> Generator[None, None, None]:
    """
    Сбросить кэш скомпилированных форматов и настроек между тестами.
    """
    compiler.clear_cache()
    get_settings.cache_clear()
    yield
    compiler.clear_cache()
    get_settings.cache_clear()


@pytest.fixture
def big_endian_host(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Эмулировать big-endian хост.

    Нормализатор выбирает порядок байт нативного double по флагу модуля,
    поэтому на любом реальном хосте получаем поведение big-endian машины.
    """
    monkeypatch.setattr(endianness, "_HOST_LITTLE_ENDIAN", False)


@pytest.fixture
def rng() -> random.Random:
    """
    Детерминированный генератор случайных значений.

    Returns:
        random.Random: Генератор с фиксированным seed
    """
    return random.Random(20140410)


# ==================== HISTORY FIXTURES ====================

@pytest.fixture
def hst_stream() -> io.BytesIO:
    """
    In-memory поток файла истории.

    Returns:
        io.BytesIO: Пустой бинарный поток
    """
    return io.BytesIO()


class FailingStream(io.RawIOBase):
    """Поток, любая запись в который завершается ошибкой ОС"""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError(28, "No space left on device")


@pytest.fixture
def failing_stream() -> FailingStream:
    """
    Поток, отказывающий в записи.

    Returns:
        FailingStream: Поток с ошибкой записи
    """
    return FailingStream()


# ==================== EXPORT FIXTURES ====================

@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    Временный каталог данных.

    Args:
        tmp_path: Временный каталог pytest

    Returns:
        Path: Каталог данных
    """
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    """
    Настройки, указывающие на временный каталог данных.

    Args:
        data_dir: Временный каталог данных

    Returns:
        Settings: Настройки без чтения .env
    """
    return Settings(_env_file=None, DATA_DIR=data_dir)


@pytest.fixture
def signal() -> Signal:
    """Тестовый сигнал"""
    return Signal(alias="alexprofit", name="AlexProfit")


@pytest.fixture
def open_positions() -> List[OpenPosition]:
    """
    Открытые позиции сигнала.

    Returns:
        List[OpenPosition]: Позиции по возрастанию {open_time, ticket}
    """
    return [
        OpenPosition(
            ticket=428259953,
            type="sell",
            lots=1.2,
            symbol="AUDUSD",
            open_time=datetime(2014, 4, 10, 7, 8, 46),
            open_price=1.62166,
            commission=0.0,
            swap=0.0,
        ),
        OpenPosition(
            ticket=428259960,
            type="buy",
            lots=0.5,
            symbol="EURUSD",
            open_time=datetime(2014, 4, 10, 9, 15, 0),
            open_price=1.3892,
            stop_loss=1.3850,
            take_profit=1.3950,
            commission=-3.5,
            swap=-0.42,
            magic_number=12345,
            comment="grid #2",
        ),
    ]


@pytest.fixture
def closed_positions() -> List[ClosedPosition]:
    """
    Закрытые позиции сигнала.

    Returns:
        List[ClosedPosition]: Позиции по возрастанию {close_time, open_time, ticket}
    """
    return [
        ClosedPosition(
            ticket=428259901,
            type="buy",
            lots=2.0,
            symbol="GBPUSD",
            open_time=datetime(2014, 4, 9, 12, 0, 0),
            open_price=1.6701,
            close_time=datetime(2014, 4, 9, 18, 30, 5),
            close_price=1.6745,
            commission=-14.0,
            swap=0.0,
            profit=880.0,
        ),
    ]


class FakePositionSource:
    """Источник позиций в памяти"""

    def __init__(self, open_positions=None, closed_positions=None):
        self.open_positions = list(open_positions or [])
        self.closed_positions = list(closed_positions or [])
        self.calls: List[str] = []

    def list_open_positions(self, signal: Signal) -> List[OpenPosition]:
        self.calls.append("open")
        return self.open_positions

    def list_closed_positions(self, signal: Signal) -> List[ClosedPosition]:
        self.calls.append("closed")
        return self.closed_positions


@pytest.fixture
def position_source(open_positions, closed_positions) -> FakePositionSource:
    """
    Фейковый источник позиций (DAO).

    Args:
        open_positions: Открытые позиции
        closed_positions: Закрытые позиции

    Returns:
        FakePositionSource: Источник позиций в памяти
    """
    return FakePositionSource(open_positions, closed_positions)
