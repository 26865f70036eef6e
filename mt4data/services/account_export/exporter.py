"""
Экспорт торговой истории сигнала в файлы терминала

Для сигнала с алиасом <alias> пишутся два файла в <DATA_DIR>/<EXPORT_SUBDIR>/:
- <alias>_open.ini   - открытые позиции
- <alias>_closed.ini - закрытые позиции (всегда перезаписывается целиком)
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from mt4data.config import Settings, get_settings

from .constants import (
    CLOSED_FILE_SUFFIX,
    CLOSED_HEADER,
    CLOSED_LINE_FORMAT,
    OPEN_FILE_SUFFIX,
    OPEN_HEADER,
    OPEN_LINE_FORMAT,
    SECTION_PREFIX,
    TIME_FORMAT,
)
from .file_utils import rewrite_file
from .models import ClosedPosition, OpenPosition, PositionSource, Signal

logger = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """
    Значение колонки: None -> пустая строка, целые числа без дробной части,
    дробные - в кратчайшей записи
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(value, ".14G")
    return str(value)


def _check_flag(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"Illegal type of parameter {name}: {type(value).__name__}")


class AccountHistoryExporter:
    """Запись открытых и закрытых позиций сигнала в *.ini файлы"""

    def __init__(
        self,
        source: PositionSource,
        data_dir: Optional[Union[str, Path]] = None,
        atomic_rewrite: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()

        self.source = source
        self.export_dir = Path(data_dir or settings.DATA_DIR) / settings.EXPORT_SUBDIR
        self.atomic_rewrite = settings.EXPORT_ATOMIC_REWRITE if atomic_rewrite is None else atomic_rewrite
        self.encoding = settings.EXPORT_ENCODING

    def get_open_file(self, signal: Signal) -> Path:
        return self.export_dir / f"{signal.alias}{OPEN_FILE_SUFFIX}"

    def get_closed_file(self, signal: Signal) -> Path:
        return self.export_dir / f"{signal.alias}{CLOSED_FILE_SUFFIX}"

    def update_account_history(
        self,
        signal: Signal,
        open_updates: bool,
        closed_updates: bool,
    ) -> List[Path]:
        """
        Обновить файлы истории сигнала

        Файл открытых позиций пишется, если open_updates=True или файла ещё нет.
        Файл закрытых позиций перезаписывается всегда, closed_updates
        только проверяется.

        Returns:
            Список перезаписанных файлов

        Raises:
            TypeError: open_updates/closed_updates не bool
            IoFailureError: ошибка файловой системы
        """
        _check_flag("open_updates", open_updates)
        _check_flag("closed_updates", closed_updates)

        written: List[Path] = []

        open_file = self.get_open_file(signal)
        if open_updates or not open_file.is_file():
            self.write_open_file(signal)
            written.append(open_file)

        written.append(self.write_closed_file(signal))

        return written

    def write_open_file(self, signal: Signal) -> Path:
        """Перезаписать файл открытых позиций"""
        positions = self.source.list_open_positions(signal)
        path = self.get_open_file(signal)

        with rewrite_file(path, atomic=self.atomic_rewrite, encoding=self.encoding) as f:
            f.write(self._section(signal))
            f.write(OPEN_HEADER)
            for position in positions:
                f.write(self.format_open_line(position))

        logger.info(f"[ACCOUNT-EXPORT] {signal.alias}: {len(positions)} open position(s) -> {path.name}")
        return path

    def write_closed_file(self, signal: Signal) -> Path:
        """Перезаписать файл закрытых позиций"""
        positions = self.source.list_closed_positions(signal)
        path = self.get_closed_file(signal)

        with rewrite_file(path, atomic=self.atomic_rewrite, encoding=self.encoding) as f:
            f.write(self._section(signal))
            f.write(CLOSED_HEADER)
            for position in positions:
                f.write(self.format_closed_line(position))

        logger.info(f"[ACCOUNT-EXPORT] {signal.alias}: {len(positions)} closed position(s) -> {path.name}")
        return path

    @staticmethod
    def _section(signal: Signal) -> str:
        return f"[{SECTION_PREFIX}.{signal.alias}]\n"

    @staticmethod
    def format_open_line(position: OpenPosition) -> str:
        return OPEN_LINE_FORMAT.format(
            position.key,
            position.type_description,
            position.lots,
            position.open_time.strftime(TIME_FORMAT),
            format_value(position.open_price),
            format_value(position.take_profit),
            format_value(position.stop_loss),
            format_value(position.commission),
            format_value(position.swap),
            format_value(position.magic_number),
            position.comment or "",
        )

    @staticmethod
    def format_closed_line(position: ClosedPosition) -> str:
        return CLOSED_LINE_FORMAT.format(
            position.key,
            position.type_description,
            position.lots,
            position.open_time.strftime(TIME_FORMAT),
            format_value(position.open_price),
            position.close_time.strftime(TIME_FORMAT),
            format_value(position.close_price),
            format_value(position.take_profit),
            format_value(position.stop_loss),
            format_value(position.commission),
            format_value(position.swap),
            format_value(position.net_profit),
            format_value(position.magic_number),
            position.comment or "",
        )
