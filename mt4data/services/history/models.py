"""
Модель бара истории
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Union

from mt4data.services.struct_codec.constants import UINT32_MAX
from mt4data.services.struct_codec.errors import InvalidBarError, UnsupportedVersionError

from .constants import BAR_DATE_FORMAT, HISTORY_BAR_VERSIONS
from .normalizer import normalize_price


def check_version(version: int) -> int:
    """Проверить версию бара (400 или 401)"""
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"Illegal type of parameter version: {type(version).__name__}")
    if version not in HISTORY_BAR_VERSIONS:
        raise UnsupportedVersionError("history_bar", version, HISTORY_BAR_VERSIONS)
    return version


@dataclass(frozen=True)
class HistoryBar:
    """Бар истории (одна запись *.hst)"""
    time: int                      # Unix timestamp, секунды
    open: float
    high: float
    low: float
    close: float
    ticks: Union[int, float]
    spread: int = 0                # только v401
    volume: int = 0                # только v401

    def normalized(self, digits: int) -> "HistoryBar":
        """Копия бара с ценами, округлёнными до digits"""
        return replace(
            self,
            open=normalize_price(self.open, digits),
            high=normalize_price(self.high, digits),
            low=normalize_price(self.low, digits),
            close=normalize_price(self.close, digits),
        )

    def describe(self) -> str:
        try:
            date = datetime.fromtimestamp(self.time, tz=timezone.utc).strftime(BAR_DATE_FORMAT)
        except (OverflowError, OSError, ValueError, TypeError):
            date = f"time={self.time!r}"
        return f"{date}: O={self.open} H={self.high} L={self.low} C={self.close} V={self.ticks}"

    def validate(self) -> None:
        """
        Проверить инварианты бара

        Raises:
            InvalidBarError: low <= open,close <= high нарушено, ticks == 0
                             или время вне диапазона uint32
        """
        prices = (self.open, self.high, self.low, self.close)
        if not all(isinstance(p, (int, float)) and math.isfinite(p) for p in prices):
            raise InvalidBarError(f"Illegal history bar of {self.describe()}")

        if isinstance(self.ticks, bool) or not isinstance(self.ticks, (int, float)) or not math.isfinite(self.ticks):
            raise InvalidBarError(f"Illegal history bar ticks: {self.ticks!r}")

        # из (H >= O && O >= L) следует (H >= L)
        if (self.open > self.high or
                self.open < self.low or
                self.close > self.high or
                self.close < self.low or
                not self.ticks or self.ticks < 0):
            raise InvalidBarError(f"Illegal history bar of {self.describe()}")

        if isinstance(self.time, bool) or not isinstance(self.time, int) or not 0 <= self.time <= UINT32_MAX:
            raise InvalidBarError(f"Illegal history bar time: {self.time!r}")

    def to_fields(self, version: int) -> Dict[str, Any]:
        """Значения полей структуры HISTORY_BAR нужной версии"""
        check_version(version)
        fields = {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "ticks": self.ticks,
        }
        if version == 401:
            if isinstance(self.ticks, float) and self.ticks.is_integer():
                fields["ticks"] = int(self.ticks)
            fields["spread"] = self.spread
            fields["volume"] = self.volume
        return fields

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], version: int) -> "HistoryBar":
        """Бар из декодированной структуры"""
        check_version(version)
        ticks = fields["ticks"]
        if isinstance(ticks, float) and ticks.is_integer():
            ticks = int(ticks)
        return cls(
            time=fields["time"],
            open=fields["open"],
            high=fields["high"],
            low=fields["low"],
            close=fields["close"],
            ticks=ticks,
            spread=fields.get("spread", 0),
            volume=fields.get("volume", 0),
        )
