"""
Модели позиций для экспорта торговой истории
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, Sequence

from mt4data.services.terminal import order_type_description


@dataclass(frozen=True)
class Signal:
    """Торговый сигнал (источник позиций)"""
    alias: str
    name: str = ""


class _PositionMixin:
    symbol: str
    ticket: int
    type: str

    @property
    def key(self) -> str:
        """Ключ строки экспорта: SYMBOL.TICKET"""
        return f"{self.symbol}.{self.ticket}"

    @property
    def type_description(self) -> str:
        return order_type_description(self.type) or str(self.type)


@dataclass
class OpenPosition(_PositionMixin):
    """Открытая позиция"""
    ticket: int
    type: str            # "buy" | "sell"
    lots: float
    symbol: str
    open_time: datetime
    open_price: float
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    commission: float = 0.0
    swap: float = 0.0
    magic_number: Optional[int] = None
    comment: Optional[str] = None


@dataclass
class ClosedPosition(_PositionMixin):
    """Закрытая позиция"""
    ticket: int
    type: str
    lots: float
    symbol: str
    open_time: datetime
    open_price: float
    close_time: datetime
    close_price: float
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    commission: float = 0.0
    swap: float = 0.0
    profit: float = 0.0
    magic_number: Optional[int] = None
    comment: Optional[str] = None

    @property
    def net_profit(self) -> float:
        """Прибыль с учётом комиссии и свопа"""
        return round(self.profit + self.commission + self.swap, 2)


class PositionSource(Protocol):
    """Источник позиций (DAO)"""

    def list_open_positions(self, signal: Signal) -> Sequence[OpenPosition]:
        """Открытые позиции, по возрастанию {open_time, ticket}"""
        ...

    def list_closed_positions(self, signal: Signal) -> Sequence[ClosedPosition]:
        """Закрытые позиции, по возрастанию {close_time, open_time, ticket}"""
        ...
