"""
Константы терминала MetaTrader 4
"""

from enum import IntEnum

# Максимальная длина символа MetaTrader
MAX_SYMBOL_LENGTH = 11

# Максимальная длина комментария ордера
MAX_ORDER_COMMENT_LENGTH = 27


class Timeframe(IntEnum):
    """Таймфреймы (в минутах)"""
    M1 = 1
    M5 = 5
    M15 = 15
    M30 = 30
    H1 = 60
    H4 = 240
    D1 = 1440
    W1 = 10080
    MN1 = 43200
    Q1 = 129600   # не стандартный таймфрейм терминала


class OrderType(IntEnum):
    """Типы ордеров"""
    BUY = 0
    SELL = 1
    BUYLIMIT = 2
    SELLLIMIT = 3
    BUYSTOP = 4
    SELLSTOP = 5


class TickModel(IntEnum):
    """Модели генерации тиков тестера стратегий"""
    EVERYTICK = 0
    CONTROLPOINTS = 1
    BAROPEN = 2


class TradeDirection(IntEnum):
    """Направления торговли тестера стратегий"""
    LONG = 0
    SHORT = 1
    BOTH = 2


# Стандартные таймфреймы терминала
STANDARD_TIMEFRAMES = (
    Timeframe.M1, Timeframe.M5, Timeframe.M15, Timeframe.M30,
    Timeframe.H1, Timeframe.H4, Timeframe.D1, Timeframe.W1, Timeframe.MN1,
)

LONG_ORDER_TYPES = (OrderType.BUY, OrderType.BUYLIMIT, OrderType.BUYSTOP)
SHORT_ORDER_TYPES = (OrderType.SELL, OrderType.SELLLIMIT, OrderType.SELLSTOP)

ORDER_TYPE_DESCRIPTIONS = {
    OrderType.BUY: "Buy",
    OrderType.SELL: "Sell",
    OrderType.BUYLIMIT: "Buy Limit",
    OrderType.SELLLIMIT: "Sell Limit",
    OrderType.BUYSTOP: "Buy Stop",
    OrderType.SELLSTOP: "Sell Stop",
}

TICK_MODEL_DESCRIPTIONS = {
    TickModel.EVERYTICK: "EveryTick",
    TickModel.CONTROLPOINTS: "ControlPoints",
    TickModel.BAROPEN: "BarOpen",
}

TRADE_DIRECTION_DESCRIPTIONS = {
    TradeDirection.LONG: "Long",
    TradeDirection.SHORT: "Short",
    TradeDirection.BOTH: "Both",
}
