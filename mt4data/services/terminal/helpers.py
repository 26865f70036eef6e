"""
Проверки и преобразования значений терминала

str_to_* принимают имя (без учёта регистра, с префиксом или без),
числовую строку, int или float. Неизвестное значение даёт 0 (таймфрейм)
или -1 (остальные); значение другого типа - TypeError.
"""

import re
from enum import IntEnum
from typing import Any, Optional, Type

from .constants import (
    MAX_SYMBOL_LENGTH,
    ORDER_TYPE_DESCRIPTIONS,
    STANDARD_TIMEFRAMES,
    TICK_MODEL_DESCRIPTIONS,
    TRADE_DIRECTION_DESCRIPTIONS,
    LONG_ORDER_TYPES,
    SHORT_ORDER_TYPES,
    OrderType,
    TickModel,
    Timeframe,
    TradeDirection,
)

SYMBOL_PATTERN = re.compile(r"^[a-z0-9_.#&'~-]+$", re.IGNORECASE)
NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

_STD_TIMEFRAME_NAMES = {tf.name for tf in STANDARD_TIMEFRAMES}
_TICK_MODEL_IDS = {int(m) for m in TickModel}
_ORDER_TYPE_IDS = {int(m) for m in OrderType}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_numeric_string(value: str) -> bool:
    """Является ли строка числом (целым или дробным)"""
    return bool(NUMERIC_PATTERN.match(value))


def is_valid_symbol(value: Any) -> bool:
    """Является ли строка допустимым символом MetaTrader (в т.ч. без пробелов)"""
    return (isinstance(value, str)
            and 0 < len(value) <= MAX_SYMBOL_LENGTH
            and SYMBOL_PATTERN.match(value) is not None)


def is_std_timeframe(value: Any) -> bool:
    """Является ли значение стандартным таймфреймом терминала"""
    return _is_int(value) and value in STANDARD_TIMEFRAMES


def is_tick_model(value: Any) -> bool:
    """Является ли значение моделью тиков тестера"""
    return _is_int(value) and value in _TICK_MODEL_IDS


def is_order_type(value: Any) -> bool:
    """Является ли значение типом ордера"""
    return _is_int(value) and value in _ORDER_TYPE_IDS


def is_long_order_type(value: Any) -> bool:
    return _is_int(value) and value in LONG_ORDER_TYPES


def is_short_order_type(value: Any) -> bool:
    return _is_int(value) and value in SHORT_ORDER_TYPES


def is_timeframe_description(value: Any) -> bool:
    """Является ли строка описанием таймфрейма ("H1", "PERIOD_H1")"""
    if not isinstance(value, str):
        return False
    if value.startswith("PERIOD_"):
        value = value[len("PERIOD_"):]
    return value in _STD_TIMEFRAME_NAMES


def _convert(value: Any, enum: Type[IntEnum], prefix: str, unknown: int) -> int:
    if isinstance(value, str):
        if not is_numeric_string(value):
            name = value.upper()
            if name.startswith(prefix):
                name = name[len(prefix):]
            member = enum.__members__.get(name)
            return int(member) if member is not None else unknown
        value = float(value)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Illegal type of parameter value: {type(value).__name__}")

    for member in enum:
        if float(value) == float(member):
            return int(member)
    return unknown


def str_to_timeframe(value: Any) -> int:
    """Представление таймфрейма -> id таймфрейма (0, если не таймфрейм)"""
    return _convert(value, Timeframe, "PERIOD_", 0)


def str_to_period(value: Any) -> int:
    """Alias for str_to_timeframe()"""
    return str_to_timeframe(value)


def str_to_tick_model(value: Any) -> int:
    """Представление модели тиков -> id модели (-1, если не модель)"""
    return _convert(value, TickModel, "TICKMODEL_", -1)


def str_to_order_type(value: Any) -> int:
    """Представление типа ордера -> тип ордера (-1, если не тип ордера)"""
    return _convert(value, OrderType, "OP_", -1)


def str_to_trade_direction(value: Any) -> int:
    """Представление направления торговли -> id направления (-1, если не направление)"""
    return _convert(value, TradeDirection, "TRADEDIRECTION_", -1)


def order_type_description(value: Any) -> Optional[str]:
    """Описание типа ордера ("Buy", "Sell Limit", ...) или None"""
    type_id = str_to_order_type(value)
    return ORDER_TYPE_DESCRIPTIONS.get(type_id)


def tick_model_description(value: Any) -> Optional[str]:
    """Описание модели тиков ("EveryTick", ...) или None"""
    return TICK_MODEL_DESCRIPTIONS.get(str_to_tick_model(value))


def trade_direction_description(value: Any) -> Optional[str]:
    """Описание направления торговли ("Long", "Short", "Both") или None"""
    return TRADE_DIRECTION_DESCRIPTIONS.get(str_to_trade_direction(value))
