"""
Terminal - перечисления и проверки значений терминала MetaTrader 4
"""

from .constants import (
    MAX_SYMBOL_LENGTH,
    MAX_ORDER_COMMENT_LENGTH,
    STANDARD_TIMEFRAMES,
    Timeframe,
    OrderType,
    TickModel,
    TradeDirection,
)

from .helpers import (
    is_numeric_string,
    is_valid_symbol,
    is_std_timeframe,
    is_tick_model,
    is_order_type,
    is_long_order_type,
    is_short_order_type,
    is_timeframe_description,
    str_to_timeframe,
    str_to_period,
    str_to_tick_model,
    str_to_order_type,
    str_to_trade_direction,
    order_type_description,
    tick_model_description,
    trade_direction_description,
)


__all__ = [
    # Constants
    'MAX_SYMBOL_LENGTH',
    'MAX_ORDER_COMMENT_LENGTH',
    'STANDARD_TIMEFRAMES',
    'Timeframe',
    'OrderType',
    'TickModel',
    'TradeDirection',
    # Checks
    'is_numeric_string',
    'is_valid_symbol',
    'is_std_timeframe',
    'is_tick_model',
    'is_order_type',
    'is_long_order_type',
    'is_short_order_type',
    'is_timeframe_description',
    # Conversions
    'str_to_timeframe',
    'str_to_period',
    'str_to_tick_model',
    'str_to_order_type',
    'str_to_trade_direction',
    'order_type_description',
    'tick_model_description',
    'trade_direction_description',
]
