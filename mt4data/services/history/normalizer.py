"""
Нормализация цен по digits инструмента
"""

import math
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP


def check_digits(digits: int) -> int:
    """Проверить digits инструмента (целое >= 0)"""
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise TypeError(f"Illegal type of parameter digits: {type(digits).__name__}")
    if digits < 0:
        raise ValueError(f"Invalid parameter digits: {digits} (must be >= 0)")
    return digits


def normalize_price(price: float, digits: int) -> float:
    """
    Округлить цену до digits знаков (half-up, как округляет терминал)

    Округление идёт по десятичному представлению числа, поэтому
    1.00005 при digits=4 даёт 1.0001, а не 1.0 из-за двоичной погрешности.
    """
    check_digits(digits)
    price = float(price)
    if not math.isfinite(price):
        raise ValueError(f"Price is not finite: {price}")
    value = Decimal(repr(price))
    # точность контекста: целая часть + digits знаков после запятой
    context = Context(prec=max(value.adjusted(), 0) + digits + 2, rounding=ROUND_HALF_UP)
    try:
        return float(value.quantize(Decimal(1).scaleb(-digits), context=context))
    except InvalidOperation as e:
        raise ValueError(f"Cannot round {price} to {digits} digits") from e
