"""
Запись баров истории (*.hst)

Порядок записи одного бара:
    Idle -> Validating -> Normalizing -> Encoding -> Written
    Idle -> Rejected (InvalidBarError, в поток ничего не записано)

Поток не сбрасывается и не закрывается - это ответственность вызывающего кода.
"""

import logging
from typing import BinaryIO, Iterable, List, Union

from mt4data.services.struct_codec.codec import encode_format, iter_decode
from mt4data.services.struct_codec.compiler import compile_format
from mt4data.services.struct_codec.errors import FieldValueError, InvalidBarError, IoFailureError
from mt4data.services.struct_codec.models import StructKind

from .models import HistoryBar, check_version
from .normalizer import check_digits

logger = logging.getLogger(__name__)


def _prepare_bar(bar: HistoryBar, digits: int, version: int) -> bytes:
    """Нормализовать, проверить и закодировать бар"""
    try:
        bar = bar.normalized(digits)
    except (ValueError, TypeError) as e:
        raise InvalidBarError(f"Illegal history bar of {bar.describe()}: {e}") from e

    bar.validate()
    try:
        return encode_format(compile_format(StructKind.HISTORY_BAR, version), bar.to_fields(version))
    except FieldValueError as e:
        raise InvalidBarError(f"Illegal history bar of {bar.describe()}: {e}") from e


def _append(stream: BinaryIO, data: bytes) -> int:
    try:
        written = stream.write(data)
    except OSError as e:
        raise IoFailureError(f"Failed to write {len(data)} bytes: {e}") from e
    return len(data) if written is None else written


def write_history_bar(
    stream: BinaryIO,
    digits: int,
    version: int,
    time: int,
    open_: float,
    high: float,
    low: float,
    close: float,
    ticks: Union[int, float],
    spread: int = 0,
    volume: int = 0,
) -> int:
    """
    Записать один бар в поток файла истории. Перед записью бар нормализуется и проверяется.

    Args:
        stream: Бинарный поток файла истории, открытый на запись
        digits: Digits символа (для нормализации цен)
        version: Версия бара: 400 или 401
        time: Timestamp бара
        open_, high, low, close: Цены бара
        ticks: Количество тиков (> 0)
        spread: Спред (только v401)
        volume: Реальный объём (только v401)

    Returns:
        Количество записанных байт

    Raises:
        UnsupportedVersionError: версия не 400 и не 401 (до любого ввода-вывода)
        InvalidBarError: бар нарушает инварианты, в поток ничего не записано
        IoFailureError: ошибка записи в поток
    """
    check_version(version)
    check_digits(digits)

    bar = HistoryBar(time, open_, high, low, close, ticks, spread, volume)
    data = _prepare_bar(bar, digits, version)
    return _append(stream, data)


def write_history_bars(
    stream: BinaryIO,
    digits: int,
    version: int,
    bars: Iterable[HistoryBar],
    skip_invalid: bool = False,
) -> int:
    """
    Записать последовательность баров одним блоком

    Все бары проверяются до записи. При skip_invalid=False первый ошибочный бар
    прерывает операцию и в поток ничего не пишется; при skip_invalid=True
    ошибочные бары пропускаются с предупреждением.

    Returns:
        Количество записанных байт
    """
    check_version(version)
    check_digits(digits)

    chunks: List[bytes] = []
    skipped = 0
    for bar in bars:
        try:
            chunks.append(_prepare_bar(bar, digits, version))
        except InvalidBarError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"[HISTORY-WRITER] Skipped: {e}")

    if skipped:
        logger.info(f"[HISTORY-WRITER] {skipped} invalid bar(s) skipped, {len(chunks)} written")

    if not chunks:
        return 0
    return _append(stream, b"".join(chunks))


def read_history_bars(data: bytes, version: int) -> List[HistoryBar]:
    """
    Прочитать бары из блока данных (без 148-байтового заголовка файла)

    Raises:
        SizeMismatchError: длина данных не кратна размеру бара
    """
    check_version(version)
    return [
        HistoryBar.from_fields(fields, version)
        for fields in iter_decode(StructKind.HISTORY_BAR, data, version)
    ]
