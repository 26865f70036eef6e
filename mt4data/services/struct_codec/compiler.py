"""
Компилятор форматов: описание структуры -> CompiledFormat

Скомпилированные форматы кэшируются на всё время жизни процесса.
Thread-safe: заполнение кэша защищено блокировкой, чтение - без блокировки.
"""

import logging
import struct
import threading
from typing import Dict, Optional, Tuple, Union

from .descriptors import DESCRIPTORS, supported_versions
from .errors import LayoutError, UnsupportedVersionError
from .models import CompiledFormat, FieldKind, LayoutDescriptor, StructKind

logger = logging.getLogger(__name__)

_cache: Dict[Tuple[StructKind, Optional[int]], CompiledFormat] = {}
_cache_lock = threading.Lock()


def compile_descriptor(descriptor: LayoutDescriptor, expected_size: Optional[int] = None) -> CompiledFormat:
    """
    Скомпилировать описание структуры (без кэширования)

    expected_size по умолчанию - объявленный размер descriptor.size.

    Выравнивания не попадают в список имён, но остаются в кодах -
    при декодировании их байты нужно пропустить.

    Raises:
        LayoutError: сумма ширин не равна объявленному размеру
    """
    names = []
    codes = []
    for entry in descriptor.fields:
        if entry.width <= 0:
            raise LayoutError(f"{descriptor.kind.value}: non-positive width {entry.width} ({entry.note})")
        if entry.is_padding:
            codes.append((FieldKind.PAD, entry.width))
            continue
        if entry.kind == FieldKind.PAD:
            raise LayoutError(f"{descriptor.kind.value}: padding entry must not be named: {entry.name}")
        if entry.name in names:
            raise LayoutError(f"{descriptor.kind.value}: duplicate field name: {entry.name}")
        names.append(entry.name)
        codes.append((entry.kind, entry.width))

    compiled = CompiledFormat(field_names=tuple(names), codes=tuple(codes))

    if expected_size is None:
        expected_size = descriptor.size
    if compiled.size != expected_size or struct.calcsize(compiled.format_string) != expected_size:
        raise LayoutError(
            f"{descriptor.kind.value} v{descriptor.version}: layout is {compiled.size} bytes, "
            f"declared size is {expected_size}"
        )
    return compiled


def get_descriptor(kind: Union[StructKind, str], version: Optional[int] = None) -> LayoutDescriptor:
    """
    Найти описание структуры

    Raises:
        UnsupportedVersionError: для вида структуры нет такой версии
    """
    kind = StructKind(kind)
    if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
        raise TypeError(f"Illegal type of parameter version: {type(version).__name__}")

    descriptor = DESCRIPTORS.get((kind, version))
    if descriptor is None:
        raise UnsupportedVersionError(kind.value, version, supported_versions(kind))
    return descriptor


def compile_format(kind: Union[StructKind, str], version: Optional[int] = None) -> CompiledFormat:
    """
    Получить скомпилированный формат структуры (кэшируется)

    Args:
        kind: Вид структуры
        version: Версия (400/401 для баров истории, None для остальных)
    """
    descriptor = get_descriptor(kind, version)
    key = (descriptor.kind, descriptor.version)

    compiled = _cache.get(key)
    if compiled is not None:
        return compiled

    with _cache_lock:
        compiled = _cache.get(key)
        if compiled is None:
            compiled = compile_descriptor(descriptor)
            _cache[key] = compiled
            logger.debug(
                f"[STRUCT-CODEC] Compiled {key[0].value} v{key[1]}: "
                f"{len(compiled.field_names)} fields, {compiled.size} bytes"
            )
    return compiled


def clear_cache() -> None:
    """Очистить кэш форматов (для тестов)"""
    with _cache_lock:
        _cache.clear()
