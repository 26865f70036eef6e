"""
Кодек бинарных структур: bytes <-> dict

decode/encode работают по скомпилированному формату (см. compiler.py):
- szchar/raw поля возвращаются как bytes без обрезки NUL
- uint32 - как int
- double - как float (через нормализатор порядка байт)
"""

import logging
import numbers
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from mt4data.config import get_settings

from .binary_reader import BinaryReader
from .binary_writer import BinaryWriter
from .compiler import compile_format
from .constants import UINT32_MAX
from .errors import (
    FieldValueError,
    MissingFieldError,
    SizeMismatchError,
    UnknownFieldError,
)
from .models import CompiledFormat, FieldKind, StructKind

logger = logging.getLogger(__name__)


def _default_encoding() -> str:
    return get_settings().SYMBOL_ENCODING


def decode_format(compiled: CompiledFormat, buffer: bytes) -> Dict[str, Any]:
    """
    Декодировать буфер по скомпилированному формату

    Raises:
        SizeMismatchError: длина буфера не равна размеру структуры
    """
    if len(buffer) != compiled.size:
        raise SizeMismatchError(compiled.size, len(buffer))

    reader = BinaryReader(buffer)
    result: Dict[str, Any] = {}
    names = iter(compiled.field_names)

    for kind, width in compiled.codes:
        if kind == FieldKind.PAD:
            reader.skip(width)
        elif kind == FieldKind.UINT32:
            result[next(names)] = reader.read_uint32()
        elif kind == FieldKind.DOUBLE:
            result[next(names)] = reader.read_double()
        else:
            result[next(names)] = reader.read_bytes(width)

    return result


def _check_field_set(compiled: CompiledFormat, values: Mapping[str, Any]) -> None:
    missing = [name for name in compiled.field_names if name not in values]
    if missing:
        raise MissingFieldError(missing)

    known = set(compiled.field_names)
    unknown = [name for name in values if name not in known]
    if unknown:
        raise UnknownFieldError(unknown)


def _to_bytes(name: str, value: Any, width: int, encoding: str) -> bytes:
    if isinstance(value, str):
        try:
            value = value.encode(encoding)
        except UnicodeEncodeError as e:
            raise FieldValueError(name, f"cannot encode {value!r} as {encoding}") from e
    elif isinstance(value, (bytearray, memoryview)):
        value = bytes(value)
    elif not isinstance(value, bytes):
        raise FieldValueError(name, f"expected bytes or str, got {type(value).__name__}")

    if len(value) > width:
        raise FieldValueError(name, f"{len(value)} bytes do not fit into {width}")
    return value


def _to_uint32(name: str, value: Any) -> int:
    if not isinstance(value, numbers.Integral):
        raise FieldValueError(name, f"expected int, got {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise FieldValueError(name, f"{value} is out of uint32 range")
    return value


def _to_double(name: str, value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise FieldValueError(name, f"expected a number, got {type(value).__name__}")
    return float(value)


def encode_format(
    compiled: CompiledFormat,
    values: Mapping[str, Any],
    encoding: Optional[str] = None,
) -> bytes:
    """
    Закодировать значения полей в буфер ровно compiled.size байт

    Raises:
        MissingFieldError: не переданы обязательные поля
        UnknownFieldError: переданы лишние поля
        FieldValueError: значение не помещается в поле
    """
    _check_field_set(compiled, values)
    encoding = encoding or _default_encoding()

    # все значения проверяются до записи первого байта
    converted = []
    for name, kind, width in compiled.named_codes():
        value = values[name]
        if kind == FieldKind.UINT32:
            converted.append(_to_uint32(name, value))
        elif kind == FieldKind.DOUBLE:
            converted.append(_to_double(name, value))
        else:
            converted.append(_to_bytes(name, value, width, encoding))

    writer = BinaryWriter(compiled.size)
    pending = iter(converted)

    for kind, width in compiled.codes:
        if kind == FieldKind.PAD:
            writer.skip(width)
        elif kind == FieldKind.UINT32:
            writer.write_uint32(next(pending))
        elif kind == FieldKind.DOUBLE:
            writer.write_double(next(pending))
        else:
            writer.write_bytes(next(pending), width)

    return writer.getvalue()


def decode(
    kind: Union[StructKind, str],
    buffer: bytes,
    version: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Декодировать структуру

    Args:
        kind: Вид структуры
        buffer: Байты ровно одной структуры
        version: Версия (400/401 для баров истории)
    """
    return decode_format(compile_format(kind, version), buffer)


def encode(
    kind: Union[StructKind, str],
    values: Mapping[str, Any],
    version: Optional[int] = None,
    encoding: Optional[str] = None,
) -> bytes:
    """
    Закодировать структуру

    Args:
        kind: Вид структуры
        values: Значения всех именованных полей
        version: Версия (400/401 для баров истории)
        encoding: Кодировка для str-значений szchar-полей
    """
    return encode_format(compile_format(kind, version), values, encoding)


def iter_decode(
    kind: Union[StructKind, str],
    data: bytes,
    version: Optional[int] = None,
) -> Iterator[Dict[str, Any]]:
    """
    Декодировать последовательность структур (например, содержимое symbols.raw)

    Raises:
        SizeMismatchError: длина данных не кратна размеру структуры
    """
    compiled = compile_format(kind, version)
    size = compiled.size
    if len(data) % size:
        raise SizeMismatchError(
            (len(data) // size + 1) * size, len(data), what="record sequence"
        )

    view = memoryview(data)
    for offset in range(0, len(data), size):
        yield decode_format(compiled, view[offset:offset + size].tobytes())


def read_records(
    path: Union[str, Path],
    kind: Union[StructKind, str],
    version: Optional[int] = None,
) -> list:
    """Прочитать файл, состоящий из последовательных структур одного вида"""
    path = Path(path)
    data = path.read_bytes()
    records = list(iter_decode(kind, data, version))
    logger.info(f"[STRUCT-CODEC] Read {len(records)} {StructKind(kind).value} record(s) from {path.name}")
    return records


def sz_to_str(raw: bytes, encoding: Optional[str] = None) -> str:
    """szchar-поле -> str (до первого NUL)"""
    encoding = encoding or _default_encoding()
    return raw.split(b"\x00", 1)[0].decode(encoding, errors="replace")
