"""
Нормализация порядка байт

На диске все поля little-endian. uint32 упаковываются явным '<I',
а double упаковываются в нативном порядке хоста и при необходимости
переворачиваются: единственное место, где решается порядок байт.
"""

import struct
import sys

_HOST_LITTLE_ENDIAN = sys.byteorder == "little"

_DOUBLE_LE = struct.Struct("<d")
_DOUBLE_BE = struct.Struct(">d")


def is_little_endian_host() -> bool:
    """Little-endian ли хост (определяется один раз при импорте)"""
    return _HOST_LITTLE_ENDIAN


def normalize_double_bytes(raw: bytes) -> bytes:
    """
    Привести 8 байт double к little-endian (и обратно)

    На little-endian хосте возвращает вход без изменений, на big-endian -
    байты в обратном порядке. Операция симметрична.
    """
    if len(raw) != 8:
        raise ValueError(f"double must be 8 bytes, got {len(raw)}")
    if is_little_endian_host():
        return bytes(raw)
    return bytes(raw[::-1])


def _native_double() -> struct.Struct:
    return _DOUBLE_LE if is_little_endian_host() else _DOUBLE_BE


def pack_double(value: float) -> bytes:
    """double -> 8 байт little-endian"""
    return normalize_double_bytes(_native_double().pack(value))


def unpack_double(raw: bytes) -> float:
    """8 байт little-endian -> double"""
    return _native_double().unpack(normalize_double_bytes(raw))[0]
