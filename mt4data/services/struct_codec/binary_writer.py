"""
Бинарный писатель структур MetaTrader (little-endian)
"""

import struct

from .endianness import pack_double

_UINT32 = struct.Struct('<I')


class BinaryWriter:
    """Писатель полей фиксированной ширины в буфер заданного размера"""

    __slots__ = ('_buffer', '_pos')

    def __init__(self, size: int) -> None:
        self._buffer = bytearray(size)  # выравнивания остаются нулевыми
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def _check_bounds(self, size: int) -> None:
        if self._pos + size > len(self._buffer):
            raise EOFError(f"Write beyond bounds: pos={self._pos}, need={size}, len={len(self._buffer)}")

    def write_uint32(self, value: int) -> None:
        self._check_bounds(4)
        _UINT32.pack_into(self._buffer, self._pos, value)
        self._pos += 4

    def write_double(self, value: float) -> None:
        self._check_bounds(8)
        self._buffer[self._pos:self._pos + 8] = pack_double(value)
        self._pos += 8

    def write_bytes(self, value: bytes, width: int) -> None:
        """Записывает байты в поле ширины width, остаток заполняется NUL"""
        if len(value) > width:
            raise ValueError(f"{len(value)} bytes do not fit into {width}")
        self._check_bounds(width)
        self._buffer[self._pos:self._pos + len(value)] = value
        self._pos += width

    def skip(self, size: int) -> None:
        self._check_bounds(size)
        self._pos += size

    def getvalue(self) -> bytes:
        return bytes(self._buffer)
