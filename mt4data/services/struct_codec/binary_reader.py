"""
Бинарный читатель структур MetaTrader (little-endian)
"""

import struct

from .endianness import unpack_double

_UINT32 = struct.Struct('<I')


class BinaryReader:
    """Читатель полей фиксированной ширины с курсором"""

    __slots__ = ('_data', '_view', '_pos', '_len')

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._view = memoryview(self._data)
        self._pos = 0
        self._len = len(self._data)

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._len - self._pos

    def _check_bounds(self, size: int) -> None:
        if self._pos + size > self._len:
            raise EOFError(f"Read beyond bounds: pos={self._pos}, need={size}, len={self._len}")

    def read_uint32(self) -> int:
        """Читает uint32 (4 байта)"""
        self._check_bounds(4)
        value = _UINT32.unpack_from(self._view, self._pos)[0]
        self._pos += 4
        return value

    def read_double(self) -> float:
        """Читает double (8 байт) с нормализацией порядка байт"""
        self._check_bounds(8)
        value = unpack_double(self._data[self._pos:self._pos + 8])
        self._pos += 8
        return value

    def read_bytes(self, size: int) -> bytes:
        """
        Читает size байт как есть

        Для szchar-полей завершающие NUL сохраняются: обрезку решает вызывающий код.
        """
        self._check_bounds(size)
        value = self._data[self._pos:self._pos + size]
        self._pos += size
        return value

    def skip(self, size: int) -> None:
        """Пропускает указанное количество байт"""
        self._check_bounds(size)
        self._pos += size
