"""
Ошибки кодека бинарных структур

Все ошибки наследуются от MetaTraderError, дополнительно - от подходящего
встроенного исключения, чтобы вызывающий код мог ловить их привычным образом.
"""

from typing import Iterable, Optional


class MetaTraderError(Exception):
    """Базовая ошибка работы с форматами MetaTrader"""


class LayoutError(MetaTraderError):
    """Описание структуры не совпадает с её объявленным размером (ошибка программиста)"""


class UnsupportedVersionError(MetaTraderError, ValueError):
    """Запрошенная версия структуры не поддерживается"""

    def __init__(self, kind: str, version: Optional[int], supported: Iterable[Optional[int]]):
        self.kind = kind
        self.version = version
        self.supported = tuple(supported)
        super().__init__(
            f"version.unsupported: invalid {kind} version {version!r} "
            f"(must be one of {', '.join(repr(v) for v in self.supported)})"
        )


class SizeMismatchError(MetaTraderError, ValueError):
    """Длина буфера не совпадает с размером структуры"""

    def __init__(self, expected: int, actual: int, what: str = "buffer"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} size mismatch: expected {expected} bytes, got {actual}")


class MissingFieldError(MetaTraderError, KeyError):
    """Для кодирования не переданы обязательные поля"""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(f"missing field(s): {', '.join(self.fields)}")

    def __str__(self):
        return self.args[0]


class UnknownFieldError(MetaTraderError, KeyError):
    """Для кодирования переданы поля, которых нет в структуре"""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(f"unknown field(s): {', '.join(self.fields)}")

    def __str__(self):
        return self.args[0]


class FieldValueError(MetaTraderError, ValueError):
    """Значение не помещается в поле структуры"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"field '{field}': {message}")


class InvalidBarError(MetaTraderError, ValueError):
    """Бар истории нарушает ценовые инварианты"""


class IoFailureError(MetaTraderError, OSError):
    """Ошибка записи в поток или файловую систему"""
