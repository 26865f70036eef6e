"""
Модели данных кодека бинарных структур
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class StructKind(str, Enum):
    """Вид структуры терминала"""
    SYMBOL = "symbol"
    SYMBOL_GROUP = "symbol_group"
    HISTORY_BAR = "history_bar"
    FXT_HEADER = "fxt_header"


class FieldKind(str, Enum):
    """Тип поля структуры"""
    SZCHAR = "a"     # строка фиксированной длины, дополнена NUL
    UINT32 = "V"     # uint32 little-endian
    DOUBLE = "d"     # IEEE-754 double little-endian
    RAW = "H"        # непрозрачные байты
    PAD = "x"        # выравнивание / неизвестная область (пропускается)


# struct-коды для каждого типа (double хранится как 8 сырых байт,
# порядок байт нормализуется отдельно)
STRUCT_CODES = {
    FieldKind.SZCHAR: "s",
    FieldKind.UINT32: "I",
    FieldKind.DOUBLE: "s",
    FieldKind.RAW: "s",
    FieldKind.PAD: "x",
}


@dataclass(frozen=True)
class FieldSpec:
    """Запись описания структуры: именованное поле или выравнивание"""
    name: Optional[str]   # None = выравнивание
    kind: FieldKind
    width: int
    note: str = ""        # C-тип / комментарий, в имена полей не попадает

    @property
    def is_padding(self) -> bool:
        return self.name is None


@dataclass(frozen=True)
class LayoutDescriptor:
    """Декларативное описание структуры"""
    kind: StructKind
    version: Optional[int]
    size: int
    fields: Tuple[FieldSpec, ...]


@dataclass(frozen=True)
class CompiledFormat:
    """Скомпилированный формат структуры"""
    field_names: Tuple[str, ...]
    codes: Tuple[Tuple[FieldKind, int], ...]

    @property
    def size(self) -> int:
        """Полный размер структуры в байтах"""
        return sum(width for _, width in self.codes)

    @property
    def format_string(self) -> str:
        """Эквивалентная строка формата модуля struct (little-endian)"""
        parts = []
        for kind, width in self.codes:
            code = STRUCT_CODES[kind]
            if kind == FieldKind.UINT32:
                parts.append(code)
            else:
                parts.append(f"{width}{code}")
        return "<" + "".join(parts)

    def named_codes(self):
        """Итератор (name, kind, width) без выравниваний"""
        names = iter(self.field_names)
        for kind, width in self.codes:
            if kind != FieldKind.PAD:
                yield next(names), kind, width
