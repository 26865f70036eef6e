"""
Описания бинарных структур терминала

Источник: MT4Expander.dll::Expander.h. Неизвестные области символа
описаны как выравнивание и при чтении пропускаются.
"""

from typing import Dict, Optional, Tuple

from .constants import (
    FXT_HEADER_SIZE,
    HISTORY_BAR_400_SIZE,
    HISTORY_BAR_401_SIZE,
    SYMBOL_GROUP_SIZE,
    SYMBOL_SIZE,
    UINT32_SIZE,
    DOUBLE_SIZE,
)
from .models import FieldKind, FieldSpec, LayoutDescriptor, StructKind


def _szchar(name: str, width: int, note: str = "szchar") -> FieldSpec:
    return FieldSpec(name, FieldKind.SZCHAR, width, note)


def _uint(name: str, note: str = "uint") -> FieldSpec:
    return FieldSpec(name, FieldKind.UINT32, UINT32_SIZE, note)


def _double(name: str, note: str = "double") -> FieldSpec:
    return FieldSpec(name, FieldKind.DOUBLE, DOUBLE_SIZE, note)


def _raw(name: str, width: int, note: str = "") -> FieldSpec:
    return FieldSpec(name, FieldKind.RAW, width, note)


def _pad(width: int, note: str = "alignment") -> FieldSpec:
    return FieldSpec(None, FieldKind.PAD, width, note)


SYMBOL = LayoutDescriptor(
    kind=StructKind.SYMBOL,
    version=None,
    size=SYMBOL_SIZE,
    fields=(
        _szchar("name", 12),
        _szchar("description", 54),
        _szchar("origin", 10, "szchar (custom)"),
        _szchar("alt_name", 12),
        _szchar("base_currency", 12),
        _uint("group"),
        _uint("digits"),
        _uint("trade_mode"),
        _uint("background_color"),
        _uint("array_key"),
        _uint("id"),
        _pad(32, "unknown1:char32"),
        _pad(208, "mon:char208"),
        _pad(208, "tue:char208"),
        _pad(208, "wed:char208"),
        _pad(208, "thu:char208"),
        _pad(208, "fri:char208"),
        _pad(208, "sat:char208"),
        _pad(208, "sun:char208"),
        _pad(16, "unknown2:char16"),
        _uint("unknown3", "int"),
        _uint("unknown4", "int"),
        _pad(4),
        _double("unknown5"),
        _raw("unknown6", 12, "char12"),
        _uint("spread"),
        _raw("unknown7", 8, "char8"),
        _uint("swap_enabled", "bool"),
        _uint("swap_type"),
        _double("swap_long_value"),
        _double("swap_short_value"),
        _uint("swap_triple_rollover_day"),
        _pad(4),
        _double("contract_size"),
        _pad(16, "unknown8:char16"),
        _uint("stop_distance"),
        _pad(8, "unknown9:char8"),
        _pad(4),
        _double("margin_init"),
        _double("margin_maintenance"),
        _double("margin_hedged"),
        _double("margin_divider"),
        _double("point_size"),
        _double("points_per_unit"),
        _pad(24, "unknown10:char24"),
        _szchar("margin_currency", 12),
        _pad(104, "unknown11:char104"),
        _uint("unknown12", "int"),
    ),
)

SYMBOL_GROUP = LayoutDescriptor(
    kind=StructKind.SYMBOL_GROUP,
    version=None,
    size=SYMBOL_GROUP_SIZE,
    fields=(
        _szchar("name", 16),
        _szchar("description", 64),
    ),
)

HISTORY_BAR_400 = LayoutDescriptor(
    kind=StructKind.HISTORY_BAR,
    version=400,
    size=HISTORY_BAR_400_SIZE,
    fields=(
        _uint("time"),
        _double("open"),
        _double("low"),
        _double("high"),
        _double("close"),
        _double("ticks"),
    ),
)

# int64/uint64-слоты хранятся как младший dword + нулевой старший dword
HISTORY_BAR_401 = LayoutDescriptor(
    kind=StructKind.HISTORY_BAR,
    version=401,
    size=HISTORY_BAR_401_SIZE,
    fields=(
        _uint("time", "uint (int64)"),
        _pad(4),
        _double("open"),
        _double("high"),
        _double("low"),
        _double("close"),
        _uint("ticks", "uint (uint64)"),
        _pad(4),
        _uint("spread"),
        _uint("volume", "uint (uint64)"),
        _pad(4),
    ),
)

FXT_HEADER = LayoutDescriptor(
    kind=StructKind.FXT_HEADER,
    version=None,
    size=FXT_HEADER_SIZE,
    fields=(
        _raw("data", FXT_HEADER_SIZE, "opaque"),
    ),
)


DESCRIPTORS: Dict[Tuple[StructKind, Optional[int]], LayoutDescriptor] = {
    (d.kind, d.version): d
    for d in (SYMBOL, SYMBOL_GROUP, HISTORY_BAR_400, HISTORY_BAR_401, FXT_HEADER)
}


def supported_versions(kind: StructKind) -> Tuple[Optional[int], ...]:
    """Версии, для которых есть описание структуры"""
    return tuple(version for k, version in DESCRIPTORS if k == kind)
