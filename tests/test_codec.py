"""
Тесты кодека бинарных структур
"""
import random
import string
import struct

import pytest

from mt4data.services.struct_codec import (
    FieldKind,
    FieldValueError,
    MissingFieldError,
    SizeMismatchError,
    StructKind,
    UnknownFieldError,
    compile_format,
    decode,
    encode,
    iter_decode,
    read_records,
    sz_to_str,
)
from mt4data.services.struct_codec.constants import UINT32_MAX


def random_values(rng: random.Random, kind, version=None) -> dict:
    """Случайные значения всех именованных полей структуры"""
    values = {}
    for name, field_kind, width in compile_format(kind, version).named_codes():
        if field_kind == FieldKind.UINT32:
            values[name] = rng.randint(0, UINT32_MAX)
        elif field_kind == FieldKind.DOUBLE:
            values[name] = rng.uniform(-1e6, 1e6)
        elif field_kind == FieldKind.SZCHAR:
            text = "".join(rng.choice(string.ascii_uppercase) for _ in range(rng.randint(0, width - 1)))
            values[name] = text.encode("ascii").ljust(width, b"\x00")
        else:
            values[name] = bytes(rng.randrange(256) for _ in range(width))
    return values


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("kind, version", [
    (StructKind.SYMBOL, None),
    (StructKind.SYMBOL_GROUP, None),
    (StructKind.HISTORY_BAR, 400),
    (StructKind.HISTORY_BAR, 401),
    (StructKind.FXT_HEADER, None),
])
def test_round_trip(kind, version, seed):
    """decode(encode(v)) == v и encode(decode(b)) == b"""
    values = random_values(random.Random(seed), kind, version)

    buffer = encode(kind, values, version)
    assert len(buffer) == compile_format(kind, version).size
    assert decode(kind, buffer, version) == values
    assert encode(kind, decode(kind, buffer, version), version) == buffer


def test_decode_history_bar_400():
    buffer = struct.pack("<I5d", 1700000000, 1.1, 1.0, 1.2, 1.15, 42.0)

    assert decode("history_bar", buffer, 400) == {
        "time": 1700000000,
        "open": 1.1,
        "low": 1.0,
        "high": 1.2,
        "close": 1.15,
        "ticks": 42.0,
    }


def test_encode_history_bar_401_layout():
    """Выравнивания и старшие dword 64-битных слотов заполнены нулями"""
    values = {
        "time": 1700000000, "open": 1.1, "high": 1.2, "low": 1.0, "close": 1.15,
        "ticks": 42, "spread": 3, "volume": 1000,
    }
    expected = struct.pack("<I4x4dI4xII4x", 1700000000, 1.1, 1.2, 1.0, 1.15, 42, 3, 1000)

    assert encode(StructKind.HISTORY_BAR, values, 401) == expected


def test_szchar_keeps_trailing_nul():
    """Строковые поля декодируются без обрезки NUL"""
    buffer = encode("symbol_group", {"name": "Forex", "description": b"Major pairs"})
    group = decode("symbol_group", buffer)

    assert group["name"] == b"Forex" + b"\x00" * 11
    assert len(group["description"]) == 64
    assert sz_to_str(group["name"]) == "Forex"
    assert sz_to_str(group["description"]) == "Major pairs"


def test_str_values_use_symbol_encoding():
    buffer = encode("symbol_group", {"name": "Indices", "description": "Dow Jones • S&P"})
    group = decode("symbol_group", buffer)

    assert group["description"].startswith("Dow Jones • S&P".encode("cp1252"))
    assert sz_to_str(group["description"]) == "Dow Jones • S&P"


def test_missing_field(rng):
    values = random_values(rng, StructKind.SYMBOL)
    del values["digits"]

    with pytest.raises(MissingFieldError) as exc_info:
        encode(StructKind.SYMBOL, values)

    assert exc_info.value.fields == ("digits",)
    assert isinstance(exc_info.value, KeyError)


def test_unknown_field(rng):
    values = random_values(rng, StructKind.HISTORY_BAR, 400)
    values["spread"] = 3

    with pytest.raises(UnknownFieldError) as exc_info:
        encode(StructKind.HISTORY_BAR, values, 400)

    assert exc_info.value.fields == ("spread",)


def test_missing_reported_before_unknown():
    with pytest.raises(MissingFieldError):
        encode("symbol_group", {"name": b"Forex", "comment": b""})


@pytest.mark.parametrize("length", [0, 79, 81, 160])
def test_size_mismatch(length):
    with pytest.raises(SizeMismatchError) as exc_info:
        decode("symbol_group", bytes(length))

    assert exc_info.value.expected == 80
    assert exc_info.value.actual == length


@pytest.mark.parametrize("field, value", [
    ("name", b"X" * 17),
    ("name", 12),
    ("description", "中文"),
])
def test_invalid_string_value(field, value):
    values = {"name": b"Forex", "description": b""}
    values[field] = value

    with pytest.raises(FieldValueError) as exc_info:
        encode("symbol_group", values)

    assert exc_info.value.field == field


@pytest.mark.parametrize("field, value", [
    ("time", -1),
    ("time", UINT32_MAX + 1),
    ("time", 1.5),
    ("open", "1.1"),
    ("open", None),
])
def test_invalid_numeric_value(field, value):
    values = {"time": 0, "open": 1.0, "low": 1.0, "high": 1.0, "close": 1.0, "ticks": 1.0}
    values[field] = value

    with pytest.raises(FieldValueError):
        encode("history_bar", values, 400)


def test_string_filling_whole_field():
    buffer = encode("symbol_group", {"name": b"A" * 16, "description": b""})

    assert decode("symbol_group", buffer)["name"] == b"A" * 16


def test_iter_decode():
    records = [
        encode("symbol_group", {"name": name, "description": b""})
        for name in ("Forex", "Metals", "Indices")
    ]

    groups = list(iter_decode("symbol_group", b"".join(records)))

    assert [sz_to_str(group["name"]) for group in groups] == ["Forex", "Metals", "Indices"]


def test_iter_decode_partial_record():
    with pytest.raises(SizeMismatchError):
        list(iter_decode("symbol_group", bytes(81)))


def test_read_records(tmp_path, rng):
    symbols = [random_values(rng, StructKind.SYMBOL) for _ in range(3)]
    path = tmp_path / "symbols.raw"
    path.write_bytes(b"".join(encode(StructKind.SYMBOL, values) for values in symbols))

    assert read_records(path, StructKind.SYMBOL) == symbols


@pytest.mark.parametrize("seed", range(3))
@pytest.mark.parametrize("kind, version", [
    (StructKind.SYMBOL, None),
    (StructKind.HISTORY_BAR, 400),
    (StructKind.HISTORY_BAR, 401),
])
def test_round_trip_on_big_endian_host(big_endian_host, kind, version, seed):
    values = random_values(random.Random(seed), kind, version)

    assert decode(kind, encode(kind, values, version), version) == values


@pytest.mark.parametrize("length", [0, 40, 43, 45, 60, 88])
def test_history_bar_400_size_mismatch(length):
    with pytest.raises(SizeMismatchError):
        decode("history_bar", bytes(length), 400)


def test_first_invalid_field_in_layout_order():
    """Значения проверяются в порядке полей структуры до записи"""
    values = {"time": -1, "open": "x", "low": 1.0, "high": 1.0, "close": 1.0, "ticks": None}

    with pytest.raises(FieldValueError) as exc_info:
        encode("history_bar", values, 400)

    assert exc_info.value.field == "time"
