"""
Тесты нормализатора порядка байт
"""
import struct

import pytest

from mt4data.services.struct_codec import (
    decode,
    encode,
    is_little_endian_host,
    normalize_double_bytes,
    pack_double,
    unpack_double,
)

BAR = {"time": 1700000000, "open": 1.1, "low": 1.0, "high": 1.2, "close": 1.15, "ticks": 42.0}


@pytest.mark.parametrize("value", [0.0, -0.0, 1.5, 1.23457, -98765.4321, 1e-300, float("inf")])
def test_pack_double_is_little_endian(value):
    assert pack_double(value) == struct.pack("<d", value)
    assert unpack_double(struct.pack("<d", value)) == value


@pytest.mark.parametrize("value", [1.5, 1.23457, -98765.4321])
def test_pack_double_on_big_endian_host(big_endian_host, value):
    """На big-endian хосте байты на диске остаются little-endian"""
    assert not is_little_endian_host()
    assert pack_double(value) == struct.pack("<d", value)
    assert unpack_double(struct.pack("<d", value)) == value


def test_normalize_is_identity_on_little_endian(monkeypatch):
    from mt4data.services.struct_codec import endianness
    monkeypatch.setattr(endianness, "_HOST_LITTLE_ENDIAN", True)

    raw = bytes(range(8))
    assert normalize_double_bytes(raw) == raw


def test_normalize_reverses_on_big_endian(big_endian_host):
    raw = bytes(range(8))

    assert normalize_double_bytes(raw) == bytes(reversed(raw))
    assert normalize_double_bytes(normalize_double_bytes(raw)) == raw


@pytest.mark.parametrize("length", [0, 4, 7, 9])
def test_normalize_requires_eight_bytes(length):
    with pytest.raises(ValueError):
        normalize_double_bytes(bytes(length))


def test_encoded_struct_identical_across_hosts(monkeypatch):
    """Закодированная структура не зависит от порядка байт хоста"""
    from mt4data.services.struct_codec import endianness

    monkeypatch.setattr(endianness, "_HOST_LITTLE_ENDIAN", True)
    little = encode("history_bar", BAR, 400)

    monkeypatch.setattr(endianness, "_HOST_LITTLE_ENDIAN", False)
    big = encode("history_bar", BAR, 400)

    assert big == little == struct.pack("<I5d", 1700000000, 1.1, 1.0, 1.2, 1.15, 42.0)
    assert decode("history_bar", big, 400) == BAR
