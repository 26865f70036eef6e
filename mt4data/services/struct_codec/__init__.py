"""
Struct Codec - кодек бинарных структур терминала MetaTrader 4

Структуры:
- SYMBOL (symbols.raw, 1936 байт)
- SYMBOL_GROUP (symgroups.raw, 80 байт)
- HISTORY_BAR v400/v401 (*.hst, 44/60 байт)
- FXT_HEADER (*.fxt, 728 байт)

Все многобайтовые поля на диске little-endian.
"""

from .constants import (
    FXT_HEADER_SIZE,
    HISTORY_BAR_400_SIZE,
    HISTORY_BAR_401_SIZE,
    HISTORY_BAR_VERSIONS,
    SYMBOL_SIZE,
    SYMBOL_GROUP_SIZE,
    SYMBOL_SELECTED_SIZE,
)

from .models import (
    StructKind,
    FieldKind,
    FieldSpec,
    LayoutDescriptor,
    CompiledFormat,
)

from .errors import (
    MetaTraderError,
    LayoutError,
    UnsupportedVersionError,
    SizeMismatchError,
    MissingFieldError,
    UnknownFieldError,
    FieldValueError,
    InvalidBarError,
    IoFailureError,
)

from .descriptors import DESCRIPTORS

from .compiler import compile_format, compile_descriptor, get_descriptor

from .endianness import (
    is_little_endian_host,
    normalize_double_bytes,
    pack_double,
    unpack_double,
)

from .binary_reader import BinaryReader
from .binary_writer import BinaryWriter

from .codec import (
    decode,
    encode,
    decode_format,
    encode_format,
    iter_decode,
    read_records,
    sz_to_str,
)


__all__ = [
    # Constants
    'FXT_HEADER_SIZE',
    'HISTORY_BAR_400_SIZE',
    'HISTORY_BAR_401_SIZE',
    'HISTORY_BAR_VERSIONS',
    'SYMBOL_SIZE',
    'SYMBOL_GROUP_SIZE',
    'SYMBOL_SELECTED_SIZE',
    # Models
    'StructKind',
    'FieldKind',
    'FieldSpec',
    'LayoutDescriptor',
    'CompiledFormat',
    'DESCRIPTORS',
    # Errors
    'MetaTraderError',
    'LayoutError',
    'UnsupportedVersionError',
    'SizeMismatchError',
    'MissingFieldError',
    'UnknownFieldError',
    'FieldValueError',
    'InvalidBarError',
    'IoFailureError',
    # Compiler
    'compile_format',
    'compile_descriptor',
    'get_descriptor',
    # Endianness
    'is_little_endian_host',
    'normalize_double_bytes',
    'pack_double',
    'unpack_double',
    # Reader / Writer
    'BinaryReader',
    'BinaryWriter',
    # Codec
    'decode',
    'encode',
    'decode_format',
    'encode_format',
    'iter_decode',
    'read_records',
    'sz_to_str',
]
