"""zigzag_codec: Zigzag Integer Encoding

A Python library for mapping signed integers to unsigned integers of the same
width (and back) using zigzag encoding, as used by protocol buffer varints.
Small-magnitude values, positive or negative, map to small unsigned values.

Key Features:
- 8, 16, 32, 64, 128-bit and pointer-sized widths
- Exact bit-level formulas, no overflow at the minimum signed value
- Pydantic field types that dump signed values zigzag-encoded
- Pure Python implementation

Quick Start:
    >>> from zigzag_codec import I8, encode, decode
    >>> I8.encode(-128)
    255
    >>> encode(-3, bits=32)
    5
    >>> decode(5, bits=32)
    -3
"""

from __future__ import annotations

from .codec import (
    CODECS,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    POINTER_BITS,
    SUPPORTED_WIDTHS,
    IntWidth,
    ZigZagCodec,
    decode,
    decode_u8,
    decode_u16,
    decode_u32,
    decode_u64,
    decode_u128,
    decode_usize,
    encode,
    encode_i8,
    encode_i16,
    encode_i32,
    encode_i64,
    encode_i128,
    encode_isize,
    get_codec,
    get_width,
)
from .exceptions import DecodeError, EncodeError, WidthError, ZigZagError
from .models import (
    SignedInt,
    UnsignedInt,
    ZigZagInt8,
    ZigZagInt16,
    ZigZagInt32,
    ZigZagInt64,
    ZigZagInt128,
    ZigZagIntSize,
    ZigZagWire8,
    ZigZagWire16,
    ZigZagWire32,
    ZigZagWire64,
    ZigZagWire128,
    ZigZagWireSize,
    zigzag_int,
    zigzag_wire,
)
from .utils import encoded_bits, interleaved

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "ZigZagCodec",
    "get_codec",
    "CODECS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    # Per-width functions
    "encode_i8",
    "encode_i16",
    "encode_i32",
    "encode_i64",
    "encode_i128",
    "encode_isize",
    "decode_u8",
    "decode_u16",
    "decode_u32",
    "decode_u64",
    "decode_u128",
    "decode_usize",
    # Widths
    "IntWidth",
    "get_width",
    "POINTER_BITS",
    "SUPPORTED_WIDTHS",
    # Field helpers
    "SignedInt",
    "UnsignedInt",
    "zigzag_int",
    "zigzag_wire",
    "ZigZagInt8",
    "ZigZagInt16",
    "ZigZagInt32",
    "ZigZagInt64",
    "ZigZagInt128",
    "ZigZagIntSize",
    "ZigZagWire8",
    "ZigZagWire16",
    "ZigZagWire32",
    "ZigZagWire64",
    "ZigZagWire128",
    "ZigZagWireSize",
    # Exceptions
    "ZigZagError",
    "WidthError",
    "EncodeError",
    "DecodeError",
    # Sizing
    "encoded_bits",
    "interleaved",
    # Version
    "__version__",
]
