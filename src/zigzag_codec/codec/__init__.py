"""Zigzag codec for fixed-width integers.

This module provides the signed <-> unsigned zigzag transformation for
8, 16, 32, 64, 128-bit and pointer-sized integers.
"""

from __future__ import annotations

from .widths import (
    POINTER_BITS,
    SUPPORTED_WIDTHS,
    W8,
    W16,
    W32,
    W64,
    W128,
    WSIZE,
    IntWidth,
    get_width,
)
from .zigzag import (
    CODECS,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
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
)

__all__ = [
    # Widths
    "IntWidth",
    "get_width",
    "POINTER_BITS",
    "SUPPORTED_WIDTHS",
    "W8",
    "W16",
    "W32",
    "W64",
    "W128",
    "WSIZE",
    # Codecs
    "ZigZagCodec",
    "get_codec",
    "CODECS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "encode",
    "decode",
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
]
