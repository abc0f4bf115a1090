"""Pydantic field helpers for zigzag_codec.

This module provides width-bounded integer fields and annotated types that
store signed values and serialize them in zigzag-encoded form.
"""

from __future__ import annotations

from .fields import (
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

__all__ = [
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
]
