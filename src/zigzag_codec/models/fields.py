"""Field type helpers and utilities.

This module provides convenience functions and annotated types for declaring
width-checked integer fields on Pydantic models, including fields that are
stored as signed values and serialized in zigzag-encoded form.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import AfterValidator, Field, PlainSerializer
from pydantic.fields import FieldInfo

from ..codec.widths import WidthLike, get_width
from ..codec.zigzag import get_codec


def SignedInt(bits: WidthLike, **kwargs: Any) -> FieldInfo:
    """Create an integer field bounded to a signed width.

    Args:
        bits: Width (8, 16, 32, 64, 128, "size")
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo with ge= and le= set to the signed range.

    Example:
        >>> class Reading(BaseModel):
        ...     delta: int = SignedInt(16)
    """
    width = get_width(bits)
    return cast(FieldInfo, Field(ge=width.signed_min, le=width.signed_max, **kwargs))


def UnsignedInt(bits: WidthLike, **kwargs: Any) -> FieldInfo:
    """Create an integer field bounded to an unsigned width.

    Args:
        bits: Width (8, 16, 32, 64, 128, "size")
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo with ge=0 and le= set to the unsigned maximum.
    """
    width = get_width(bits)
    return cast(FieldInfo, Field(ge=0, le=width.unsigned_max, **kwargs))


def zigzag_int(bits: WidthLike) -> Any:
    """Build an annotated type for a signed field that dumps zigzag-encoded.

    The field validates a signed integer within the width's range and keeps
    it as is; ``model_dump()`` emits the encoded unsigned value.

    Example:
        >>> class Delta(BaseModel):
        ...     dx: zigzag_int(32)
        >>> Delta(dx=-3).model_dump()
        {'dx': 5}
    """
    width = get_width(bits)
    codec = get_codec(width)
    return Annotated[
        int,
        Field(ge=width.signed_min, le=width.signed_max),
        PlainSerializer(codec.encode, return_type=int),
    ]


def zigzag_wire(bits: WidthLike) -> Any:
    """Build an annotated type for a field that is read zigzag-encoded.

    The field validates an unsigned integer within the width's range, stores
    the decoded signed value, and ``model_dump()`` encodes it again.

    Example:
        >>> class DeltaIn(BaseModel):
        ...     dx: zigzag_wire(32)
        >>> DeltaIn(dx=5).dx
        -3
    """
    width = get_width(bits)
    codec = get_codec(width)
    return Annotated[
        int,
        Field(ge=0, le=width.unsigned_max),
        AfterValidator(codec.decode),
        PlainSerializer(codec.encode, return_type=int),
    ]


ZigZagInt8 = zigzag_int(8)
ZigZagInt16 = zigzag_int(16)
ZigZagInt32 = zigzag_int(32)
ZigZagInt64 = zigzag_int(64)
ZigZagInt128 = zigzag_int(128)
ZigZagIntSize = zigzag_int("size")

ZigZagWire8 = zigzag_wire(8)
ZigZagWire16 = zigzag_wire(16)
ZigZagWire32 = zigzag_wire(32)
ZigZagWire64 = zigzag_wire(64)
ZigZagWire128 = zigzag_wire(128)
ZigZagWireSize = zigzag_wire("size")
