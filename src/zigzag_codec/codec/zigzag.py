"""Zigzag encoding and decoding of fixed-width integers.

Zigzag encoding maps a signed integer to an unsigned integer of the same
width by counting up from zero and alternating between non-negative and
negative values::

    signed:   0  -1   1  -2   2  ...  MAX  MIN
    unsigned: 0   1   2   3   4  ...       2^n-1

To encode a signed integer ``x`` of ``n`` bits::

    ((x >> (n - 1)) ^ (x << 1)) & (2^n - 1)

The first term is an arithmetic shift that yields all zeros for ``x >= 0``
and all ones for ``x < 0``; the mask reinterprets the result as unsigned.
To decode an unsigned integer ``y``::

    (y >> 1) ^ -(y & 1)

where ``>>`` is a logical shift (``y`` is never negative). Neither formula
computes an absolute value, so the minimum signed value encodes to the
maximum unsigned value, and back, with no special casing.

Example:
    >>> I8.encode(0), I8.encode(-1), I8.encode(1), I8.encode(-128)
    (0, 1, 2, 255)
    >>> I8.decode(0), I8.decode(1), I8.decode(2), I8.decode(255)
    (0, -1, 1, -128)
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..exceptions import DecodeError, EncodeError
from .widths import W8, W16, W32, W64, W128, WSIZE, IntWidth, WidthLike, get_width

IntFunc = Callable[[int], int]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _make_encoder(width: IntWidth) -> IntFunc:
    # Width constants are bound here, not looked up per call
    shift = width.bits - 1
    mask = width.mask
    lo = width.signed_min
    hi = width.signed_max
    type_name = width.signed_name()

    def encode(value: int) -> int:
        if not _is_int(value):
            raise EncodeError(
                f"{type_name} zigzag encode requires an int, got {type(value).__name__}"
            )
        if value < lo or value > hi:
            raise EncodeError(f"Value {value} out of range for {type_name} (range: {lo} to {hi})")
        return ((value >> shift) ^ (value << 1)) & mask

    encode.__name__ = f"encode_{type_name}"
    encode.__qualname__ = encode.__name__
    encode.__doc__ = f"Zigzag-encode a signed {width.bits}-bit integer."
    return encode


def _make_decoder(width: IntWidth) -> IntFunc:
    hi = width.unsigned_max
    type_name = width.unsigned_name()

    def decode(value: int) -> int:
        if not _is_int(value):
            raise DecodeError(
                f"{type_name} zigzag decode requires an int, got {type(value).__name__}"
            )
        if value < 0 or value > hi:
            raise DecodeError(f"Value {value} out of range for {type_name} (range: 0 to {hi})")
        return (value >> 1) ^ -(value & 1)

    decode.__name__ = f"decode_{type_name}"
    decode.__qualname__ = decode.__name__
    decode.__doc__ = f"Zigzag-decode an unsigned {width.bits}-bit integer."
    return decode


class ZigZagCodec:
    """Zigzag encoder/decoder bound to one integer width.

    Instances are immutable and hold no state beyond the width, so a single
    instance can be shared freely between threads.

    Example:
        >>> codec = ZigZagCodec(W32)
        >>> codec.encode(-3)
        5
        >>> codec.decode(5)
        -3
    """

    __slots__ = ("_width", "_encode", "_decode")

    def __init__(self, width: WidthLike) -> None:
        """Build the codec for the given width.

        Args:
            width: Bit count, width name, or IntWidth

        Raises:
            WidthError: If the width is not supported
        """
        resolved = get_width(width)
        object.__setattr__(self, "_width", resolved)
        object.__setattr__(self, "_encode", _make_encoder(resolved))
        object.__setattr__(self, "_decode", _make_decoder(resolved))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"ZigZagCodec({self._width.signed_name()}<->{self._width.unsigned_name()})"

    @property
    def width(self) -> IntWidth:
        return self._width

    @property
    def bits(self) -> int:
        return self._width.bits

    @property
    def encode(self) -> IntFunc:
        """Encode a signed value to its unsigned zigzag form.

        Raises:
            EncodeError: If the value is not an int in the signed range
        """
        return self._encode

    @property
    def decode(self) -> IntFunc:
        """Decode an unsigned zigzag value to its signed form.

        Raises:
            DecodeError: If the value is not an int in the unsigned range
        """
        return self._decode

    def encode_all(self, values: Iterable[int]) -> list[int]:
        encode = self._encode
        return [encode(value) for value in values]

    def decode_all(self, values: Iterable[int]) -> list[int]:
        decode = self._decode
        return [decode(value) for value in values]


I8 = ZigZagCodec(W8)
I16 = ZigZagCodec(W16)
I32 = ZigZagCodec(W32)
I64 = ZigZagCodec(W64)
I128 = ZigZagCodec(W128)
ISIZE = ZigZagCodec(WSIZE)

CODECS: tuple[ZigZagCodec, ...] = (I8, I16, I32, I64, I128, ISIZE)

_CODECS_BY_WIDTH: dict[IntWidth, ZigZagCodec] = {codec.width: codec for codec in CODECS}

encode_i8, decode_u8 = I8.encode, I8.decode
encode_i16, decode_u16 = I16.encode, I16.decode
encode_i32, decode_u32 = I32.encode, I32.decode
encode_i64, decode_u64 = I64.encode, I64.decode
encode_i128, decode_u128 = I128.encode, I128.decode
encode_isize, decode_usize = ISIZE.encode, ISIZE.decode


def get_codec(width: WidthLike) -> ZigZagCodec:
    """Return the shared codec for a supported width.

    Args:
        width: 8, 16, 32, 64, 128, "size", or an IntWidth

    Raises:
        WidthError: If the width is not supported
    """
    resolved = get_width(width)
    codec = _CODECS_BY_WIDTH.get(resolved)
    if codec is None:
        # Custom IntWidth instances get a codec of their own
        codec = ZigZagCodec(resolved)
    return codec


def encode(value: int, bits: WidthLike = 64) -> int:
    """Zigzag-encode a signed integer at the given width.

    Args:
        value: Signed integer within the width's signed range
        bits: Width (8, 16, 32, 64, 128, "size"), default 64

    Returns:
        Unsigned zigzag value

    Raises:
        WidthError: If the width is not supported
        EncodeError: If the value is not an int in the signed range

    Example:
        >>> encode(-1, bits=8)
        1
        >>> encode(-9223372036854775808)
        18446744073709551615
    """
    return get_codec(bits).encode(value)


def decode(value: int, bits: WidthLike = 64) -> int:
    """Zigzag-decode an unsigned integer at the given width.

    Args:
        value: Unsigned integer within the width's unsigned range
        bits: Width (8, 16, 32, 64, 128, "size"), default 64

    Returns:
        Signed value

    Raises:
        WidthError: If the width is not supported
        DecodeError: If the value is not an int in the unsigned range

    Example:
        >>> decode(255, bits=8)
        -128
    """
    return get_codec(bits).decode(value)
