"""Integer width descriptors.

This module describes the fixed-width integer domains the codec works with.
Each IntWidth pairs a signed domain with the unsigned domain of the same
number of bits; there is no promotion or conversion between widths.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Union

from ..exceptions import WidthError

BITS_PER_BYTE = 8

# Native pointer width of the running interpreter (32 or 64 on common targets)
POINTER_BITS = struct.calcsize("P") * BITS_PER_BYTE

WidthLike = Union[int, str, "IntWidth"]


@dataclass(frozen=True)
class IntWidth:
    """A signed/unsigned integer domain pair of a fixed bit width.

    Attributes:
        bits: Number of bits in both the signed and unsigned domain
        name: Short name used in function names and on the CLI ("8", "size", ...)
    """

    bits: int
    name: str

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise WidthError(f"Width must be an integer number of bits, got {self.bits!r}")
        if self.bits <= 0 or self.bits % BITS_PER_BYTE != 0:
            raise WidthError(f"Width must be a positive multiple of 8 bits, got {self.bits}")

    @property
    def signed_min(self) -> int:
        """Most negative value of the signed domain: -2^(n-1)."""
        return -(1 << (self.bits - 1))

    @property
    def signed_max(self) -> int:
        """Largest value of the signed domain: 2^(n-1) - 1."""
        return (1 << (self.bits - 1)) - 1

    @property
    def unsigned_max(self) -> int:
        """Largest value of the unsigned domain: 2^n - 1."""
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        """All-ones bit pattern of the width."""
        return self.unsigned_max

    @property
    def byte_size(self) -> int:
        return self.bits // BITS_PER_BYTE

    def signed_name(self) -> str:
        return f"i{self.name}"

    def unsigned_name(self) -> str:
        return f"u{self.name}"

    def contains_signed(self, value: int) -> bool:
        return self.signed_min <= value <= self.signed_max

    def contains_unsigned(self, value: int) -> bool:
        return 0 <= value <= self.unsigned_max


W8 = IntWidth(8, "8")
W16 = IntWidth(16, "16")
W32 = IntWidth(32, "32")
W64 = IntWidth(64, "64")
W128 = IntWidth(128, "128")
WSIZE = IntWidth(POINTER_BITS, "size")

SUPPORTED_WIDTHS: tuple[IntWidth, ...] = (W8, W16, W32, W64, W128, WSIZE)

_WIDTHS_BY_NAME: dict[str, IntWidth] = {width.name: width for width in SUPPORTED_WIDTHS}


def get_width(width: WidthLike) -> IntWidth:
    """Resolve a width given as a bit count, a name, or an IntWidth.

    Args:
        width: 8, 16, 32, 64, 128, "size" (pointer-sized), their string
            forms, or an IntWidth instance

    Returns:
        The matching supported IntWidth

    Raises:
        WidthError: If the width is not one of the supported widths

    Example:
        >>> get_width(32).unsigned_max
        4294967295
        >>> get_width("size").bits == POINTER_BITS
        True
    """
    if isinstance(width, IntWidth):
        return width

    if isinstance(width, bool):
        raise WidthError(f"Unsupported width: {width!r}")

    key = str(width) if isinstance(width, int) else width
    if isinstance(key, str) and key in _WIDTHS_BY_NAME:
        return _WIDTHS_BY_NAME[key]

    supported = ", ".join(w.name for w in SUPPORTED_WIDTHS)
    raise WidthError(f"Unsupported width: {width!r} (supported: {supported})")
