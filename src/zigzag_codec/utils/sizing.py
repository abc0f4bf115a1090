"""Size and ordering utilities for zigzag-encoded values.

These helpers show how compact zigzag encoding keeps small-magnitude values,
without performing any byte-level encoding themselves.
"""

from __future__ import annotations

from typing import Iterator

from ..codec.widths import WidthLike
from ..codec.zigzag import get_codec


def encoded_bits(value: int, bits: WidthLike = 64) -> int:
    """Calculate the number of significant bits in a value's zigzag encoding.

    Args:
        value: Signed integer within the width's signed range
        bits: Width (8, 16, 32, 64, 128, "size"), default 64

    Returns:
        Bit length of the encoded value (at least 1)

    Raises:
        WidthError: If the width is not supported
        EncodeError: If the value is out of range for the width

    Example:
        >>> encoded_bits(-1)
        1
        >>> encoded_bits(-64)
        7
        >>> encoded_bits(-9223372036854775808)
        64
    """
    return max(1, get_codec(bits).encode(value).bit_length())


def interleaved(count: int) -> Iterator[int]:
    """Yield the first ``count`` signed integers in zigzag order.

    The sequence is ``0, -1, 1, -2, 2, ...``; encoding it at any width yields
    ``0, 1, 2, 3, 4, ...``.

    Args:
        count: Number of values to yield (must be >= 0)

    Raises:
        ValueError: If count is negative

    Example:
        >>> list(interleaved(5))
        [0, -1, 1, -2, 2]
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    for i in range(count):
        # Same bit trick as decode, without the width guard
        yield (i >> 1) ^ -(i & 1)
