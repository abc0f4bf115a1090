"""Exception hierarchy for zigzag_codec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ZigZagError for easy catching of any zigzag_codec error.

The zigzag transformation itself is total and never fails. These exceptions
only guard the Python boundary, where integers are unbounded and a value can
fall outside the domain of the width it is handed to.
"""

from __future__ import annotations


class ZigZagError(Exception):
    """Base exception for all zigzag_codec errors."""

    pass


class WidthError(ZigZagError):
    """Raised when an integer width is unsupported or malformed.

    Examples:
        - Width is not a positive multiple of 8
        - Width name not in the supported set (8, 16, 32, 64, 128, size)
    """

    pass


class EncodeError(ZigZagError):
    """Raised when a value cannot be zigzag-encoded at the requested width.

    Examples:
        - Value is not an integer (bool is rejected too)
        - Value is outside the signed range of the width
    """

    pass


class DecodeError(ZigZagError):
    """Raised when a value cannot be zigzag-decoded at the requested width.

    Examples:
        - Value is not an integer (bool is rejected too)
        - Value is negative or exceeds the unsigned maximum of the width
    """

    pass
