"""Utility functions for zigzag_codec.

This module provides size calculation and ordering helpers.
"""

from __future__ import annotations

from .sizing import encoded_bits, interleaved

__all__ = [
    "encoded_bits",
    "interleaved",
]
