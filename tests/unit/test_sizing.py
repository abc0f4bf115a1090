"""Unit tests for sizing utilities."""

from __future__ import annotations

import pytest

from zigzag_codec import EncodeError, WidthError, encoded_bits, interleaved


class TestEncodedBits:
    """Test encoded bit-length calculation."""

    def test_zero_needs_one_bit(self) -> None:
        assert encoded_bits(0) == 1

    def test_small_magnitudes(self) -> None:
        assert encoded_bits(-1) == 1
        assert encoded_bits(1) == 2
        assert encoded_bits(-64) == 7
        assert encoded_bits(63) == 7
        assert encoded_bits(64) == 8

    def test_negative_is_not_full_width(self) -> None:
        """Test a small negative value does not cost the full two's-complement width."""
        assert encoded_bits(-2, bits=64) == 2
        assert encoded_bits(-2, bits=128) == 2

    @pytest.mark.parametrize("bits", [8, 16, 32, 64, 128])
    def test_extremes_use_full_width(self, bits: int) -> None:
        assert encoded_bits(-(2 ** (bits - 1)), bits=bits) == bits
        assert encoded_bits(2 ** (bits - 1) - 1, bits=bits) == bits

    def test_errors(self) -> None:
        with pytest.raises(EncodeError):
            encoded_bits(128, bits=8)

        with pytest.raises(WidthError):
            encoded_bits(0, bits=12)


class TestInterleaved:
    """Test the zigzag-ordered sequence."""

    def test_first_values(self) -> None:
        assert list(interleaved(7)) == [0, -1, 1, -2, 2, -3, 3]

    def test_empty(self) -> None:
        assert list(interleaved(0)) == []

    def test_negative_count(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            list(interleaved(-1))
