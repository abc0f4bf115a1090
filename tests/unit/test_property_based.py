"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zigzag_codec import CODECS, I8, I16, ZigZagCodec, interleaved

CODEC_IDS = [codec.width.signed_name() for codec in CODECS]


def signed_values(codec: ZigZagCodec) -> st.SearchStrategy[int]:
    """Uniform values plus values biased toward the ends of the signed range."""
    width = codec.width
    edges = st.sampled_from(
        [width.signed_min, width.signed_min + 1, -1, 0, 1, width.signed_max - 1, width.signed_max]
    )
    return st.one_of(edges, st.integers(min_value=width.signed_min, max_value=width.signed_max))


def unsigned_values(codec: ZigZagCodec) -> st.SearchStrategy[int]:
    width = codec.width
    edges = st.sampled_from([0, 1, 2, width.unsigned_max - 1, width.unsigned_max])
    return st.one_of(edges, st.integers(min_value=0, max_value=width.unsigned_max))


def arithmetic_encode(value: int) -> int:
    """The simple formulation: 2x for x >= 0, 2|x| - 1 otherwise."""
    return 2 * value if value >= 0 else 2 * -value - 1


def arithmetic_decode(value: int) -> int:
    return value // 2 if value % 2 == 0 else -((value + 1) // 2)


@pytest.mark.parametrize("zz", CODECS, ids=CODEC_IDS)
class TestCodecProperties:
    """Property-based tests for every width."""

    @given(data=st.data())
    def test_signed_roundtrip(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test decode(encode(x)) == x."""
        value = data.draw(signed_values(zz))
        assert zz.decode(zz.encode(value)) == value

    @given(data=st.data())
    def test_unsigned_roundtrip(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test encode(decode(y)) == y."""
        value = data.draw(unsigned_values(zz))
        assert zz.encode(zz.decode(value)) == value

    @given(data=st.data())
    def test_results_stay_in_domain(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test encode never leaves the unsigned domain and decode the signed one."""
        signed = data.draw(signed_values(zz))
        unsigned = data.draw(unsigned_values(zz))

        assert zz.width.contains_unsigned(zz.encode(signed))
        assert zz.width.contains_signed(zz.decode(unsigned))

    @given(data=st.data())
    def test_matches_arithmetic_formula(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test the bit-level formula agrees with the arithmetic one."""
        signed = data.draw(signed_values(zz))
        unsigned = data.draw(unsigned_values(zz))

        assert zz.encode(signed) == arithmetic_encode(signed)
        assert zz.decode(unsigned) == arithmetic_decode(unsigned)

    @given(data=st.data())
    def test_injective(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test distinct inputs give distinct encodings."""
        a = data.draw(signed_values(zz))
        b = data.draw(signed_values(zz))

        if a != b:
            assert zz.encode(a) != zz.encode(b)

    @given(data=st.data())
    def test_small_magnitude_stays_small(self, zz: ZigZagCodec, data: st.DataObject) -> None:
        """Test |x| <= m implies encode(x) <= 2m."""
        value = data.draw(signed_values(zz))
        assert zz.encode(value) <= 2 * abs(value)

    @given(count=st.integers(min_value=0, max_value=300))
    def test_interleaving(self, zz: ZigZagCodec, count: int) -> None:
        """Test encode(0), encode(-1), encode(1), ... is 0, 1, 2, ..."""
        count = min(count, zz.width.unsigned_max + 1)
        assert zz.encode_all(interleaved(count)) == list(range(count))


class TestExhaustive:
    """Exhaustive bijection checks for the small widths."""

    def test_i8_bijection(self) -> None:
        encoded = [I8.encode(value) for value in range(-128, 128)]
        assert sorted(encoded) == list(range(256))
        assert [I8.decode(value) for value in range(256)] == list(interleaved(256))

    def test_i16_bijection(self) -> None:
        width = I16.width
        encoded = {I16.encode(value) for value in range(width.signed_min, width.signed_max + 1)}
        assert encoded == set(range(width.unsigned_max + 1))
