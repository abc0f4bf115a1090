"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from zigzag_codec import CODECS, ZigZagCodec


@pytest.fixture(params=CODECS, ids=lambda codec: codec.width.signed_name())
def codec(request: pytest.FixtureRequest) -> ZigZagCodec:
    """Each supported width's codec in turn."""
    return request.param


@pytest.fixture
def small_signed_values() -> list[int]:
    """Signed values that fit every supported width."""
    return [0, -1, 1, -2, 2, -64, 63, -127, 127]
