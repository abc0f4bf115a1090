#!/usr/bin/env python3
"""Basic usage example for zigzag_codec.

This example demonstrates:
1. Encoding signed values at a fixed width
2. Decoding them back
3. The minimum/maximum boundary at every width
4. Zigzag fields on a Pydantic model
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from zigzag_codec import (
    CODECS,
    I32,
    ZigZagInt32,
    ZigZagWire32,
    encoded_bits,
    interleaved,
)


class HeadingChange(BaseModel):
    """Heading change reported by a vehicle, in hundredths of a degree."""

    vehicle_id: int = Field(ge=0, le=255, description="Vehicle ID (0-255)")
    delta: ZigZagInt32


class HeadingChangeWire(BaseModel):
    """The same message as read back with the delta still encoded."""

    vehicle_id: int = Field(ge=0, le=255)
    delta: ZigZagWire32


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("zigzag_codec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding signed 32-bit values...")
    values = [0, -1, 1, -2, 2, -1000, 1000]
    for value in values:
        encoded = I32.encode(value)
        print(f"   {value:>6} -> {encoded:<6} ({encoded_bits(value, bits=32)} bits)")
    print()

    print("2. Decoding back...")
    decoded = I32.decode_all(I32.encode_all(values))
    print(f"   {decoded}")
    if decoded == values:
        print("   ✓ Round-trip successful!")
    else:
        print("   ✗ Round-trip failed!")
    print()

    print("3. Boundaries at every width...")
    for codec in CODECS:
        width = codec.width
        print(
            f"   {width.signed_name():>5}: MIN {width.signed_min} -> "
            f"{codec.encode(width.signed_min)} ({width.unsigned_name()} MAX)"
        )
    print()

    print("4. Zigzag order...")
    print(f"   signed:   {list(interleaved(9))}")
    print(f"   unsigned: {I32.encode_all(interleaved(9))}")
    print()

    print("5. Zigzag fields on a Pydantic model...")
    msg = HeadingChange(vehicle_id=3, delta=-450)
    payload = msg.model_dump()
    print(f"   Model: {msg!r}")
    print(f"   Dumped: {payload}")
    received = HeadingChangeWire.model_validate(payload)
    print(f"   Read back delta: {received.delta}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
