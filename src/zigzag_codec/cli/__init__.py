"""Command line interface for zigzag_codec."""
