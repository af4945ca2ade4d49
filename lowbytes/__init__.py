"""Byte-order helpers, binary file loading and TLS certificate extraction."""

__version__ = "0.1.0"
__all__ = ["endianness", "testlib", "extract"]