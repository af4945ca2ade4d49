"""Fixed-width unsigned integer loads and stores on raw byte buffers."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1
"""Largest allocation size, in bytes, accepted by :func:`check_size`."""

_WIDTHS = frozenset({2, 4, 8})


def _check_width(width: int) -> None:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported integer width {width}; expected 2, 4 or 8")


def _check_bounds(length: int, width: int, offset: int) -> None:
    if offset < 0 or offset + width > length:
        raise IndexError(
            f"{width} bytes at offset {offset} do not fit in a buffer of {length} bytes"
        )


def _load(data, width: int, offset: int, order: str) -> int:
    _check_width(width)
    _check_bounds(len(data), width, offset)
    return int.from_bytes(data[offset : offset + width], order)


def _store(buffer, width: int, value: int, offset: int, order: str) -> None:
    _check_width(width)
    _check_bounds(len(buffer), width, offset)
    buffer[offset : offset + width] = value.to_bytes(width, order)


def load_le(data, width: int, offset: int = 0) -> int:
    """Read an unsigned little-endian integer of ``width`` bytes at ``offset``."""
    return _load(data, width, offset, "little")


def load_be(data, width: int, offset: int = 0) -> int:
    """Read an unsigned big-endian integer of ``width`` bytes at ``offset``."""
    return _load(data, width, offset, "big")


def store_le(buffer, width: int, value: int, offset: int = 0) -> None:
    """Write ``value`` little-endian into ``width`` bytes of ``buffer`` at ``offset``.

    Raises OverflowError if the value does not fit in ``width`` unsigned bytes.
    """
    _store(buffer, width, value, offset, "little")


def store_be(buffer, width: int, value: int, offset: int = 0) -> None:
    """Write ``value`` big-endian into ``width`` bytes of ``buffer`` at ``offset``.

    Raises OverflowError if the value does not fit in ``width`` unsigned bytes.
    """
    _store(buffer, width, value, offset, "big")


def check_size(element_size: int, count: int) -> int:
    """Return ``element_size * count``, refusing sizes beyond :data:`SIZE_MAX`."""
    if element_size <= 0:
        raise ValueError("element size must be positive")
    if count < 0:
        raise ValueError("element count must not be negative")
    if count > SIZE_MAX // element_size:
        raise OverflowError(
            "Maximum allocatable size exceeded, aborting before overflow"
        )
    return element_size * count