"""Helpers for loading test inputs from files and comparing byte buffers."""

from __future__ import annotations

import os


class LoadFileError(Exception):
    """Raised when an input data file cannot be loaded."""

    def __init__(self, message: str, path, errno: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.errno = errno


def load_file(path) -> bytes:
    """Return the whole contents of ``path``; empty or unreadable files are errors."""
    name = os.fspath(path)
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise LoadFileError(
            f"Failed to open input data file '{name}'.  errno={exc.errno}",
            name,
            exc.errno,
        ) from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise LoadFileError(
                f"Error reading file '{name}'.  errno={exc.errno}", name, exc.errno
            ) from exc
    if not data:
        raise LoadFileError(f"Error reading file '{name}'.", name)
    return data


def buffers_equal(first, second, length: int) -> bool:
    """Compare the first ``length`` bytes of two buffers."""
    if length < 0:
        raise ValueError("length must not be negative")
    if len(first) < length or len(second) < length:
        raise ValueError(f"both buffers must hold at least {length} bytes")
    return bytes(first[:length]) == bytes(second[:length])