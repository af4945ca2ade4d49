"""Extract DER certificates from a captured stream of TLS records."""

from __future__ import annotations

import sys
import warnings
from pathlib import Path
from typing import Iterator

BUFFER_SIZE = 65536
HANDSHAKE_RECORD = 0x16
CERTIFICATE_MESSAGE = 0x0B


class ExtractError(Exception):
    """Raised when the TLS stream cannot be parsed; ``code`` is the exit status."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def _byte(data, pos: int) -> int:
    # Bytes past the end read as zero, like a zero-filled input buffer.
    return data[pos] if pos < len(data) else 0


def _window(data, start: int, length: int) -> bytes:
    return bytes(data[start : start + length]).ljust(length, b"\0")


def read_handshake_length(data, pos: int) -> int:
    """Read the 3-byte big-endian length at ``pos``."""
    return (_byte(data, pos) << 16) | (_byte(data, pos + 1) << 8) | _byte(data, pos + 2)


def jump_handshake(data, pos: int, limit: int) -> int:
    """Return the position after the handshake message at ``pos``, or ``limit``."""
    if pos + 4 > limit:
        return limit
    return pos + 4 + read_handshake_length(data, pos + 1)


def read_tls_length(data, pos: int) -> int:
    """Read the 2-byte big-endian length at ``pos``."""
    return (_byte(data, pos) << 8) | _byte(data, pos + 1)


def jump_tls(data, pos: int, limit: int) -> int:
    """Return the position after the TLS record at ``pos``, or ``limit``."""
    if pos + 5 > limit:
        return limit
    return pos + 5 + read_tls_length(data, pos + 3)


def iter_certificates(data) -> Iterator[bytes]:
    """Yield each certificate carried by Certificate handshake messages in ``data``.

    Records that are not handshakes are skipped with a warning.
    """
    total = len(data)
    count = 0
    pt = 0
    while pt < total:
        if pt + 5 > total:
            raise ExtractError("File too small", -3)
        if data[pt] != HANDSHAKE_RECORD:
            warnings.warn("Not a handshake message, ignored", stacklevel=2)
            pt = jump_tls(data, pt, total)
            continue
        tpt = pt + 5
        pt = jump_tls(data, pt, total)
        while tpt < pt:
            if tpt + 4 > pt:
                raise ExtractError("Failed to parse Handshake tuple", -4)
            if _byte(data, tpt) != CERTIFICATE_MESSAGE:
                tpt = jump_handshake(data, tpt, pt)
                continue
            ttpt = tpt + 7
            tpt = jump_handshake(data, tpt, pt)
            while ttpt < tpt:
                count += 1
                if ttpt + 3 > tpt:
                    raise ExtractError(f"Failed to parse {count}-th certificate", -5)
                length = read_handshake_length(data, ttpt)
                if ttpt + 3 + length > tpt:
                    raise ExtractError(f"Failed to parse {count}-th certificate", -5)
                yield _window(data, ttpt + 3, length)
                ttpt += 3 + length


def output_name(prefix: str, index: int) -> str:
    """Name of the file holding the ``index``-th certificate."""
    return f"{prefix}.{index}.der"


def write_certificates(data, prefix: str) -> int:
    """Write every certificate in ``data`` to its own file; return how many."""
    written = 0
    for written, certificate in enumerate(iter_certificates(data), start=1):
        Path(output_name(prefix, written)).write_bytes(certificate)
    return written


def main(argv=None) -> int:
    """Command-line entry point: ``extract filename [output_path]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print("Usage: extract filename [output_path default=filename] ")
        print("       Output filenames: [output_path].n.der")
        return 0
    filename = args[0]
    prefix = args[1] if len(args) == 2 else filename
    try:
        with open(filename, "rb") as handle:
            data = handle.read(BUFFER_SIZE)
    except OSError:
        print(f"Error: File {filename} not found", file=sys.stderr)
        return -1
    if len(data) >= BUFFER_SIZE:
        print(f"Error: File {filename} too large", file=sys.stderr)
        return -2

    error = None
    count = 0
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            count = write_certificates(data, prefix)
        except ExtractError as exc:
            error = exc
    for warning in caught:
        print(f"Warning: {warning.message} (file {filename})", file=sys.stderr)
    if error is not None:
        print(f"Error: {error} (file {filename})", file=sys.stderr)
        return error.code
    print(f"Successfully extracted {count} certificates")
    return 0