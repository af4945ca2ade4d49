# lowbytes

Small helpers for working with binary data, with no dependencies beyond
the standard library:

- `lowbytes.endianness` — read and write 16-, 32- and 64-bit unsigned
  integers in little- or big-endian order, and a size guard for allocations.
- `lowbytes.testlib` — load a whole binary file and compare byte prefixes.
- `lowbytes.extract` — pull the DER-encoded certificates out of a captured
  stream of TLS records, as a library or from the command line.

## Installation

```
pip install .
```

## Integers in byte buffers

```python
from lowbytes.endianness import load_le, load_be, store_be

data = b"\x01\x02\x03\x04"
load_le(data, 2)      # 0x0201
load_be(data, 4)      # 0x01020304
load_be(data, 2, 2)   # 0x0304

buf = bytearray(8)
store_be(buf, 8, 0x0102030405060708)
```

`load_le(data, width, offset=0)`, `load_be(...)`, `store_le(buffer, width,
value, offset=0)` and `store_be(...)` accept a width of 2, 4 or 8 bytes.
They raise `ValueError` for any other width, `IndexError` when the bytes
at `offset` do not fit inside the buffer, and the stores raise
`OverflowError` when the value does not fit in `width` unsigned bytes.
Stores write into a mutable buffer such as a `bytearray`.

`check_size(element_size, count)` returns `element_size * count`, and
raises `OverflowError` when that would exceed `SIZE_MAX` (2**64 - 1), or
`ValueError` for a non-positive element size or a negative count.

## Loading files

```python
from lowbytes.testlib import load_file, buffers_equal, LoadFileError

try:
    data = load_file("input.bin")
except LoadFileError as exc:
    print(exc, exc.path, exc.errno)

buffers_equal(data, b"\x16\x03", 2)    # compare the first two bytes
```

`load_file(path)` returns the whole file as `bytes`. A file that cannot be
opened or read, or that is empty, raises `LoadFileError`, which carries the
`path` and, where the system reported one, the `errno`.

`buffers_equal(first, second, length)` compares the first `length` bytes of
two buffers; it raises `ValueError` if `length` is negative or either
buffer is shorter than `length`.

## Extracting certificates from TLS records

```python
from lowbytes.extract import iter_certificates, write_certificates, ExtractError

with open("handshake.bin", "rb") as fh:
    data = fh.read()

for cert in iter_certificates(data):
    print(len(cert))

count = write_certificates(data, "out/cert")   # out/cert.1.der, out/cert.2.der, ...
```

`iter_certificates(data)` walks the TLS records in `data`, looks into
handshake records (content type 0x16) for Certificate messages (type 0x0B)
and yields each certificate's bytes in order. Records that are not
handshake records are skipped with a `UserWarning`. Malformed input raises
`ExtractError`, whose `code` is -3 for a truncated record header, -4 for a
truncated handshake header and -5 for a malformed certificate entry.
Because it is a generator, certificates before the fault are yielded
first.

`write_certificates(data, prefix)` writes each certificate to the file
named by `output_name(prefix, n)`, that is `<prefix>.<n>.der` numbering
from 1, and returns the number written.

The lower-level helpers `read_tls_length`, `jump_tls`,
`read_handshake_length` and `jump_handshake` read the 2- and 3-byte
big-endian length fields and step over a record or handshake message.

### Command line

```
lowbytes-extract capture.bin
lowbytes-extract capture.bin out/cert
```

The first form writes `capture.bin.1.der`, `capture.bin.2.der`, and so on;
the second uses `out/cert` as the prefix. At most 64 KiB of input are
accepted: a larger file, a missing file or malformed records end with a
message on standard error and a non-zero exit status. Skipped non-handshake
records are reported as warnings. On success the command prints how many
certificates it extracted. Run with the wrong number of arguments, it
prints a usage message.

## What it does not do

The extractor only splits certificates out of the record stream; it does
not decode, validate or verify them, and it does not decrypt or otherwise
interpret TLS traffic.

## Running the tests

```
pip install ".[test]"
pytest
```