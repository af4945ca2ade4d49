import pytest

from lowbytes.testlib import LoadFileError, buffers_equal, load_file


def test_load_file_returns_contents(tmp_path):
    payload = bytes(range(256)) * 3
    target = tmp_path / "input.bin"
    target.write_bytes(payload)
    assert load_file(target) == payload


def test_load_file_accepts_str_path(tmp_path):
    target = tmp_path / "input.bin"
    target.write_bytes(b"abc")
    assert load_file(str(target)) == b"abc"


def test_load_file_missing(tmp_path):
    missing = tmp_path / "absent.bin"
    with pytest.raises(LoadFileError) as info:
        load_file(missing)
    assert "Failed to open" in str(info.value)
    assert info.value.path == str(missing)
    assert info.value.errno is not None


def test_load_file_empty_is_error(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    with pytest.raises(LoadFileError) as info:
        load_file(target)
    assert "Error reading" in str(info.value)


def test_buffers_equal_prefix():
    assert buffers_equal(b"abcdef", b"abcxyz", 3) is True
    assert buffers_equal(b"abcdef", b"abcxyz", 4) is False


def test_buffers_equal_zero_length():
    assert buffers_equal(b"a", b"b", 0) is True


def test_buffers_equal_mixed_types():
    assert buffers_equal(bytearray(b"\x01\x02"), memoryview(b"\x01\x02"), 2) is True


def test_buffers_equal_too_short():
    with pytest.raises(ValueError):
        buffers_equal(b"ab", b"abc", 3)
    with pytest.raises(ValueError):
        buffers_equal(b"ab", b"ab", -1)