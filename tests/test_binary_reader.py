import struct

import pytest

from catboy.binary_reader import BinaryStream


def test_read_advances():
    s = BinaryStream(b"abcdef")
    assert s.read(2) == b"ab"
    assert s.read(3) == b"cde"
    assert s.offset == 5


def test_read_past_end_raises():
    s = BinaryStream(b"abc")
    with pytest.raises(EOFError):
        s.read(4)


def test_read_negative_raises():
    with pytest.raises(ValueError):
        BinaryStream(b"abc").read(-1)


def test_integers_are_little_endian():
    s = BinaryStream(struct.pack("<I", 70000) + struct.pack("<i", -5))
    assert s.read_uint32() == 70000
    assert s.read_int32() == -5
    assert s.offset == 8


def test_read_uint32_wire_bytes():
    assert BinaryStream(b"\x01\x00\x00\x00").read_uint32() == 1


def test_read_string_stops_at_nul():
    s = BinaryStream(b"hello\0world\0")
    assert s.read_string() == "hello"
    assert s.read_string() == "world"
    assert s.offset == 12


def test_read_string_truncates_to_maxlen():
    s = BinaryStream(b"abcdef\0")
    assert s.read_string(4) == "abc"
    assert s.offset == 4
    assert s.read_string() == "ef"


def test_read_string_unterminated_raises():
    with pytest.raises(EOFError):
        BinaryStream(b"abc").read_string()


def test_skip():
    s = BinaryStream(b"xyz")
    s.skip(2)
    assert s.read(1) == b"z"


def test_goto_zero_returns_same_stream():
    s = BinaryStream(struct.pack("<I", 0) + b"rest")
    assert s.goto() is s
    assert s.read(4) == b"rest"


def test_goto_opens_child_and_close_returns_parent():
    payload = struct.pack("<I", 6) + b"..AB"
    s = BinaryStream(payload)
    child = s.goto()
    assert child is not s
    assert child.read(2) == b"AB"
    assert child.close() is s
    assert s.offset == 4


def test_close_root_returns_none():
    assert BinaryStream(b"").close() is None