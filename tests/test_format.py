import pytest

from caskdb.format import (
    HEADER_SIZE,
    KeyEntry,
    decode_header,
    decode_kv,
    encode_header,
    encode_kv,
)


@pytest.mark.parametrize(
    "timestamp, key_size, value_size",
    [(10, 10, 10), (0, 0, 0), (10000, 10000, 10000)],
)
def test_encode_header_round_trip(timestamp, key_size, value_size):
    data = encode_header(timestamp, key_size, value_size)
    assert decode_header(data) == (timestamp, key_size, value_size)


def test_encode_header_is_little_endian():
    assert encode_header(1, 2, 3) == (
        b"\x01\x00\x00\x00" b"\x02\x00\x00\x00" b"\x03\x00\x00\x00"
    )


def test_header_is_twelve_bytes():
    assert len(encode_header(4294967295, 0, 7)) == HEADER_SIZE == 12


def test_encode_header_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode_header(2**32, 0, 0)
    with pytest.raises(ValueError):
        encode_header(0, -1, 0)


@pytest.mark.parametrize("header", [b"", b"\x00" * 11, b"\x00" * 13])
def test_decode_header_wrong_size(header):
    with pytest.raises(ValueError):
        decode_header(header)


@pytest.mark.parametrize(
    "timestamp, key, value, size",
    [
        (10, "hello", "world", HEADER_SIZE + 10),
        (0, "", "", HEADER_SIZE),
        (100, "🔑", "", HEADER_SIZE + 4),
    ],
)
def test_encode_kv_round_trip(timestamp, key, value, size):
    got_size, data = encode_kv(timestamp, key, value)
    assert decode_kv(data) == (timestamp, key, value)
    assert got_size == size
    assert len(data) == size


def test_encode_kv_layout():
    _, data = encode_kv(7, "ab", "xyz")
    assert data == encode_header(7, 2, 3) + b"abxyz"


def test_decode_kv_truncated():
    _, data = encode_kv(1, "hello", "world")
    with pytest.raises(ValueError):
        decode_kv(data[:-1])


def test_key_entry_fields():
    entry = KeyEntry(5, 100, 42)
    assert (entry.timestamp, entry.position, entry.total_size) == (5, 100, 42)
    assert entry == KeyEntry(timestamp=5, position=100, total_size=42)