"""Binary record format shared by the on-disk store.

Each record is a fixed 12-byte header followed by the key and value bytes::

    timestamp (4B) | key_size (4B) | value_size (4B) | key | value

All header fields are unsigned 32-bit little-endian integers, and strings
are stored as UTF-8.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_SIZE = 12

_HEADER = struct.Struct("<III")
_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class KeyEntry:
    """Where a record lives in the data file, and when it was written."""

    timestamp: int
    position: int
    total_size: int


def _check_uint32(name: str, value: int) -> None:
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} {value} does not fit in an unsigned 32-bit field")


def encode_header(timestamp: int, key_size: int, value_size: int) -> bytes:
    """Pack the three header fields into 12 bytes."""
    _check_uint32("timestamp", timestamp)
    _check_uint32("key size", key_size)
    _check_uint32("value size", value_size)
    return _HEADER.pack(timestamp, key_size, value_size)


def decode_header(header: bytes) -> tuple[int, int, int]:
    """Unpack a 12-byte header into (timestamp, key_size, value_size)."""
    if len(header) != HEADER_SIZE:
        raise ValueError(f"header size is not equal to {HEADER_SIZE}")
    timestamp, key_size, value_size = _HEADER.unpack(header)
    return timestamp, key_size, value_size


def encode_kv(timestamp: int, key: str, value: str) -> tuple[int, bytes]:
    """Encode a key/value pair as a record; return (record size, record bytes)."""
    key_bytes = key.encode("utf-8")
    value_bytes = value.encode("utf-8")
    record = encode_header(timestamp, len(key_bytes), len(value_bytes)) + key_bytes + value_bytes
    return len(record), record


def decode_kv(data: bytes) -> tuple[int, str, str]:
    """Decode a record into (timestamp, key, value)."""
    timestamp, key_size, value_size = decode_header(bytes(data[:HEADER_SIZE]))
    value_offset = HEADER_SIZE + key_size
    end = value_offset + value_size
    if len(data) < end:
        raise ValueError(f"record is truncated: expected {end} bytes, got {len(data)}")
    key = bytes(data[HEADER_SIZE:value_offset]).decode("utf-8")
    value = bytes(data[value_offset:end]).decode("utf-8")
    return timestamp, key, value