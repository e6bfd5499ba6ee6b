"""A log-structured hash table store persisted to a single file.

Every write appends a record to the end of the data file and points an
in-memory index at its byte offset; reads take one seek and one read.
The index is rebuilt by scanning the file when an existing one is opened.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from caskdb.format import HEADER_SIZE, KeyEntry, decode_header, decode_kv, encode_kv
from caskdb.memory_store import Store

logger = logging.getLogger(__name__)


class DiskStore(Store):
    """A key/value store whose data lives in an append-only file."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self._path = Path(file_name)
        self._key_dir: dict[str, KeyEntry] = {}
        if self._path.exists():
            self._load_key_dir()
        self._file = open(self._path, "a+b")

    def _load_key_dir(self) -> None:
        with open(self._path, "rb") as data:
            while True:
                position = data.tell()
                header = data.read(HEADER_SIZE)
                if not header:
                    break
                if len(header) < HEADER_SIZE:
                    raise ValueError(f"could not read header at offset {position}")
                timestamp, key_size, value_size = decode_header(header)
                key_bytes = data.read(key_size)
                if len(key_bytes) < key_size:
                    raise ValueError(f"could not read key at offset {position}")
                data.seek(value_size, os.SEEK_CUR)
                total_size = HEADER_SIZE + key_size + value_size
                self._key_dir[key_bytes.decode("utf-8")] = KeyEntry(
                    timestamp, position, total_size
                )

    def get(self, key: str) -> str:
        entry = self._key_dir.get(key)
        if entry is None:
            return ""
        self._file.seek(entry.position)
        record = self._file.read(entry.total_size)
        if len(record) < entry.total_size:
            raise ValueError(f"record for key {key!r} is truncated")
        _, _, value = decode_kv(record)
        return value

    def set(self, key: str, value: str) -> None:
        timestamp = int(time.time()) & 0xFFFFFFFF
        size, record = encode_kv(timestamp, key, value)
        position = self._file.seek(0, os.SEEK_END)
        self._file.write(record)
        self._file.flush()
        os.fsync(self._file.fileno())
        self._key_dir[key] = KeyEntry(timestamp, position, size)

    def close(self) -> bool:
        try:
            self._file.flush()
            os.fsync(self._file.fileno())
            self._file.close()
        except (OSError, ValueError) as error:
            logger.error("Failed to close file: %s", error)
            return False
        return True

    def __enter__(self) -> DiskStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()