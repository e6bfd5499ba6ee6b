# caskdb

A small, dependency-free key-value store that persists string keys and values
to a single append-only log file, following the Bitcask design.

Every write is appended to the end of the file and synced to disk. An
in-memory index maps each key to the position and size of its most recent
record, so a read costs one seek and one read. When an existing file is
opened, the index is rebuilt by scanning the file from start to end.

## Installation

```
pip install .
```

## Usage

```python
from caskdb.disk_store import DiskStore

with DiskStore("books.db") as store:
    store.set("othello", "shakespeare")
    print(store.get("othello"))   # shakespeare
    print(store.get("missing"))   # "" (unknown keys give an empty string)
```

`DiskStore` accepts a string or a path-like object. It creates the file if it
does not exist. Used as a context manager, it closes the file on exit.

Reopening the same file restores every key written before:

```python
from caskdb.disk_store import DiskStore

store = DiskStore("books.db")
print(store.get("othello"))       # shakespeare
store.close()                     # True on success, False if closing failed
```

Setting a key again overwrites it; setting it to an empty string is how a
value is cleared.

Opening a file whose last record is cut short raises `ValueError`, as does
reading a record that turns out to be truncated.

An in-memory store with the same interface is available for tests and
throwaway use:

```python
from caskdb.memory_store import MemoryStore

store = MemoryStore()
store.set("name", "jojo")
assert store.get("name") == "jojo"
store.close()
```

Both stores implement the abstract `Store` class from `caskdb.memory_store`
(`get`, `set`, `close`).

## On-disk format

Each record is a 12-byte header (`HEADER_SIZE` in `caskdb.format`) followed
by the key and value bytes:

```
| timestamp (4B) | key_size (4B) | value_size (4B) | key | value |
```

The three header fields are unsigned 32-bit little-endian integers. The
timestamp is the write time in Unix seconds. Keys and values are stored as
UTF-8. The helpers in `caskdb.format` read and write this layout:

- `encode_header(timestamp, key_size, value_size)` returns the 12 header
  bytes, raising `ValueError` if a field does not fit in 32 bits.
- `decode_header(header)` returns `(timestamp, key_size, value_size)`,
  raising `ValueError` unless given exactly 12 bytes.
- `encode_kv(timestamp, key, value)` returns `(size, record_bytes)`.
- `decode_kv(data)` returns `(timestamp, key, value)`, raising `ValueError`
  if the record is truncated.

`KeyEntry` is the index entry: `timestamp`, `position` and `total_size`.

## What it does not do

- There is no delete operation beyond overwriting a key with an empty string,
  and no compaction: old records stay in the file, which only grows.
- There is no command-line tool or network server; the stores are used from
  Python code.
- One file holds all data; the store does not guard against several
  processes writing to the same file.

## Running the tests

```
pip install ".[test]"
pytest
```