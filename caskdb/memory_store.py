"""The store interface and a purely in-memory implementation of it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Store(ABC):
    """A string key/value store."""

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the value for key, or an empty string if it is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def close(self) -> bool:
        """Release resources; return True on success."""


class MemoryStore(Store):
    """A store that keeps everything in a dictionary."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str:
        return self._data.get(key, "")

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def close(self) -> bool:
        return True