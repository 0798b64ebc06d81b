"""Key-value backend interface, in-memory implementation and factory."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from blog_manager.core.config import Settings, get_settings
from blog_manager.core.errors import StorageQuotaExceeded


class KeyValueStorage(ABC):
    """Synchronous string -> string store with an explicit close()."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        ...

    def close(self) -> None:
        pass

    def __enter__(self) -> "KeyValueStorage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class MemoryStorage(KeyValueStorage):
    """
    Dict-backed storage for tests and throwaway sessions.

    `quota` limits the total size (in characters) of keys plus values, the
    same way a browser rejects writes once its storage quota is full.
    """

    def __init__(self, initial: dict[str, str] | None = None, *, quota: int | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self.quota = quota

    def _size_with(self, key: str, value: str) -> int:
        total = len(key) + len(value)
        for other_key, other_value in self._items.items():
            if other_key != key:
                total += len(other_key) + len(other_value)
        return total

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota is not None and self._size_with(key, value) > self.quota:
            raise StorageQuotaExceeded(f"Storage quota of {self.quota} exceeded writing '{key}'")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


def build_storage(settings: Settings | None = None) -> KeyValueStorage:
    """Pick the backend configured by STORAGE_BACKEND."""
    settings = settings or get_settings()
    if settings.storage_backend == "memory":
        return MemoryStorage()
    if settings.storage_backend == "sql":
        from blog_manager.repositories.sql_storage import SQLStorage

        return SQLStorage()
    from blog_manager.repositories.json_storage import JsonFileStorage

    return JsonFileStorage(settings.data_file)
