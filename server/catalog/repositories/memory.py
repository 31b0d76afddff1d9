"""In-memory repository used by default and in tests."""

from __future__ import annotations

from threading import Lock

from catalog.repositories.base import Repository, T


class InMemoryRepository(Repository[T]):
    """Thread-safe list-backed storage.

    Handlers may run on the server's worker threads, so every read and
    write holds the lock.
    """

    def __init__(self) -> None:
        self._records: list[T] = []
        self._lock = Lock()

    def _index(self, record_id: str) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return None

    def list(self) -> list[T]:
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> T | None:
        with self._lock:
            i = self._index(record_id)
            return None if i is None else self._records[i]

    def find_by_name(self, name: str) -> T | None:
        with self._lock:
            for record in self._records:
                if record.name == name:
                    return record
            return None

    def add(self, record: T) -> T:
        with self._lock:
            self._records.append(record)
            return record

    def replace(self, record: T) -> T:
        with self._lock:
            i = self._index(record.id)
            if i is None:
                raise KeyError(f"No record with id {record.id!r}")
            self._records[i] = record
            return record

    def remove(self, record_id: str) -> bool:
        with self._lock:
            i = self._index(record_id)
            if i is None:
                return False
            del self._records[i]
            return True
