"""Storage interface shared by the entity services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """An ordered collection of records keyed by ``id`` with unique ``name``.

    Implementations hand out immutable records, so callers can never change
    stored state except through :meth:`add`, :meth:`replace` and
    :meth:`remove`.
    """

    @abstractmethod
    def list(self) -> list[T]:
        """Return a snapshot of every record, in insertion order."""

    @abstractmethod
    def get(self, record_id: str) -> T | None:
        """Return the record with ``record_id`` or None."""

    @abstractmethod
    def find_by_name(self, name: str) -> T | None:
        """Return the record whose name is exactly ``name`` or None."""

    @abstractmethod
    def add(self, record: T) -> T:
        ...

    @abstractmethod
    def replace(self, record: T) -> T:
        """Swap the stored record with the same id for ``record``."""

    @abstractmethod
    def remove(self, record_id: str) -> bool:
        """Delete the record with ``record_id``. Returns False if absent."""
