"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Look-ups return ``None`` for a missing entity instead of raising; the
service layer decides what absence means.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity; ordering is store-defined."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or overwrite) an entity and return it."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an entity."""
