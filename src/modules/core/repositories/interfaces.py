"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on a concrete storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the record managed by the
    repository (e.g. a product JSON object).
    """

    @abstractmethod
    def list_all(self) -> List[T]:
        """Return every stored entity in insertion order."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its identifier."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Store a new entity and return it with its identifier assigned."""

    @abstractmethod
    def remove(self, entity: T) -> bool:
        """Remove an entity; ``False`` when nothing matched."""
