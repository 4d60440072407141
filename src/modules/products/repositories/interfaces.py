"""Product repository interface.

Extends ``IRepository[Product]`` with the look-up required by the
duplicate rule over the ``(serie, codigoBarra)`` pair.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ContextManager, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for product records."""

    @abstractmethod
    def find_duplicate(self, serie: int, codigo_barra: int) -> Optional[Product]:
        """Retrieve the product holding the given serial/barcode pair."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""

    @property
    @abstractmethod
    def lock(self) -> ContextManager:
        """Re-entrant lock guarding check-then-act sequences."""
