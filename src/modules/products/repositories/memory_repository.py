"""In-memory implementation of the Product repository.

Products live in a plain list for the lifetime of the process; the
list order is the listing order.  Error handling follows the Null
Object pattern: look-ups return ``None`` instead of raising, and the
Service Layer decides how to translate a miss into an API outcome.

Uniqueness is **not** enforced here; see ``modules.products.validation``.
"""

from __future__ import annotations

import threading
from typing import List, Optional

import structlog

from modules.products.models import BARCODE_FIELD, ID_FIELD, SERIAL_FIELD, Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductMemoryRepository(IProductRepository):
    """Concrete Product repository backed by a process-local list."""

    def __init__(self, first_id: int = 1) -> None:
        self._products: List[Product] = []
        self._next_id = first_id
        self._counter_lock = threading.Lock()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def _allocate_id(self) -> int:
        with self._counter_lock:
            allocated = self._next_id
            self._next_id += 1
        return allocated

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> List[Product]:
        """Return a snapshot of the stored products in insertion order."""
        return list(self._products)

    def find_by_id(self, id: int) -> Optional[Product]:
        for product in self._products:
            if product.get(ID_FIELD) == id:
                return product
        return None

    def find_duplicate(self, serie: int, codigo_barra: int) -> Optional[Product]:
        for product in self._products:
            if (
                product.get(SERIAL_FIELD) == serie
                and product.get(BARCODE_FIELD) == codigo_barra
            ):
                return product
        return None

    def count(self) -> int:
        return len(self._products)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def insert(self, entity: Product) -> Product:
        """Assign the next id and append the product.

        Ids are monotonic and never reused, even after removals.  Any
        caller-supplied ``id`` is replaced; the assigned one is always
        the last key of the stored record.
        """
        stored = {key: value for key, value in entity.items() if key != ID_FIELD}
        stored[ID_FIELD] = self._allocate_id()
        self._products.append(stored)
        logger.info("product.saved", product_id=stored[ID_FIELD])
        return stored

    def remove(self, entity: Product) -> bool:
        """Remove the first stored product equal to ``entity``."""
        try:
            self._products.remove(entity)
        except ValueError:
            return False
        logger.info("product.removed", product_id=entity.get(ID_FIELD))
        return True
