"""Product service layer (Use Cases).

Orchestrates business logic for product records, delegating storage
to the injected ``IProductRepository``.

Rules enforced here, in order:
- Required fields (``nome``, ``codigoBarra``, ``serie``) are present.
- The ``(serie, codigoBarra)`` pair is not already stored.
- Deletion only targets an existing id.

Commands return a ``ProductResult`` carrying the ``ResponseOutcome``
instead of raising; the API layer maps it onto HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.core.outcomes import ResponseOutcome
from modules.products.dtos import ProductResult
from modules.products.models import BARCODE_FIELD, ID_FIELD, SERIAL_FIELD, Product
from modules.products.validation import (
    parse_id,
    validate_not_duplicate,
    validate_required_fields,
)

if TYPE_CHECKING:
    from modules.products.dtos import ProductPayload
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Check-then-act sequences run under the repository lock so that
    concurrent requests cannot store the same pair twice or remove the
    same record twice.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, payload: Optional[ProductPayload]) -> ProductResult:
        """Validate and store a new product."""
        record = payload.to_record() if payload is not None else {}
        if not record:
            logger.warning("product.not_provided")
            return ProductResult(outcome=ResponseOutcome.PRODUCT_NOT_PROVIDED)

        outcome = validate_required_fields(record)
        if outcome is not None:
            logger.warning("product.required_fields_missing", fields=sorted(record))
            return ProductResult(outcome=outcome)

        log = logger.bind(serie=record[SERIAL_FIELD], codigo_barra=record[BARCODE_FIELD])

        with self._repo.lock:
            outcome = validate_not_duplicate(record, self._repo)
            if outcome is not None:
                log.warning("product.duplicate")
                return ProductResult(outcome=outcome)
            product = self._repo.insert(record)

        log.info("product.created", product_id=product[ID_FIELD])
        return ProductResult(outcome=ResponseOutcome.PRODUCT_CREATED, product=product)

    def delete_product(self, raw_id: Optional[str]) -> ProductResult:
        """Remove the product identified by the raw path parameter.

        An unknown id answers ``SERIAL_INVALID``, the same outcome as a
        malformed one.
        """
        parsed = parse_id(raw_id)
        if not parsed.ok:
            logger.warning("product.invalid_id", raw_id=raw_id, outcome=parsed.outcome.name)
            return ProductResult(outcome=parsed.outcome)

        with self._repo.lock:
            product = self._repo.find_by_id(parsed.value)
            if product is None:
                logger.warning("product.unknown_id", product_id=parsed.value)
                return ProductResult(outcome=ResponseOutcome.SERIAL_INVALID)
            self._repo.remove(product)

        logger.info("product.deleted", product_id=parsed.value)
        return ProductResult(outcome=ResponseOutcome.SUCCESS)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every stored product in insertion order."""
        return self._repo.list_all()
