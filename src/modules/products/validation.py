"""Product validation rules.

Each check returns the failing ``ResponseOutcome`` or ``None`` when the
rule holds; nothing here raises.  Callers must run
``validate_required_fields`` before ``validate_not_duplicate``: the
duplicate look-up relies on ``serie`` and ``codigoBarra`` being valid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from modules.core.outcomes import ResponseOutcome
from modules.products.dtos import IdParseResult
from modules.products.models import BARCODE_FIELD, NAME_FIELD, SERIAL_FIELD, Product

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a number here.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_required_fields(product: Product) -> Optional[ResponseOutcome]:
    """``nome`` must be a non-blank string; ``codigoBarra`` and ``serie`` > 0."""
    nome = product.get(NAME_FIELD)
    if (
        not isinstance(nome, str)
        or not nome.strip()
        or not _is_positive_int(product.get(BARCODE_FIELD))
        or not _is_positive_int(product.get(SERIAL_FIELD))
    ):
        return ResponseOutcome.REQUIRED_FIELDS_MISSING
    return None


def validate_not_duplicate(
    product: Product, repository: IProductRepository
) -> Optional[ResponseOutcome]:
    """Reject a product whose ``(serie, codigoBarra)`` pair is already stored."""
    duplicate = repository.find_duplicate(
        product[SERIAL_FIELD], product[BARCODE_FIELD]
    )
    if duplicate is not None:
        return ResponseOutcome.DUPLICATE_PRODUCT
    return None


def parse_id(raw: Optional[str]) -> IdParseResult:
    """Parse a product id taken from the request path.

    ``None`` or blank -> ``SERIAL_NULL``; anything that is not a base-10
    integer, including one padded with whitespace, -> ``SERIAL_INVALID``.
    """
    if raw is None or not raw.strip():
        return IdParseResult(outcome=ResponseOutcome.SERIAL_NULL)
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not digits.isascii() or not digits.isdigit():
        return IdParseResult(outcome=ResponseOutcome.SERIAL_INVALID)
    return IdParseResult(value=int(raw))
