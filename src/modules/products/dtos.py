"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductPayload``: input for product creation.
- ``IdParseResult``: outcome of parsing a product id from the URL.
- ``ProductResult``: outcome of a service command, with its product.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from modules.core.outcomes import ResponseOutcome

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductPayload(BaseModel):
    """Immutable DTO for product creation requests.

    Only the JSON types are checked here: a field holding the wrong
    type fails model validation.  Presence and positivity are business
    rules and live in ``modules.products.validation``.  Unknown keys
    are kept as extras and stored verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    nome: Optional[StrictStr] = None
    codigoBarra: Optional[StrictInt] = None
    serie: Optional[StrictInt] = None

    def to_record(self) -> Dict[str, Any]:
        """Return the caller-supplied fields as a product record."""
        return self.model_dump(exclude_unset=True)


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class IdParseResult(BaseModel):
    """Either a parsed ``value`` or the ``outcome`` explaining the failure."""

    model_config = ConfigDict(frozen=True)

    value: Optional[int] = None
    outcome: Optional[ResponseOutcome] = None

    @property
    def ok(self) -> bool:
        return self.outcome is None


class ProductResult(BaseModel):
    """Immutable result of a product command."""

    model_config = ConfigDict(frozen=True)

    outcome: ResponseOutcome
    product: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return not self.outcome.is_error
