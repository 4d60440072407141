"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Service results carry a ``ResponseOutcome``; successes are rendered as
JSON, failures as a plain-text body holding the outcome message.
"""

from __future__ import annotations

from django.apps import apps
from django.http import HttpResponse
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.outcomes import ResponseOutcome
from modules.core.renderers import UTF8JSONRenderer
from modules.products.dtos import ProductPayload
from modules.products.services import ProductService


def outcome_response(outcome: ResponseOutcome) -> HttpResponse:
    """Plain-text response for a failed outcome."""
    return HttpResponse(
        outcome.message,
        status=outcome.status,
        content_type="text/plain; charset=utf-8",
    )


def empty_response(outcome: ResponseOutcome) -> HttpResponse:
    """Bodiless success that still declares the JSON content type."""
    return HttpResponse(
        status=outcome.status,
        content_type=f"{UTF8JSONRenderer.media_type}; charset={UTF8JSONRenderer.charset}",
    )


class ProductViewSet(GenericViewSet):
    """ViewSet for product list, create and delete.

    The service is built per request around the store owned by the
    ``products`` app config.
    """

    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        repository = apps.get_app_config("products").repository
        self._service = ProductService(repository=repository)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /produto"""
        products = self._service.list_products()
        return Response(products, status=ResponseOutcome.SUCCESS.status)

    # ------------------------------------------------------------------
    # Create / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response | HttpResponse:
        """POST /produto"""
        try:
            data = request.data
        except ParseError:
            return outcome_response(ResponseOutcome.PRODUCT_NOT_PROVIDED)

        if not isinstance(data, dict) or not data:
            return outcome_response(ResponseOutcome.PRODUCT_NOT_PROVIDED)

        try:
            payload = ProductPayload.model_validate(dict(data))
        except PydanticValidationError:
            return outcome_response(ResponseOutcome.REQUIRED_FIELDS_MISSING)

        result = self._service.create_product(payload)
        if not result.ok:
            return outcome_response(result.outcome)
        return Response(result.product, status=result.outcome.status)

    def destroy(self, request: Request, pk: str | None = None) -> HttpResponse:
        """DELETE /produto/{pk}"""
        result = self._service.delete_product(pk)
        if not result.ok:
            return outcome_response(result.outcome)
        return empty_response(result.outcome)
