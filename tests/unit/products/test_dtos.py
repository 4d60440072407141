"""Unit tests for Product DTOs.

Covers:
- ProductPayload: strict JSON types, extras kept, frozen immutability.
- IdParseResult / ProductResult: ``ok`` flag.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.core.outcomes import ResponseOutcome
from modules.products.dtos import IdParseResult, ProductPayload, ProductResult

pytestmark = pytest.mark.unit


class TestProductPayload:
    def test_valid_payload(self):
        payload = ProductPayload(nome="Mouse", codigoBarra=111, serie=222)
        assert payload.nome == "Mouse"
        assert payload.codigoBarra == 111
        assert payload.serie == 222

    def test_to_record_keeps_extras(self):
        payload = ProductPayload.model_validate(
            {"nome": "Mouse", "codigoBarra": 111, "serie": 222, "cor": "preto"}
        )
        assert payload.to_record() == {
            "nome": "Mouse",
            "codigoBarra": 111,
            "serie": 222,
            "cor": "preto",
        }

    def test_to_record_omits_absent_fields(self):
        payload = ProductPayload.model_validate({"nome": "Mouse"})
        assert payload.to_record() == {"nome": "Mouse"}

    def test_explicit_null_is_kept(self):
        payload = ProductPayload.model_validate({"nome": "Mouse", "serie": None})
        assert payload.to_record() == {"nome": "Mouse", "serie": None}

    @pytest.mark.parametrize(
        "data",
        [
            {"nome": 123},
            {"codigoBarra": "111"},
            {"serie": 2.5},
            {"serie": True},
        ],
    )
    def test_wrong_json_types_raise(self, data):
        with pytest.raises(ValidationError):
            ProductPayload.model_validate(data)

    def test_is_immutable(self):
        payload = ProductPayload(nome="Mouse", codigoBarra=1, serie=1)
        with pytest.raises(ValidationError):
            payload.nome = "Changed"


class TestResults:
    def test_id_parse_result_ok(self):
        assert IdParseResult(value=1).ok
        assert not IdParseResult(outcome=ResponseOutcome.SERIAL_NULL).ok

    def test_product_result_ok(self):
        assert ProductResult(outcome=ResponseOutcome.PRODUCT_CREATED).ok
        assert ProductResult(outcome=ResponseOutcome.SUCCESS).ok
        assert not ProductResult(outcome=ResponseOutcome.DUPLICATE_PRODUCT).ok
