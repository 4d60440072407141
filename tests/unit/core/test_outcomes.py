"""Unit tests for the response outcome table."""

from __future__ import annotations

import pytest

from modules.core.outcomes import ResponseOutcome

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("outcome", "status", "message"),
    [
        (ResponseOutcome.SUCCESS, 200, "Sucesso"),
        (ResponseOutcome.PRODUCT_CREATED, 201, "Produto criado com sucesso"),
        (ResponseOutcome.PRODUCT_UPDATED, 200, "Produto atualizado com sucesso"),
        (
            ResponseOutcome.PRODUCT_REMOVED,
            204,
            "Baixa de produto realizada com sucesso",
        ),
        (
            ResponseOutcome.REQUIRED_FIELDS_MISSING,
            400,
            "Campos obrigatórios não informados",
        ),
        (ResponseOutcome.PRODUCT_NOT_PROVIDED, 400, "Produto não foi informado"),
        (
            ResponseOutcome.SERIAL_NULL,
            400,
            "O número de série do produto não foi informado",
        ),
        (ResponseOutcome.SERIAL_INVALID, 400, "Número de série inválido"),
        (ResponseOutcome.NOT_FOUND, 404, "Nenhum resultado encontrado"),
        (ResponseOutcome.DUPLICATE_PRODUCT, 409, "Produto já cadastrado"),
    ],
)
def test_outcome_table(outcome, status, message):
    assert outcome.status == status
    assert outcome.message == message


class TestOutcomeTable:
    def test_table_is_closed(self):
        assert len(ResponseOutcome) == 10

    def test_is_error(self):
        assert not ResponseOutcome.SUCCESS.is_error
        assert not ResponseOutcome.PRODUCT_CREATED.is_error
        assert ResponseOutcome.SERIAL_INVALID.is_error
        assert ResponseOutcome.DUPLICATE_PRODUCT.is_error

    def test_lookup_by_name(self):
        assert ResponseOutcome["DUPLICATE_PRODUCT"].status == 409
