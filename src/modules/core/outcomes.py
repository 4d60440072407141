"""Response outcomes shared by the HTTP layer.

Every result the API can produce is a member of ``ResponseOutcome``,
bound to exactly one HTTP status code and one user-facing message.
Services return outcomes; only views turn them into HTTP responses.
"""

from __future__ import annotations

from enum import Enum

from rest_framework import status


class ResponseOutcome(Enum):
    SUCCESS = (status.HTTP_200_OK, "Sucesso")
    PRODUCT_CREATED = (status.HTTP_201_CREATED, "Produto criado com sucesso")
    PRODUCT_UPDATED = (status.HTTP_200_OK, "Produto atualizado com sucesso")
    PRODUCT_REMOVED = (
        status.HTTP_204_NO_CONTENT,
        "Baixa de produto realizada com sucesso",
    )

    REQUIRED_FIELDS_MISSING = (
        status.HTTP_400_BAD_REQUEST,
        "Campos obrigatórios não informados",
    )
    PRODUCT_NOT_PROVIDED = (status.HTTP_400_BAD_REQUEST, "Produto não foi informado")
    SERIAL_NULL = (
        status.HTTP_400_BAD_REQUEST,
        "O número de série do produto não foi informado",
    )
    SERIAL_INVALID = (status.HTTP_400_BAD_REQUEST, "Número de série inválido")
    NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Nenhum resultado encontrado")
    DUPLICATE_PRODUCT = (status.HTTP_409_CONFLICT, "Produto já cadastrado")

    def __init__(self, status_code: int, message: str) -> None:
        self.status = status_code
        self.message = message

    @property
    def is_error(self) -> bool:
        return self.status >= status.HTTP_400_BAD_REQUEST
