"""Product record shape.

A product is a JSON object kept as a plain ``dict``.  Business rules:
- ``nome`` is a non-blank string.
- ``codigoBarra`` and ``serie`` are positive integers.
- The ``(serie, codigoBarra)`` pair is unique across the store.
- ``id`` is assigned by the store on creation and never reused.

Any other caller-supplied key is stored and returned verbatim.
"""

from __future__ import annotations

from typing import Any, Dict

Product = Dict[str, Any]

ID_FIELD = "id"
NAME_FIELD = "nome"
BARCODE_FIELD = "codigoBarra"
SERIAL_FIELD = "serie"
