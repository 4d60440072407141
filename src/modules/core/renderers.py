"""JSON renderer that advertises its charset.

DRF's stock ``JSONRenderer`` answers with a bare ``application/json``;
clients of this API expect ``application/json; charset=utf-8``.
"""

from __future__ import annotations

from rest_framework.renderers import JSONRenderer


class UTF8JSONRenderer(JSONRenderer):
    charset = "utf-8"
