"""Product URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("produto", ProductViewSet, basename="produto")

urlpatterns = [
    # DELETE /produto/ carries a blank id; the view answers SERIAL_NULL.
    path(
        "produto/",
        ProductViewSet.as_view({"delete": "destroy"}),
        {"pk": ""},
        name="produto-blank-id",
    ),
    *router.urls,
]
