from typing import Any, Dict

import structlog
from django.apps import apps
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

logger = structlog.get_logger()

BANNER = "<h1> MZK </h1>"


@require_GET
def index(request: HttpRequest) -> HttpResponse:
    return HttpResponse(BANNER, content_type="text/html")


@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}

    repository = apps.get_app_config("products").repository
    with repository.lock:
        services["store"] = {"status": "up", "products": repository.count()}

    logger.info("health_check_completed", status="healthy")

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
    )
