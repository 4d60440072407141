"""Run the development server on the configured stock service address.

Same as ``runserver``, but ``SERVER_HOST``/``SERVER_PORT`` replace the
stock ``127.0.0.1:8000`` default when no address is given.
"""

from __future__ import annotations

import structlog
from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = structlog.get_logger(__name__)


class Command(RunserverCommand):
    help = "Start the stock HTTP service (default localhost:8080)."

    @property
    def default_addr(self) -> str:
        return settings.SERVER_HOST

    @property
    def default_port(self) -> str:
        return str(settings.SERVER_PORT)

    def inner_run(self, *args, **options):
        logger.info("server.starting", host=self.addr, port=self.port)
        return super().inner_run(*args, **options)
