import pytest
from django.apps import apps

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def product_store():
    """Give every test an empty product store (ids restart at 1)."""
    return apps.get_app_config("products").reset_repository()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
