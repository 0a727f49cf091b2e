import pytest

from rest_framework.test import APIClient

from shared.domain.identifiers import parse

FIXED_ID = "2N1yQqzh1fhkGEPv5rJRqOZqxE3"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


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


@pytest.fixture()
def fixed_id():
    """Identifier returned by ``fixed_id_generator``."""
    return parse(FIXED_ID)


@pytest.fixture()
def fixed_id_generator(fixed_id):
    """Deterministic stand-in for ``shared.domain.identifiers.generate``."""
    return lambda: fixed_id
