import pytest
from fastapi.testclient import TestClient

from type_converter.app import create_app
from type_converter.web_config import build_conversion_service


@pytest.fixture
def conversion_service():
    return build_conversion_service()


@pytest.fixture
def client():
    # 500 responses come back as responses instead of re-raised exceptions
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        yield test_client
