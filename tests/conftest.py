"""pytest公共fixture"""
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.port_filter import PortFilter


@pytest.fixture
def port_filter() -> PortFilter:
    return PortFilter()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
