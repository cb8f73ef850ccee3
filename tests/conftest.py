"""Pytest configuration and shared fixtures"""
import pytest
from fastapi.testclient import TestClient

from src.api.bmi import get_bmi_service
from src.main import app


@pytest.fixture(scope="function")
def client():
    """Create FastAPI test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def failing_client():
    """Test client whose BMI service raises, with server errors returned as responses"""
    def override(error: Exception):
        class FailingService:
            notes = []

            def calculate(self, normalized):
                raise error

        app.dependency_overrides[get_bmi_service] = lambda: FailingService()
        return TestClient(app, raise_server_exceptions=False)

    yield override

    app.dependency_overrides.clear()


@pytest.fixture
def metric_body():
    """Valid metric JSON body"""
    return {"units": "metric", "weight": 70, "height": 175}


@pytest.fixture
def imperial_body():
    """Valid imperial JSON body"""
    return {"units": "imperial", "weight": 154, "height": 69}
