"""Shared fixtures for the Calculation API tests."""

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from calculation_api.app.core.config import Settings
from calculation_api.app.main import create_app
from tests.mocking import MockBehavior, MockCalculationService


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the caller's environment."""
    return Settings(
        project_name="Calculation API",
        api_version="9.9.9-test",
        debug=False,
        log_level="INFO",
        log_file="",
        host="127.0.0.1",
        port=8000,
    )


@pytest.fixture
def make_client(test_settings):
    """Return a factory building a TestClient around a given service."""

    def _make(service) -> TestClient:
        return TestClient(create_app(calculation_service=service, app_settings=test_settings))

    return _make


@pytest.fixture
def passing_client(make_client) -> TestClient:
    return make_client(MockCalculationService(MockBehavior.PASSING_TEST))


@pytest.fixture
def failing_client(make_client) -> TestClient:
    return make_client(MockCalculationService(MockBehavior.FAILING_TEST))


@pytest.fixture
def throwing_client(make_client) -> TestClient:
    return make_client(MockCalculationService(MockBehavior.THROWS_EXCEPTIONS))
