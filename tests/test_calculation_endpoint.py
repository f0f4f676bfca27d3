"""
Calculation Endpoint Tests
==========================
Integration tests for GET /calculate/addTwoTo/{value}, driven through
MockCalculationService.
"""
import pytest

from calculation_api.app.api.endpoints.calculation import FAILURE_MESSAGE, UNAVAILABLE_MESSAGE
from calculation_api.app.services.calculation_service import (
    CalculationResult,
    CalculationService,
    CalculationStatus,
)
from tests.mocking import MockCalculationService


class _LegacyPassing(CalculationService):
    """Adds two but returns a bare int, like services predating the result type."""

    def add_two_to(self, value):
        return value + 2


class _OkWithoutValue(CalculationService):
    def add_two_to(self, value):
        return CalculationResult(status=CalculationStatus.OK)


class _Recording(CalculationService):
    def __init__(self):
        self.calls = []

    def add_two_to(self, value):
        self.calls.append(value)
        return MockCalculationService._default().add_two_to(value)


# ============================================================================
# PASSING SERVICE
# ============================================================================

class TestPassingService:

    def test_returns_200_with_sum(self, passing_client):
        response = passing_client.get("/calculate/addTwoTo/3")
        assert response.status_code == 200
        assert response.json() == 5

    def test_body_is_json(self, passing_client):
        response = passing_client.get("/calculate/addTwoTo/3")
        assert response.headers["content-type"].startswith("application/json")
        assert response.text == "5"

    @pytest.mark.parametrize("value", [0, 1, 40, 123456])
    def test_non_negative_inputs(self, passing_client, value):
        response = passing_client.get(f"/calculate/addTwoTo/{value}")
        assert response.status_code == 200
        assert response.json() == value + 2

    def test_zero_result_is_success(self, passing_client):
        """-2 + 2 == 0 must not be read as the unavailable signal."""
        response = passing_client.get("/calculate/addTwoTo/-2")
        assert response.status_code == 200
        assert response.json() == 0

    def test_negative_result_is_success(self, passing_client):
        """A computed negative value stays a success; only the status means unavailable."""
        response = passing_client.get("/calculate/addTwoTo/-4")
        assert response.status_code == 200
        assert response.json() == -2

    def test_repeated_requests_are_identical(self, passing_client):
        bodies = [passing_client.get("/calculate/addTwoTo/8").json() for _ in range(3)]
        assert bodies == [10, 10, 10]


# ============================================================================
# FAILING SERVICE
# ============================================================================

class TestFailingService:

    def test_returns_401_with_notice(self, failing_client):
        response = failing_client.get("/calculate/addTwoTo/3")
        assert response.status_code == 401
        assert response.text == UNAVAILABLE_MESSAGE
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.parametrize("value", [-50, -3, -2, 0, 3, 99])
    def test_every_input_is_401(self, failing_client, value):
        response = failing_client.get(f"/calculate/addTwoTo/{value}")
        assert response.status_code == 401


# ============================================================================
# THROWING SERVICE
# ============================================================================

class TestThrowingService:

    @pytest.mark.parametrize("value", [-4, 0, 3])
    def test_returns_500_with_notice(self, throwing_client, value):
        response = throwing_client.get(f"/calculate/addTwoTo/{value}")
        assert response.status_code == 500
        assert response.text == FAILURE_MESSAGE

    def test_error_detail_not_exposed(self, throwing_client):
        response = throwing_client.get("/calculate/addTwoTo/3")
        assert "Simulated" not in response.text

    def test_ok_without_integer_is_500(self, make_client):
        response = make_client(_OkWithoutValue()).get("/calculate/addTwoTo/1")
        assert response.status_code == 500
        assert response.text == FAILURE_MESSAGE


# ============================================================================
# LEGACY INTEGER SERVICES AND ROUTING
# ============================================================================

class TestLegacyAndRouting:

    def test_legacy_negative_result_is_401(self, make_client):
        """Bare ints keep the negative-means-down convention, so -4 + 2 reads as unavailable."""
        response = make_client(_LegacyPassing()).get("/calculate/addTwoTo/-4")
        assert response.status_code == 401

    def test_legacy_zero_result_is_200(self, make_client):
        response = make_client(_LegacyPassing()).get("/calculate/addTwoTo/-2")
        assert response.status_code == 200
        assert response.json() == 0

    def test_unknown_selector_echoes_value(self, make_client):
        response = make_client(MockCalculationService(None)).get("/calculate/addTwoTo/7")
        assert response.status_code == 200
        assert response.json() == 7

    @pytest.mark.parametrize("raw", ["abc", "1.5"])
    def test_non_integer_rejected_before_service(self, make_client, raw):
        service = _Recording()
        response = make_client(service).get(f"/calculate/addTwoTo/{raw}")
        assert response.status_code == 422
        assert service.calls == []

    def test_service_receives_parsed_int(self, make_client):
        service = _Recording()
        make_client(service).get("/calculate/addTwoTo/12")
        assert service.calls == [12]

    def test_openapi_documents_error_responses(self, passing_client):
        schema = passing_client.get("/openapi.json").json()
        operation = schema["paths"]["/calculate/addTwoTo/{value}"]["get"]
        assert {"200", "401", "500"} <= set(operation["responses"])
        assert "text/plain" in operation["responses"]["401"]["content"]


# ============================================================================
# MEDIA TYPES
# ============================================================================

class TestMediaTypes:

    @pytest.mark.parametrize("content_type", ["application/json", "application/json; charset=utf-8"])
    def test_json_content_type_accepted(self, passing_client, content_type):
        response = passing_client.get("/calculate/addTwoTo/3", headers={"Content-Type": content_type})
        assert response.status_code == 200
        assert response.json() == 5

    def test_other_content_type_rejected_before_service(self, make_client):
        service = _Recording()
        response = make_client(service).get(
            "/calculate/addTwoTo/3", headers={"Content-Type": "text/plain"}
        )
        assert response.status_code == 415
        assert service.calls == []

    def test_openapi_declares_json_in_and_out(self, passing_client):
        schema = passing_client.get("/openapi.json").json()
        operation = schema["paths"]["/calculate/addTwoTo/{value}"]["get"]
        assert operation["x-consumes"] == ["application/json"]
        assert operation["x-produces"] == ["application/json"]
        assert "application/json" in operation["responses"]["200"]["content"]
