"""Tests for FastAPI exception handlers."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from space_registry.domain.errors import BadRequestError, DomainError, NotFoundError
from space_registry.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/bad-request")
    def raise_bad_request() -> None:
        raise BadRequestError("Bad request")

    @test_app.get("/bad-request-with-fields")
    def raise_bad_request_with_fields() -> None:
        raise BadRequestError(
            errors=[
                {
                    "field": "speed",
                    "message": "Must be less than 0.99",
                    "code": "INVALID_VALUE",
                }
            ]
        )

    @test_app.get("/not-found")
    def raise_not_found() -> None:
        raise NotFoundError("Ship", "42")

    @test_app.get("/domain-error")
    def raise_domain_error() -> None:
        raise DomainError("Something domain-specific")

    @test_app.get("/typed/{ship_id}")
    def typed_path(ship_id: int) -> dict:
        return {"ship_id": ship_id}

    @test_app.get("/typed-query")
    def typed_query(limit: int) -> dict:
        return {"limit": limit}

    @test_app.get("/value-error")
    def raise_value_error() -> dict:
        raise ValueError("Invalid literal")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestBadRequestErrorHandler:
    def test_simple_bad_request_returns_400(self, client: TestClient) -> None:
        response = client.get("/bad-request")

        assert response.status_code == 400
        assert response.json() == {"detail": "Bad request", "code": "BAD_REQUEST"}

    def test_field_errors_are_included(self, client: TestClient) -> None:
        response = client.get("/bad-request-with-fields")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Validation failed",
            "code": "BAD_REQUEST",
            "errors": [
                {
                    "field": "speed",
                    "message": "Must be less than 0.99",
                    "code": "INVALID_VALUE",
                }
            ],
        }

    def test_client_errors_are_logged_at_info(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="space_registry.entrypoints.http.exception_handlers"):
            client.get("/bad-request")

        record = next(r for r in caplog.records if r.getMessage() == "Client error")
        assert record.levelno == logging.INFO
        assert record.error_code == "BAD_REQUEST"
        assert record.path == "/bad-request"


class TestNotFoundErrorHandler:
    def test_not_found_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Ship with identifier '42' not found",
            "code": "NOT_FOUND",
        }


class TestOtherErrors:
    def test_unmapped_domain_error_defaults_to_400(self, client: TestClient) -> None:
        response = client.get("/domain-error")

        assert response.status_code == 400
        assert response.json()["code"] == "DOMAIN_ERROR"

    def test_malformed_path_parameter_returns_400(self, client: TestClient) -> None:
        response = client.get("/typed/abc")

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "BAD_REQUEST"
        assert data["errors"][0]["field"] == "ship_id"

    def test_request_validation_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/typed-query", params={"limit": "abc"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "limit"

    def test_value_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/value-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "Invalid literal", "code": "INVALID_VALUE"}

    def test_unexpected_error_returns_generic_500(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
        # Internal details are logged, never returned
        assert "Something went wrong" not in response.text
        assert any(r.getMessage() == "Unexpected error occurred" for r in caplog.records)
