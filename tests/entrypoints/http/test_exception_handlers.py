"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_showcase.domain.errors import (
    DomainError,
    InternalError,
    NotFoundError,
    QueryValidationError,
    ValidationError,
)
from vehicle_showcase.entrypoints.http.exception_handlers import (
    error_body,
    register_exception_handlers,
)


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/query-validation-error")
    def raise_query_validation_error() -> None:
        raise QueryValidationError(
            errors=[
                "page must not be less than 1",
                "page must be an integer number",
                "limit must not be less than 1",
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Vehicle", "999")

    @test_app.get("/domain-error")
    def raise_domain_error() -> None:
        raise DomainError("Something is off")

    @test_app.get("/internal-error")
    def raise_internal_error() -> dict:
        raise InternalError("Unexpected condition")

    @test_app.get("/typed/{year}")
    def typed_path(year: int) -> dict:
        return {"year": year}

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


def test_error_body_uses_status_phrase() -> None:
    assert error_body(404, "gone") == {"statusCode": 404, "message": "gone", "error": "Not Found"}


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 400
        assert response.json() == {
            "statusCode": 400,
            "message": ["Validation failed"],
            "error": "Bad Request",
        }

    def test_query_validation_error_keeps_message_order(self, client: TestClient) -> None:
        response = client.get("/query-validation-error")

        assert response.status_code == 400
        assert response.json() == {
            "statusCode": 400,
            "message": [
                "page must not be less than 1",
                "page must be an integer number",
                "limit must not be less than 1",
            ],
            "error": "Bad Request",
        }


class TestNotFoundErrorHandler:
    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "Vehicle with id '999' not found",
            "error": "Not Found",
        }


class TestOtherDomainErrors:
    def test_unmapped_domain_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/domain-error")

        assert response.status_code == 400
        assert response.json()["message"] == "Something is off"

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/internal-error")

        assert response.status_code == 500
        assert response.json() == {
            "statusCode": 500,
            "message": "Unexpected condition",
            "error": "Internal Server Error",
        }


class TestRequestValidationErrorHandler:
    def test_framework_validation_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/typed/abc")

        assert response.status_code == 400
        data = response.json()
        assert data["statusCode"] == 400
        assert data["error"] == "Bad Request"
        assert len(data["message"]) == 1
        assert data["message"][0].startswith("year ")


class TestUnexpectedErrorHandler:
    def test_unexpected_error_returns_generic_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "statusCode": 500,
            "message": "An unexpected error occurred",
            "error": "Internal Server Error",
        }
