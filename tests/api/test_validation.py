"""Tests for the @validate_request decorator."""

import pytest
from flask import Flask, jsonify
from pydantic import BaseModel, Field

from cookieauth.api.validation import validate_request
from cookieauth.main import register_error_handlers


# Test Pydantic schemas
class MockCreateRequest(BaseModel):
    """Test schema for request body validation."""
    name: str = Field(..., description="Name field")
    amount: float = Field(..., description="Amount field")
    category: str | None = Field(default=None, description="Optional category")


class MockLoginRequest(BaseModel):
    email: str
    password: str


@pytest.fixture
def validation_client():
    """Create test client with validation test routes."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_error_handlers(app)

    @app.post("/test/valid")
    @validate_request
    def route_valid(data: MockCreateRequest):
        return jsonify({
            "name": data.name,
            "amount": data.amount,
            "category": data.category
        }), 200

    @app.get("/test/path/<uuid>")
    @validate_request
    def route_path_param(uuid: str):
        return jsonify({"uuid": uuid}), 200

    @app.post("/test/login")
    @validate_request
    def route_login(data: MockLoginRequest):
        return jsonify({"email": data.email}), 200

    with app.test_client() as client:
        yield client


def test_validates_valid_request_body(validation_client):
    response = validation_client.post(
        "/test/valid",
        json={"name": "Test", "amount": 100.50, "category": "Food"}
    )

    assert response.status_code == 200
    assert response.get_json() == {"name": "Test", "amount": 100.50, "category": "Food"}


def test_optional_field_omitted(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Test", "amount": 50.0})

    assert response.status_code == 200
    assert response.get_json()["category"] is None


def test_missing_required_field_reports_details(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Test"})

    assert response.status_code == 400
    data = response.get_json()
    assert data["error"]["type"] == "ValidationError"

    details = data["error"]["details"]
    assert details["model"] == "MockCreateRequest"
    assert details["received"] == {"name": "Test"}
    assert [e["field"] for e in details["errors"]] == ["amount"]


def test_error_details_include_field_message_and_type(validation_client):
    response = validation_client.post("/test/valid", json={"amount": "not_a_number"})

    errors = response.get_json()["error"]["details"]["errors"]
    assert errors
    for error in errors:
        assert set(error) == {"field", "message", "expected_type"}


def test_empty_json_object(validation_client):
    response = validation_client.post("/test/valid", json={})

    assert response.status_code == 400
    field_names = [e["field"] for e in response.get_json()["error"]["details"]["errors"]]
    assert "name" in field_names
    assert "amount" in field_names


def test_non_object_json_rejected(validation_client):
    response = validation_client.post("/test/valid", json=[1, 2, 3])

    assert response.status_code == 400
    data = response.get_json()
    assert data["error"]["message"] == "Request body must be a JSON object"
    assert data["error"]["details"]["received_type"] == "list"


def test_malformed_json_rejected(validation_client):
    response = validation_client.post(
        "/test/valid",
        data="{not json",
        content_type="application/json"
    )

    assert response.status_code == 400
    assert response.get_json()["error"]["message"] == "Request body must be valid JSON"


def test_form_data_accepted(validation_client):
    response = validation_client.post("/test/valid", data={"name": "Test", "amount": "12.5"})

    assert response.status_code == 200
    assert response.get_json()["amount"] == 12.5


def test_passes_through_path_parameters_unchanged(validation_client):
    response = validation_client.get("/test/path/abc-123")

    assert response.status_code == 200
    assert response.get_json() == {"uuid": "abc-123"}


def test_password_redacted_in_received(validation_client):
    response = validation_client.post("/test/login", json={"password": "hunter2"})

    assert response.status_code == 400
    details = response.get_json()["error"]["details"]
    assert details["received"] == {"password": "***"}
    assert b"hunter2" not in response.data
