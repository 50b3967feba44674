"""Test error handling functionality.

Verifies that custom exceptions carry the right status and type, and that
the HTTP layer turns them into the shared error body without leaking store
internals.
"""
import json
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from core.error_handlers import create_error_response
from core.exceptions import (
    AppException,
    InfrastructureError,
    InvalidFormatError,
    InvalidInputError,
    NoOptimalSolutionError,
    NotFoundError,
    ValidationError,
)
from database.deps import get_db_read
from domain.models import MealSlot
from main import app


@pytest.mark.parametrize("exc, status_code, error_type", [
    (NotFoundError("Recipe", 1), 404, "not_found"),
    (ValidationError("bad"), 400, "validation_error"),
    (NoOptimalSolutionError(MealSlot.DINNER), 409, "no_optimal_solution"),
    (InvalidInputError("bad", argument="meal_slot"), 400, "invalid_input"),
    (InvalidFormatError("bad", value="X"), 400, "invalid_format"),
    (InfrastructureError("create"), 500, "infrastructure_error"),
])
def test_exception_classes_have_proper_attributes(exc, status_code, error_type):
    assert isinstance(exc, AppException)
    assert exc.status_code == status_code
    assert exc.error_type == error_type


def test_validation_error_keeps_every_message_in_order():
    exc = ValidationError.from_messages(["first", "second"])
    assert exc.errors == ["first", "second"]
    assert exc.details == {"errors": ["first", "second"]}
    assert exc.message.startswith("2 validation error(s)")


def test_no_optimal_solution_names_the_slot():
    exc = NoOptimalSolutionError(MealSlot.LUNCH)
    assert exc.message == "No suitable recipe found for lunch"
    assert exc.details == {"meal_slot": "L"}


def test_not_found_without_identifier():
    assert NotFoundError("Active diet plan").message == "Active diet plan not found"


def test_error_response_body_shape():
    response = create_error_response("Gone", status_code=404, error_type="not_found", details={"id": 3})
    body = json.loads(response.body)
    assert response.status_code == 404
    assert body == {"error": {"message": "Gone", "status_code": 404, "type": "not_found", "details": {"id": 3}}}


def test_infrastructure_failure_is_reported_without_internals(client):
    broken = MagicMock()
    broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("secret connection string"))

    def broken_session():
        yield broken

    app.dependency_overrides[get_db_read] = broken_session
    response = client.get("/health")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["type"] == "infrastructure_error"
    assert "secret" not in response.text
