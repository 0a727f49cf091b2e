"""Unit tests for the DRF exception handler envelope."""

from __future__ import annotations

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import NotFound, ValidationError

from modules.core.exception_handler import api_exception_handler
from shared.domain.errors import (
    AvailabilityOutOfBounds,
    DiscountPercentageOutOfBounds,
    InvalidEnumValue,
    InvalidIdentifier,
    OrderQuantityOutOfBounds,
)

pytestmark = pytest.mark.unit


class _Payload(BaseModel):
    quantity: int


def _pydantic_error():
    try:
        _Payload.model_validate({"quantity": "many"})
    except PydanticValidationError as exc:
        return exc
    raise AssertionError("payload unexpectedly validated")


class TestMappingErrors:
    @pytest.mark.parametrize(
        "exc",
        [
            InvalidIdentifier("x", ValueError("bad")),
            InvalidEnumValue("catalog_status", "sold"),
            AvailabilityOutOfBounds(-1),
            DiscountPercentageOutOfBounds(81),
            OrderQuantityOutOfBounds(0),
        ],
    )
    def test_every_mapping_error_is_a_400(self, exc):
        response = api_exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert response.data["errors"] == [
            {"code": exc.code, "detail": exc.detail, "attr": None}
        ]


class TestPydanticErrors:
    def test_field_location_becomes_attr(self):
        response = api_exception_handler(_pydantic_error(), {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert response.data["errors"][0]["attr"] == "quantity"
        assert response.data["errors"][0]["code"] == "int_parsing"


class TestDrfErrors:
    def test_not_found_is_client_error(self):
        response = api_exception_handler(NotFound(), {})
        assert response.status_code == 404
        assert response.data["type"] == "client_error"
        assert response.data["errors"][0]["code"] == "not_found"

    def test_nested_validation_error(self):
        response = api_exception_handler(ValidationError({"books": ["required"]}), {})
        assert response.data["type"] == "validation_error"
        assert response.data["errors"] == [
            {"code": "invalid", "detail": "required", "attr": "books"}
        ]

    def test_unknown_exceptions_are_not_handled(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None
