"""Unit tests for the envelope exception handler."""

from __future__ import annotations

import pytest
from rest_framework import exceptions

from modules.core.exceptions import envelope_exception_handler

pytestmark = pytest.mark.unit


class TestEnvelopeExceptionHandler:
    def test_field_validation_error_becomes_422(self):
        exc = exceptions.ValidationError({"price": ["A valid number is required."]})
        response = envelope_exception_handler(exc, {})
        assert response.status_code == 422
        assert response.data == {
            "success": False,
            "errors": {"price": ["A valid number is required."]},
        }

    def test_list_validation_error_is_keyed(self):
        exc = exceptions.ValidationError(["Bad payload."])
        response = envelope_exception_handler(exc, {})
        assert response.status_code == 422
        assert response.data["errors"] == {"non_field_errors": ["Bad payload."]}

    def test_api_exception_keeps_status(self):
        response = envelope_exception_handler(exceptions.NotFound(), {})
        assert response.status_code == 404
        assert response.data == {"success": False, "message": "Not found."}

    def test_method_not_allowed_is_wrapped(self):
        exc = exceptions.MethodNotAllowed("DELETE")
        response = envelope_exception_handler(exc, {})
        assert response.status_code == 405
        assert response.data["success"] is False

    def test_unknown_exception_is_not_handled(self):
        assert envelope_exception_handler(RuntimeError("boom"), {}) is None
