# -*- coding: utf-8 -*-

"""
Unit tests for centralized error handling (tourdesk/exceptions.py).
"""

import json
from unittest.mock import Mock

import pytest
from fastapi import HTTPException

from tourdesk.exceptions import (
    envelope,
    http_exception_handler,
    raise_for_result,
)
from tourdesk.validation_errors import ValidationResult, validation_error


def _mock_request(method="POST", path="/v1/validate/packages"):
    request = Mock()
    request.method = method
    request.url.path = path
    return request


class TestEnvelope:
    """Tests for envelope()."""

    def test_success_envelope(self):
        """What it does: 2xx statuses are marked successful."""
        assert envelope(200, "ok", {"a": 1}) == {
            "success": True,
            "statusCode": 200,
            "message": "ok",
            "data": {"a": 1},
        }

    def test_error_envelope(self):
        """What it does: 4xx statuses are marked unsuccessful with null data."""
        body = envelope(400, "Valid destination is required")
        assert body["success"] is False
        assert body["data"] is None


class TestRaiseForResult:
    """Tests for raise_for_result()."""

    def test_returns_payload_on_success(self):
        """What it does: Passes the normalized payload through."""
        assert raise_for_result(ValidationResult.success({"name": "Goa"})) == {"name": "Goa"}

    def test_raises_http_exception_on_failure(self):
        """
        What it does: Converts the error value into an HTTPException.
        Purpose: The HTTP edge is the only place validation errors are raised.
        """
        result = ValidationResult.failure(validation_error("Valid start date is required"))

        with pytest.raises(HTTPException) as exc_info:
            raise_for_result(result)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Valid start date is required"


class TestHttpExceptionHandler:
    """Tests for http_exception_handler()."""

    @pytest.mark.asyncio
    async def test_renders_envelope(self):
        """What it does: Wraps detail and status in the response envelope."""
        response = await http_exception_handler(
            _mock_request(), HTTPException(status_code=400, detail="End date must be after start date")
        )

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "success": False,
            "statusCode": 400,
            "message": "End date must be after start date",
            "data": None,
        }

    @pytest.mark.asyncio
    async def test_non_string_detail_is_stringified(self):
        """What it does: Structured details are rendered as text."""
        response = await http_exception_handler(
            _mock_request(), HTTPException(status_code=404, detail={"reason": "gone"})
        )
        assert response.status_code == 404
        assert json.loads(response.body)["message"] == "{'reason': 'gone'}"
