# -*- coding: utf-8 -*-

# Tourdesk
# Copyright (C) 2025 Tourdesk contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.


"""
Centralized error handling for Tourdesk.

Validation rules return errors as values. This module is the boundary where
they become HTTP responses:

- raise_for_result(): Raises HTTPException for a failed ValidationResult
- http_exception_handler(): Renders any HTTPException in the response envelope
"""

from typing import Any, Dict

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger

from tourdesk.config import VALIDATION_ERROR_STATUS
from tourdesk.validation_errors import ValidationResult


def envelope(status_code: int, message: str, data: Any = None) -> Dict[str, Any]:
    """
    Build the JSON response envelope shared by all endpoints.

    Args:
        status_code: HTTP status code of the response
        message: Human-readable message
        data: Response payload (None for errors)

    Returns:
        Dict with success, statusCode, message and data keys
    """
    return {
        "success": 200 <= status_code < 300,
        "statusCode": status_code,
        "message": message,
        "data": data,
    }


def raise_for_result(result: ValidationResult) -> Dict[str, Any]:
    """
    Return the normalized payload or raise for a failed validation.

    Args:
        result: Outcome of validate()

    Returns:
        Normalized payload

    Raises:
        HTTPException: With the error's status and message as detail
    """
    if result.error is not None:
        raise HTTPException(status_code=result.error.status, detail=result.error.message)
    return result.payload


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render an HTTPException in the standard envelope."""
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code >= 500:
        logger.error("[Errors] {} {} failed: {}", request.method, request.url.path, message)
    elif exc.status_code != VALIDATION_ERROR_STATUS:
        logger.warning(
            "[Errors] {} {} -> HTTP {}: {}",
            request.method,
            request.url.path,
            exc.status_code,
            message,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )
