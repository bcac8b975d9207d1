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
FastAPI routes for Tourdesk.

Contains all API endpoints:
- / and /health: Health check
- /v1/validate/...: Dry-run validation endpoints, one per rule set

Validation endpoints persist nothing. They answer with the normalized payload
so callers can see exactly what a downstream handler would receive.
"""

from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from tourdesk.config import APP_VERSION, APP_TITLE, VALIDATION_ERROR_STATUS
from tourdesk.exceptions import envelope, raise_for_result
from tourdesk.rules import (
    AGENCY_BOOKING_STATUS,
    BOOKING_CREATE,
    BOOKING_PAYMENT,
    BOOKING_STATUS_UPDATE,
    PACKAGE_CREATE,
    PACKAGE_UPDATE,
    REFUND_APPROVAL,
    SUPPORT_ASSIGNMENT,
    SUPPORT_RESPONSE,
    SUPPORT_TICKET_CLOSE,
    SUPPORT_TICKET_CREATE,
    SUPPORT_TICKET_UPDATE,
    TICKET_ASSIGNMENT,
    TICKET_CREATE,
    TICKET_STATUS_UPDATE,
    TOUR_CREATE,
    TOUR_UPDATE,
    RuleSet,
    validate,
)

router = APIRouter()

# (method, path, rule set)
VALIDATION_ROUTES: List[Tuple[str, str, RuleSet]] = [
    ("POST", "/v1/validate/packages", PACKAGE_CREATE),
    ("PATCH", "/v1/validate/packages", PACKAGE_UPDATE),
    ("POST", "/v1/validate/tours", TOUR_CREATE),
    ("PATCH", "/v1/validate/tours", TOUR_UPDATE),
    ("POST", "/v1/validate/bookings", BOOKING_CREATE),
    ("PATCH", "/v1/validate/bookings/status", BOOKING_STATUS_UPDATE),
    ("POST", "/v1/validate/bookings/payment", BOOKING_PAYMENT),
    ("POST", "/v1/validate/tickets", TICKET_CREATE),
    ("PATCH", "/v1/validate/tickets/status", TICKET_STATUS_UPDATE),
    ("PATCH", "/v1/validate/tickets/assignment", TICKET_ASSIGNMENT),
    ("PATCH", "/v1/validate/agency/bookings/status", AGENCY_BOOKING_STATUS),
    ("POST", "/v1/validate/refunds/approval", REFUND_APPROVAL),
    ("POST", "/v1/validate/support/tickets", SUPPORT_TICKET_CREATE),
    ("PATCH", "/v1/validate/support/tickets", SUPPORT_TICKET_UPDATE),
    ("POST", "/v1/validate/support/tickets/responses", SUPPORT_RESPONSE),
    ("PATCH", "/v1/validate/support/tickets/assignment", SUPPORT_ASSIGNMENT),
    ("POST", "/v1/validate/support/tickets/close", SUPPORT_TICKET_CLOSE),
]


async def read_json_body(request: Request) -> Any:
    """
    Read the raw JSON body of a request.

    Raises:
        HTTPException: 400 if the body is empty or not valid JSON
    """
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(
            status_code=VALIDATION_ERROR_STATUS, detail="Malformed JSON body"
        )


def validated_body(rule_set: RuleSet) -> Callable[..., Awaitable[Dict[str, Any]]]:
    """
    Build a dependency that validates the request body against a rule set.

    Args:
        rule_set: Rules to apply

    Returns:
        FastAPI dependency returning the normalized payload
    """

    async def dependency(payload: Any = Depends(read_json_body)) -> Dict[str, Any]:
        return raise_for_result(validate(payload, rule_set))

    return dependency


def _make_endpoint(rule_set: RuleSet) -> Callable[..., Awaitable[Dict[str, Any]]]:
    async def endpoint(
        payload: Dict[str, Any] = Depends(validated_body(rule_set)),
    ) -> Dict[str, Any]:
        return envelope(200, "Payload is valid", payload)

    return endpoint


for _method, _path, _rule_set in VALIDATION_ROUTES:
    router.add_api_route(
        _path,
        _make_endpoint(_rule_set),
        methods=[_method],
        name=_rule_set.name,
        summary=f"Validate a {_rule_set.name} payload",
    )


@router.get("/")
async def root() -> Dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Status and application version
    """
    return {"status": "ok", "message": f"{APP_TITLE} is running", "version": APP_VERSION}


@router.get("/health")
async def health() -> Dict[str, str]:
    """
    Detailed health check.

    Returns:
        Status, timestamp and version
    """
    logger.debug("[Routes] Health check")
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": APP_VERSION,
    }
