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
Tourdesk - request validation for the tour-booking marketplace.

This package validates and normalizes untyped request payloads for packages,
tour listings, bookings and support tickets before any handler sees them.

Modules:
    - config: Configuration and enumerated value sets
    - validation_errors: ValidationError and ValidationResult types
    - rules: Field rule factories, rule sets and the validation pipeline
    - exceptions: Conversion of validation failures to HTTP responses
    - routes: FastAPI dry-run validation endpoints
"""

# Version is imported from config.py - the single source of truth
from tourdesk.config import APP_VERSION as __version__

# Pipeline
from tourdesk.rules import (
    RuleSet,
    validate,
    PACKAGE_CREATE,
    PACKAGE_UPDATE,
    TOUR_CREATE,
    TOUR_UPDATE,
    BOOKING_CREATE,
    BOOKING_STATUS_UPDATE,
    BOOKING_PAYMENT,
    AGENCY_BOOKING_STATUS,
    REFUND_APPROVAL,
    TICKET_CREATE,
    TICKET_STATUS_UPDATE,
    TICKET_ASSIGNMENT,
    SUPPORT_TICKET_CREATE,
    SUPPORT_RESPONSE,
    SUPPORT_ASSIGNMENT,
    SUPPORT_TICKET_UPDATE,
    SUPPORT_TICKET_CLOSE,
)

# Errors
from tourdesk.validation_errors import ValidationError, ValidationResult

# HTTP surface
from tourdesk.routes import router

__all__ = [
    # Version
    "__version__",

    # Pipeline
    "RuleSet",
    "validate",

    # Rule sets
    "PACKAGE_CREATE",
    "PACKAGE_UPDATE",
    "TOUR_CREATE",
    "TOUR_UPDATE",
    "BOOKING_CREATE",
    "BOOKING_STATUS_UPDATE",
    "BOOKING_PAYMENT",
    "AGENCY_BOOKING_STATUS",
    "REFUND_APPROVAL",
    "TICKET_CREATE",
    "TICKET_STATUS_UPDATE",
    "TICKET_ASSIGNMENT",
    "SUPPORT_TICKET_CREATE",
    "SUPPORT_RESPONSE",
    "SUPPORT_ASSIGNMENT",
    "SUPPORT_TICKET_UPDATE",
    "SUPPORT_TICKET_CLOSE",

    # Errors
    "ValidationError",
    "ValidationResult",

    # Routes
    "router",
]
