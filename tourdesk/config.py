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
Tourdesk Configuration.

Centralized storage for all settings, constants, and enumerated value sets.
Loads environment variables and provides typed access to them.
"""

import os
from typing import Tuple
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# ==================================================================================================
# Server Settings
# ==================================================================================================

# Server host (default: 0.0.0.0 - listen on all interfaces)
# Use "127.0.0.1" to only allow local connections
DEFAULT_SERVER_HOST: str = "0.0.0.0"
SERVER_HOST: str = os.getenv("SERVER_HOST", DEFAULT_SERVER_HOST)

# Server port (default: 8000)
# Can be overridden by CLI: python main.py --port 9000
# Or by uvicorn directly: uvicorn main:app --port 9000
DEFAULT_SERVER_PORT: int = 8000
SERVER_PORT: int = int(os.getenv("SERVER_PORT", str(DEFAULT_SERVER_PORT)))

# ==================================================================================================
# Logging Settings
# ==================================================================================================

# Log level for the application (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
# DEBUG also logs every accepted payload, INFO only rejections.
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ==================================================================================================
# Validation Settings
# ==================================================================================================

# Status code attached to every validation failure.
# Malformed input and business-shape violations are not distinguished.
VALIDATION_ERROR_STATUS: int = 400

# Booking lifecycle statuses accepted by the status update rule set.
# Values are compared case-insensitively and normalized to the form below.
BOOKING_STATUSES: Tuple[str, ...] = ("PENDING", "CONFIRMED", "CANCELLED", "COMPLETED")

# Status that makes cancellationReason mandatory.
CANCELLED_STATUS: str = "CANCELLED"

# Accepted payment methods for booking payments.
PAYMENT_METHODS: Tuple[str, ...] = (
    "CREDIT_CARD",
    "DEBIT_CARD",
    "BANK_TRANSFER",
    "PAYPAL",
)

# Support ticket statuses and priorities.
TICKET_STATUSES: Tuple[str, ...] = (
    "OPEN",
    "ASSIGNED",
    "IN_PROGRESS",
    "RESOLVED",
    "CLOSED",
)
TICKET_PRIORITIES: Tuple[str, ...] = ("LOW", "MEDIUM", "HIGH", "URGENT")
TICKET_CATEGORIES: Tuple[str, ...] = (
    "GENERAL",
    "TECHNICAL",
    "BILLING",
    "BOOKING",
    "OTHER",
)


# ==================================================================================================
# Application Version
# ==================================================================================================

APP_VERSION: str = "1.0"
APP_TITLE: str = "Tourdesk"
APP_DESCRIPTION: str = "Request validation service for the tour-booking marketplace. Validates and normalizes package, tour, booking and support ticket payloads."
