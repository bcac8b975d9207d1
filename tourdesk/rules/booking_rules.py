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


"""Booking rule sets: creation, status updates, payment and refund approval."""

from tourdesk.config import BOOKING_STATUSES, CANCELLED_STATUS, PAYMENT_METHODS
from tourdesk.rules.field_rules import (
    enumerated,
    optional_text,
    required_date,
    required_identifier,
    required_number,
    required_string,
    required_when,
)
from tourdesk.rules.pipeline import RuleSet


BOOKING_CREATE = RuleSet(
    name="booking.create",
    rules=(
        required_identifier("packageId", "Valid package ID is required"),
        required_date("startDate", "Valid start date is required"),
        required_number(
            "numberOfPeople",
            "Number of people must be at least 1",
            minimum=1,
            inclusive=True,
        ),
        optional_text("specialRequests", "Special requests must be a string"),
    ),
)

# The status rule runs first so the cancellation check sees the canonical value.
BOOKING_STATUS_UPDATE = RuleSet(
    name="booking.status",
    rules=(
        enumerated("status", BOOKING_STATUSES, "Valid booking status is required"),
        required_when(
            "status",
            CANCELLED_STATUS,
            required_string(
                "cancellationReason",
                "Cancellation reason is required when cancelling a booking",
            ),
        ),
    ),
)

BOOKING_PAYMENT = RuleSet(
    name="booking.payment",
    rules=(
        required_number("amount", "Valid payment amount is required"),
        enumerated("paymentMethod", PAYMENT_METHODS, "Valid payment method is required"),
    ),
)

# Agency dashboard status change. No cancellation reason is collected here.
AGENCY_BOOKING_STATUS = RuleSet(
    name="agency.booking.status",
    rules=(
        enumerated(
            "status",
            BOOKING_STATUSES,
            "Status must be one of: pending, confirmed, cancelled, completed",
        ),
    ),
)

REFUND_APPROVAL = RuleSet(
    name="refund.approval",
    rules=(
        required_number(
            "amount",
            "Refund amount must be non-negative",
            minimum=0,
            inclusive=True,
        ),
        optional_text("reason", "Refund reason must be a string", trim=False),
    ),
)
