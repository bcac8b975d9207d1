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
Request validation rules for Tourdesk.

Each rule set is an ordered tuple of independent field rules. The pipeline
copies the incoming payload, runs the rules in declaration order on the copy
and stops at the first failure.

Rule sets:
    package.create / package.update
    tour.create / tour.update
    booking.create / booking.status / booking.payment
    agency.booking.status / refund.approval
    ticket.create / ticket.status / ticket.assignment
    support.create / support.response / support.assignment / support.update /
    support.close

Creation sets require every field. Update sets accept any subset of fields,
each checked as on creation, and compare dates only when both are present.
"""

from tourdesk.rules.pipeline import RuleSet, validate
from tourdesk.rules.package_rules import PACKAGE_CREATE, PACKAGE_UPDATE
from tourdesk.rules.tour_rules import TOUR_CREATE, TOUR_UPDATE
from tourdesk.rules.booking_rules import (
    AGENCY_BOOKING_STATUS,
    BOOKING_CREATE,
    BOOKING_PAYMENT,
    BOOKING_STATUS_UPDATE,
    REFUND_APPROVAL,
)
from tourdesk.rules.ticket_rules import (
    TICKET_ASSIGNMENT,
    TICKET_CREATE,
    TICKET_STATUS_UPDATE,
)
from tourdesk.rules.support_rules import (
    SUPPORT_ASSIGNMENT,
    SUPPORT_RESPONSE,
    SUPPORT_TICKET_CLOSE,
    SUPPORT_TICKET_CREATE,
    SUPPORT_TICKET_UPDATE,
)

__all__ = [
    "RuleSet",
    "validate",
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
]
