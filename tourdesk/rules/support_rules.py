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
Support desk rule sets.

Customer-facing tickets carry a subject and description of bounded length.
Staff respond to, update, assign and close them.
"""

from tourdesk.config import TICKET_CATEGORIES, TICKET_PRIORITIES, TICKET_STATUSES
from tourdesk.rules.field_rules import (
    bounded_string,
    enumerated,
    optional,
    required_uuid,
)
from tourdesk.rules.pipeline import RuleSet

_PRIORITY = "Invalid priority level"
_CATEGORY = "Invalid category"


SUPPORT_TICKET_CREATE = RuleSet(
    name="support.create",
    rules=(
        bounded_string(
            "subject",
            "Subject is required",
            "Subject must be between 5 and 100 characters",
            min_length=5,
            max_length=100,
        ),
        bounded_string(
            "description",
            "Description is required",
            "Description must be between 10 and 1000 characters",
            min_length=10,
            max_length=1000,
        ),
        optional("priority", enumerated("priority", TICKET_PRIORITIES, _PRIORITY)),
        optional("category", enumerated("category", TICKET_CATEGORIES, _CATEGORY)),
    ),
)

SUPPORT_RESPONSE = RuleSet(
    name="support.response",
    rules=(
        bounded_string(
            "message",
            "Response message is required",
            "Response must be between 1 and 1000 characters",
            max_length=1000,
        ),
    ),
)

SUPPORT_ASSIGNMENT = RuleSet(
    name="support.assignment",
    rules=(required_uuid("staffId", "Staff ID is required", "Invalid staff ID"),),
)

SUPPORT_TICKET_UPDATE = RuleSet(
    name="support.update",
    rules=(
        optional("priority", enumerated("priority", TICKET_PRIORITIES, _PRIORITY)),
        optional("category", enumerated("category", TICKET_CATEGORIES, _CATEGORY)),
        optional("status", enumerated("status", TICKET_STATUSES, "Invalid status")),
    ),
)

SUPPORT_TICKET_CLOSE = RuleSet(
    name="support.close",
    rules=(
        bounded_string(
            "resolution",
            "Resolution is required",
            "Resolution must be between 10 and 1000 characters",
            min_length=10,
            max_length=1000,
        ),
    ),
)
