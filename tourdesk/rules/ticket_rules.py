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


"""Support ticket rule sets: creation, status change and assignment."""

from tourdesk.config import TICKET_PRIORITIES, TICKET_STATUSES
from tourdesk.rules.field_rules import enumerated, optional_text, required_string
from tourdesk.rules.pipeline import RuleSet

_COMMENT = "Comment must be a non-empty string if provided"


TICKET_CREATE = RuleSet(
    name="ticket.create",
    rules=(
        required_string("title", "Title is required and must be a non-empty string"),
        required_string(
            "description", "Description is required and must be a non-empty string"
        ),
        enumerated(
            "priority", TICKET_PRIORITIES, "Invalid priority level", skip_empty=True
        ),
    ),
)

TICKET_STATUS_UPDATE = RuleSet(
    name="ticket.status",
    rules=(
        enumerated("status", TICKET_STATUSES, "Valid status is required"),
        optional_text("comment", _COMMENT, allow_blank=False),
    ),
)

TICKET_ASSIGNMENT = RuleSet(
    name="ticket.assignment",
    rules=(
        optional_text(
            "assignedToId", "Assigned user ID must be a string", trim=False
        ),
        optional_text("comment", _COMMENT, allow_blank=False),
    ),
)
