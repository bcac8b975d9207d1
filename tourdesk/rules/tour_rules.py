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
Tour listing rule sets.

Tours differ from packages in that inclusion, exclusion and itinerary lists
may be empty, an images list and the owning agency are required on creation,
and update failures use their own wording.
"""

from tourdesk.rules.field_rules import (
    date_order,
    itinerary_array,
    optional,
    required_array,
    required_date,
    required_identifier,
    required_number,
    required_string,
    string_array,
)
from tourdesk.rules.pipeline import RuleSet

_DATE_ORDER = "End date must be after start date"
_DATES = "Valid start and end dates are required"
_INCLUSIONS = "Inclusions must be an array"
_INCLUSION_ITEM = "Inclusions must be a list of strings"
_EXCLUSIONS = "Exclusions must be an array"
_EXCLUSION_ITEM = "Exclusions must be a list of strings"
_ITINERARY = "Itinerary must be an array"
_ITINERARY_ITEM = "Each itinerary item must have a description"
_IMAGES = "Images must be an array"


TOUR_CREATE = RuleSet(
    name="tour.create",
    rules=(
        required_date("startDate", _DATES),
        required_date("endDate", _DATES),
        date_order("startDate", "endDate", _DATE_ORDER),
        required_string("name", "Valid package name is required"),
        required_string("description", "Valid package description is required"),
        required_number("price", "Valid price is required"),
        required_number("duration", "Valid duration in days is required"),
        required_string("destination", "Valid destination is required"),
        required_number("maxPeople", "Valid maximum number of people is required"),
        string_array("inclusions", _INCLUSIONS, _INCLUSION_ITEM),
        string_array("exclusions", _EXCLUSIONS, _EXCLUSION_ITEM),
        itinerary_array("itinerary", _ITINERARY, _ITINERARY_ITEM, allow_empty=True),
        required_array("images", _IMAGES, allow_empty=True),
        required_identifier("agencyId", "Valid agency ID is required"),
    ),
)

TOUR_UPDATE = RuleSet(
    name="tour.update",
    rules=(
        optional("startDate", required_date("startDate", "Invalid start date")),
        optional("endDate", required_date("endDate", "Invalid end date")),
        date_order("startDate", "endDate", _DATE_ORDER),
        optional(
            "name",
            required_string("name", "Package name must be a non-empty string"),
        ),
        optional(
            "description",
            required_string(
                "description", "Package description must be a non-empty string"
            ),
        ),
        optional("price", required_number("price", "Price must be a positive number")),
        optional(
            "duration",
            required_number("duration", "Duration must be a positive number"),
        ),
        optional(
            "destination",
            required_string("destination", "Destination must be a non-empty string"),
        ),
        optional(
            "maxPeople",
            required_number(
                "maxPeople", "Maximum number of people must be a positive number"
            ),
        ),
        optional("inclusions", string_array("inclusions", _INCLUSIONS, _INCLUSION_ITEM)),
        optional("exclusions", string_array("exclusions", _EXCLUSIONS, _EXCLUSION_ITEM)),
        optional(
            "itinerary",
            itinerary_array("itinerary", _ITINERARY, _ITINERARY_ITEM, allow_empty=True),
        ),
        optional("images", required_array("images", _IMAGES, allow_empty=True)),
    ),
)
