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
Package rule sets.

Date checks come first so that a reversed date range is reported even when
other fields are also wrong.
"""

from tourdesk.rules.field_rules import (
    date_order,
    itinerary_array,
    optional,
    required_date,
    required_number,
    required_string,
    string_array,
)
from tourdesk.rules.pipeline import RuleSet

_NAME = "Valid package name is required"
_DESCRIPTION = "Valid package description is required"
_PRICE = "Valid package price is required"
_DURATION = "Valid package duration is required"
_DESTINATION = "Valid destination is required"
_INCLUSIONS = "At least one inclusion is required"
_INCLUSION_ITEM = "Inclusions must be a list of strings"
_EXCLUSIONS = "Exclusions must be an array"
_EXCLUSION_ITEM = "Exclusions must be a list of strings"
_ITINERARY = "At least one itinerary item is required"
_ITINERARY_ITEM = "Each itinerary item must have a description"
_MAX_PEOPLE = "Valid maximum number of people is required"
_START_DATE = "Valid start date is required"
_END_DATE = "Valid end date is required"
_DATE_ORDER = "End date must be after start date"


PACKAGE_CREATE = RuleSet(
    name="package.create",
    rules=(
        required_date("startDate", _START_DATE),
        required_date("endDate", _END_DATE),
        date_order("startDate", "endDate", _DATE_ORDER),
        required_string("name", _NAME),
        required_string("description", _DESCRIPTION),
        required_number("price", _PRICE),
        required_number("duration", _DURATION),
        required_string("destination", _DESTINATION),
        string_array("inclusions", _INCLUSIONS, _INCLUSION_ITEM, allow_empty=False),
        string_array("exclusions", _EXCLUSIONS, _EXCLUSION_ITEM),
        itinerary_array("itinerary", _ITINERARY, _ITINERARY_ITEM),
        required_number("maxPeople", _MAX_PEOPLE),
    ),
)

PACKAGE_UPDATE = RuleSet(
    name="package.update",
    rules=(
        optional("startDate", required_date("startDate", _START_DATE)),
        optional("endDate", required_date("endDate", _END_DATE)),
        date_order("startDate", "endDate", _DATE_ORDER),
        optional("name", required_string("name", _NAME)),
        optional("description", required_string("description", _DESCRIPTION)),
        optional("price", required_number("price", _PRICE)),
        optional("duration", required_number("duration", _DURATION)),
        optional("destination", required_string("destination", _DESTINATION)),
        optional(
            "inclusions",
            string_array("inclusions", _INCLUSIONS, _INCLUSION_ITEM, allow_empty=False),
        ),
        optional("exclusions", string_array("exclusions", _EXCLUSIONS, _EXCLUSION_ITEM)),
        optional("itinerary", itinerary_array("itinerary", _ITINERARY, _ITINERARY_ITEM)),
        optional("maxPeople", required_number("maxPeople", _MAX_PEOPLE)),
    ),
)
