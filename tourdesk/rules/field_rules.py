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
Field rule factories.

Every factory returns a Rule: a callable that receives the pipeline's working
copy of the payload and returns None when the field passes, or a
ValidationError describing the violation. Passing rules may rewrite their own
field in the working copy (trimmed strings, trimmed array elements, canonical
enumeration values). Rules never raise for bad input.

Rule kinds:
  - required_string / required_identifier - text fields
  - bounded_string - text fields with length limits
  - required_uuid - UUID identifiers
  - required_number - numeric fields with a lower bound
  - required_date / date_order - ISO-8601 dates and start < end ordering
  - required_array / string_array / itinerary_array - list fields
  - enumerated - membership in a fixed set of values
  - required_when - rule applied only when another field has a given value
  - optional / optional_text - variants skipped when the field is absent
"""

import math
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from tourdesk.validation_errors import ValidationError, validation_error

Rule = Callable[[Dict[str, Any]], Optional[ValidationError]]


def is_number(value: Any) -> bool:
    """
    Check for an int or a finite float. Booleans are not numbers here.

    Ints are never converted to float: JSON integers of any length parse to
    ints, and those too large for a float are still valid numbers.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime string.

    Accepts the forms of datetime.fromisoformat (Python 3.11+) plus a
    trailing "Z". Date-only values and values without an offset are taken as
    UTC so that any two parsed values can be compared.

    Args:
        value: Raw field value

    Returns:
        Timezone-aware datetime, or None if the value is not a parseable string
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def required_string(field: str, message: str) -> Rule:
    """Present, a string, non-blank after trimming. Rewritten trimmed."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            return validation_error(message, field)
        payload[field] = value.strip()
        return None

    return rule


def required_identifier(field: str, message: str) -> Rule:
    """Present and a non-empty string. Identifiers are passed through as-is."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            return validation_error(message, field)
        return None

    return rule


def bounded_string(
    field: str,
    message: str,
    length_message: str,
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> Rule:
    """
    Required string whose trimmed length lies within bounds.

    Blank or non-string values fail with message; a trimmed length outside
    [min_length, max_length] fails with length_message. Rewritten trimmed.
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            return validation_error(message, field)
        text = value.strip()
        if len(text) < min_length or (max_length is not None and len(text) > max_length):
            return validation_error(length_message, field)
        payload[field] = text
        return None

    return rule


def required_uuid(field: str, message: str, invalid_message: str) -> Rule:
    """
    Present and a UUID in its canonical hyphenated form (any case).

    Not rewritten, like other identifiers.
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            return validation_error(message, field)
        try:
            parsed = uuid.UUID(value)
        except ValueError:
            return validation_error(invalid_message, field)
        if str(parsed) != value.lower():
            return validation_error(invalid_message, field)
        return None

    return rule


def required_number(
    field: str,
    message: str,
    minimum: float = 0,
    inclusive: bool = False,
) -> Rule:
    """
    Present and a finite number above a lower bound.

    Args:
        field: Payload key
        message: Failure message
        minimum: Lower bound (default 0)
        inclusive: Whether the bound itself is accepted; people counts use
            minimum=1, inclusive=True
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not is_number(value):
            return validation_error(message, field)
        if value < minimum or (value == minimum and not inclusive):
            return validation_error(message, field)
        return None

    return rule


def required_date(field: str, message: str) -> Rule:
    """Present and parseable as an ISO-8601 date or datetime."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        if parse_date(payload.get(field)) is None:
            return validation_error(message, field)
        return None

    return rule


def date_order(start_field: str, end_field: str, message: str) -> Rule:
    """
    Start strictly before end.

    Only checked when both fields are present. Unparseable values are left
    to required_date, which must run before this rule.
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        if start_field not in payload or end_field not in payload:
            return None
        start = parse_date(payload[start_field])
        end = parse_date(payload[end_field])
        if start is None or end is None:
            return None
        if start >= end:
            return validation_error(message, end_field)
        return None

    return rule


def required_array(field: str, message: str, allow_empty: bool = False) -> Rule:
    """A list, non-empty unless allow_empty."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, list) or (not value and not allow_empty):
            return validation_error(message, field)
        return None

    return rule


def string_array(
    field: str,
    message: str,
    item_message: str,
    allow_empty: bool = True,
) -> Rule:
    """A list of strings. Each element is rewritten trimmed."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, list) or (not value and not allow_empty):
            return validation_error(message, field)
        trimmed: List[str] = []
        for item in value:
            if not isinstance(item, str):
                return validation_error(item_message, field)
            trimmed.append(item.strip())
        payload[field] = trimmed
        return None

    return rule


def itinerary_array(
    field: str,
    message: str,
    item_message: str,
    allow_empty: bool = False,
) -> Rule:
    """
    A list of itinerary entries.

    Each entry must be an object with a string description. The description
    is trimmed, all other keys of the entry are kept unchanged.
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not isinstance(value, list) or (not value and not allow_empty):
            return validation_error(message, field)
        entries: List[Dict[str, Any]] = []
        for item in value:
            if not isinstance(item, Mapping) or not isinstance(item.get("description"), str):
                return validation_error(item_message, field)
            entry = dict(item)
            entry["description"] = entry["description"].strip()
            entries.append(entry)
        payload[field] = entries
        return None

    return rule


def enumerated(
    field: str,
    allowed: Iterable[str],
    message: str,
    skip_empty: bool = False,
) -> Rule:
    """
    Member of a fixed set of values.

    Matching ignores case; the value is rewritten to its canonical spelling
    from the allowed set. With skip_empty, falsy values (absent, null, empty
    string) pass untouched.
    """
    canonical = {value.casefold(): value for value in allowed}

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if skip_empty and not value:
            return None
        if not isinstance(value, str) or value.casefold() not in canonical:
            return validation_error(message, field)
        payload[field] = canonical[value.casefold()]
        return None

    return rule


def required_when(other_field: str, expected: Any, inner: Rule) -> Rule:
    """Apply inner only when payload[other_field] == expected."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        if payload.get(other_field) != expected:
            return None
        return inner(payload)

    return rule


def optional(field: str, inner: Rule) -> Rule:
    """Skip inner entirely when the field is absent from the payload."""

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        if field not in payload:
            return None
        return inner(payload)

    return rule


def optional_text(
    field: str,
    message: str,
    allow_blank: bool = True,
    trim: bool = True,
) -> Rule:
    """
    Free text that may be omitted.

    Falsy values (absent, null, empty string) are skipped. Anything else must
    be a string, non-blank unless allow_blank.
    """

    def rule(payload: Dict[str, Any]) -> Optional[ValidationError]:
        value = payload.get(field)
        if not value:
            return None
        if not isinstance(value, str):
            return validation_error(message, field)
        if not allow_blank and not value.strip():
            return validation_error(message, field)
        if trim:
            payload[field] = value.strip()
        return None

    return rule
