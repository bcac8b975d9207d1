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
Validation error and result types.

Rules never raise for ordinary failures. They return a ValidationError value,
and the pipeline wraps the outcome of a whole rule set in a ValidationResult.

Architecture:
- ValidationError: Structured description of the first violated constraint
- ValidationResult: Either a normalized payload or a ValidationError
- validation_error(): Builds a ValidationError with the configured status

Example:
    >>> result = ValidationResult.failure(validation_error("Valid destination is required"))
    >>> result.ok
    False
    >>> result.error.status
    400
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tourdesk.config import VALIDATION_ERROR_STATUS


@dataclass(frozen=True)
class ValidationError:
    """
    Structured information about a rejected payload.

    Attributes:
        status: HTTP status code to answer with (always 400 for field rules)
        message: Human-readable message surfaced to the client
        field: Name of the offending field, if the failure is tied to one
    """

    status: int
    message: str
    field: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a JSON-serializable dict."""
        return {"status": self.status, "message": self.message, "field": self.field}


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of running one rule set over one payload.

    Exactly one of payload/error is set.

    Attributes:
        payload: Normalized copy of the input payload (on success)
        error: First violated constraint (on failure)
    """

    payload: Optional[Dict[str, Any]] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Dict[str, Any]) -> "ValidationResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: ValidationError) -> "ValidationResult":
        return cls(error=error)


def validation_error(message: str, field: Optional[str] = None) -> ValidationError:
    """
    Build a ValidationError with the configured validation status.

    Args:
        message: Message surfaced to the client
        field: Offending field name (optional)

    Returns:
        ValidationError with status VALIDATION_ERROR_STATUS
    """
    return ValidationError(status=VALIDATION_ERROR_STATUS, message=message, field=field)
