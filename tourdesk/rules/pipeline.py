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
Rule set runner.

Runs the rules of one RuleSet over a private copy of the payload, in the
order they were declared, and stops at the first failure. This is the single
entry point called by the HTTP routes and by library users.

The caller's payload is never modified: rules normalize the working copy,
which is returned on success and discarded on failure.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from loguru import logger

from tourdesk.rules.field_rules import Rule
from tourdesk.validation_errors import ValidationResult, validation_error


@dataclass(frozen=True)
class RuleSet:
    """
    Ordered rules for one operation on one domain object.

    Attributes:
        name: Dotted identifier used in logs, e.g. "package.create"
        rules: Rules in evaluation order
    """

    name: str
    rules: Tuple[Rule, ...]


def validate(payload: Any, rule_set: RuleSet) -> ValidationResult:
    """
    Validate and normalize a payload against a rule set.

    Args:
        payload: Deserialized request body
        rule_set: Rules to apply

    Returns:
        ValidationResult with the normalized copy, or with the first error
    """
    if not isinstance(payload, Mapping):
        error = validation_error("Request body must be a JSON object")
        logger.info("[Validation] {} rejected: {}", rule_set.name, error.message)
        return ValidationResult.failure(error)

    working: Dict[str, Any] = copy.deepcopy(dict(payload))

    for rule in rule_set.rules:
        error = rule(working)
        if error is not None:
            logger.info(
                "[Validation] {} rejected (field={}): {}",
                rule_set.name,
                error.field,
                error.message,
            )
            return ValidationResult.failure(error)

    logger.debug(
        "[Validation] {} accepted payload with {} field(s)",
        rule_set.name,
        len(working),
    )
    return ValidationResult.success(working)
