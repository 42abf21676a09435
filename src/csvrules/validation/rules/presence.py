"""Presence validators: required and notEmpty."""

from __future__ import annotations

from typing import Any

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator


class RequiredValidator(FieldValidator):
    """Value must be present and not the empty string.

    Whitespace-only values pass; use notEmpty to reject those.
    """

    rule_type: str = RuleType.REQUIRED
    description: str = "Field must be present and non-empty"

    def check(self, value: str, param: Any = None) -> bool:
        return value is not None and value != ""


class NotEmptyValidator(FieldValidator):
    """Value must contain something other than whitespace."""

    rule_type: str = RuleType.NOT_EMPTY
    description: str = "Field must not be blank"

    def check(self, value: str, param: Any = None) -> bool:
        return value is not None and value.strip() != ""


def get_presence_validators() -> list[FieldValidator]:
    """Return all presence validators."""
    return [RequiredValidator(), NotEmptyValidator()]
