"""Allowed-value validators: in and notIn.

The rule parameter is a list of permitted (or forbidden) strings. Non-string
list items are compared by their string form, so ``[1, 2]`` matches the cell
``"1"``. A parameter that is not a list, tuple or set fails the check.
"""

from __future__ import annotations

from typing import Any

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator


def _as_terms(param: Any) -> set[str] | None:
    if not isinstance(param, list | tuple | set | frozenset):
        return None
    return {item if isinstance(item, str) else str(item) for item in param}


class InValidator(FieldValidator):
    """Value must be one of the listed terms. Empty values fail."""

    rule_type: str = RuleType.IN
    description: str = "Field must be one of the allowed values"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return False
        terms = _as_terms(param)
        return terms is not None and value in terms


class NotInValidator(FieldValidator):
    """Value must not be one of the listed terms. Empty values pass."""

    rule_type: str = RuleType.NOT_IN
    description: str = "Field must not be one of the forbidden values"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return True
        terms = _as_terms(param)
        return terms is not None and value not in terms


def get_terminology_validators() -> list[FieldValidator]:
    """Return the allowed-value validators."""
    return [InValidator(), NotInValidator()]
