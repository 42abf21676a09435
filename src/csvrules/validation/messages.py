"""Default finding messages, keyed by rule tag."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from csvrules.models.rules import RuleType

_TEMPLATES: dict[str, str] = {
    RuleType.REQUIRED: 'Column "{column}" is required',
    RuleType.NOT_EMPTY: 'Column "{column}" cannot be empty',
    RuleType.REGEX: 'Value in column "{column}" does not match pattern: {value}',
    RuleType.MIN_LENGTH: 'Value in column "{column}" must be at least {value} characters long',
    RuleType.MAX_LENGTH: 'Value in column "{column}" must be at most {value} characters long',
    RuleType.MIN: 'Value in column "{column}" must be at least {value}',
    RuleType.MAX: 'Value in column "{column}" must be at most {value}',
    RuleType.IN: 'Value in column "{column}" must be one of: {value}',
    RuleType.NOT_IN: 'Value in column "{column}" must not be one of: {value}',
    RuleType.DATE_FORMAT: 'Value in column "{column}" must be a date in format: {value}',
    RuleType.EMAIL: 'Value in column "{column}" must be a valid email address',
}

_FALLBACK = 'Validation failed for column "{column}"'


def _render_value(rule_type: str, value: Any) -> str:
    if rule_type in (RuleType.IN, RuleType.NOT_IN):
        if isinstance(value, Iterable) and not isinstance(value, str):
            return ", ".join(str(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def default_message(rule_type: str, value: Any, column: int | str) -> str:
    """Build the message for a failed rule that has no ``message`` override.

    Examples:
        >>> default_message("in", ["a", "b"], "fruit")
        'Value in column "fruit" must be one of: a, b'
        >>> default_message("somethingElse", None, "x")
        'Validation failed for column "x"'
    """
    template = _TEMPLATES.get(rule_type, _FALLBACK)
    return template.format(column=column, value=_render_value(rule_type, value))


def unknown_rule_message(rule_type: str) -> str:
    """Message for a rule whose tag has no registered validator."""
    return f"Unknown rule type: {rule_type}"


def missing_column_message(column: str) -> str:
    """Message for a rule naming a column absent from the headers."""
    return f'Column "{column}" specified in rule does not exist in CSV'


def required_column_message(column: str) -> str:
    """Message for a required column absent from the headers."""
    return f'Required column "{column}" is missing from CSV headers'
