"""Length and numeric bound validators (minLength, maxLength, min, max).

Lower bounds fail on an empty value; upper bounds treat an empty value as
within bound. Unparseable numbers, and unparseable bounds, always fail.
"""

from __future__ import annotations

import math
import re
from typing import Any

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator

# Decimal literal with optional sign, fraction and exponent.
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_number(text: Any) -> float | None:
    """Parse a cell or rule parameter as a finite number.

    Accepts ints and floats as-is and strings holding a plain decimal
    literal (surrounding whitespace allowed). Returns None for anything
    else, including booleans, NaN and infinities.

    Examples:
        >>> parse_number(" 42 ")
        42.0
        >>> parse_number("1e3")
        1000.0
        >>> parse_number("abc") is None
        True
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, int | float):
        number = float(text)
        return number if math.isfinite(number) else None
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not _NUMBER_PATTERN.match(stripped):
        return None
    number = float(stripped)
    return number if math.isfinite(number) else None


class MinLengthValidator(FieldValidator):
    """Value must have at least ``param`` characters."""

    rule_type: str = RuleType.MIN_LENGTH
    description: str = "Field must meet a minimum length"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return False
        bound = parse_number(param)
        return bound is not None and len(value) >= bound


class MaxLengthValidator(FieldValidator):
    """Value must have at most ``param`` characters. Empty values pass."""

    rule_type: str = RuleType.MAX_LENGTH
    description: str = "Field must not exceed a maximum length"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return True
        bound = parse_number(param)
        return bound is not None and len(value) <= bound


class MinValidator(FieldValidator):
    """Value must be a number >= ``param``."""

    rule_type: str = RuleType.MIN
    description: str = "Numeric field must meet a minimum"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return False
        number = parse_number(value)
        bound = parse_number(param)
        return number is not None and bound is not None and number >= bound


class MaxValidator(FieldValidator):
    """Value must be a number <= ``param``. Empty values pass."""

    rule_type: str = RuleType.MAX
    description: str = "Numeric field must not exceed a maximum"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return True
        number = parse_number(value)
        bound = parse_number(param)
        return number is not None and bound is not None and number <= bound


def get_limit_validators() -> list[FieldValidator]:
    """Return all length and numeric bound validators."""
    return [
        MinLengthValidator(),
        MaxLengthValidator(),
        MinValidator(),
        MaxValidator(),
    ]
