"""Pattern, date and email format validators.

Date formats can be written either in token notation (``YYYY-MM-DD``,
``DD/MM/YYYY``, ``YYYY-MM-DD HH:mm:ss``, or the date-fns spelling
``yyyy-MM-dd``) or as a ``strptime`` pattern
containing ``%`` directives. With no format, the value must be an ISO 8601
date or datetime. In every case the parsed value must be a real calendar
date: ``2023-02-30`` is rejected even though it matches ``YYYY-MM-DD``.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator

# Minimal local@domain.tld shape: no whitespace, one @, a dot after the @.
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Longest tokens first so YYYY is not read as two YY tokens. Lowercase year
# and day tokens are the date-fns spelling (yyyy-MM-dd).
_DATE_TOKEN_PATTERN = re.compile(r"YYYY|yyyy|YY|yy|MMM|MM|M|DD|dd|D|d|HH|H|mm|ss")

_DATE_TOKENS: dict[str, str] = {
    "YYYY": "%Y",
    "yyyy": "%Y",
    "YY": "%y",
    "yy": "%y",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "DD": "%d",
    "dd": "%d",
    "D": "%d",
    "d": "%d",
    "HH": "%H",
    "H": "%H",
    "mm": "%M",
    "ss": "%S",
}


def to_strptime_format(fmt: str) -> str:
    """Translate a token date format into a ``strptime`` pattern.

    Formats that already contain ``%`` are returned unchanged.

    Examples:
        >>> to_strptime_format("YYYY-MM-DD")
        '%Y-%m-%d'
        >>> to_strptime_format("DD/MM/YY HH:mm")
        '%d/%m/%y %H:%M'
    """
    if "%" in fmt:
        return fmt
    return _DATE_TOKEN_PATTERN.sub(lambda m: _DATE_TOKENS[m.group(0)], fmt)


def parse_date(value: str, fmt: str | None = None) -> datetime | date | None:
    """Parse ``value`` as a calendar date, returning None if it is not one.

    Args:
        value: Text to parse.
        fmt: Token or strptime format. None or "" means ISO 8601.
    """
    if not value:
        return None
    if not fmt:
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    try:
        return datetime.strptime(value, to_strptime_format(fmt))
    except ValueError:
        return None


class RegexValidator(FieldValidator):
    """Value must contain a match for the pattern. Empty values fail."""

    rule_type: str = RuleType.REGEX
    description: str = "Field must match a regular expression"

    def check(self, value: str, param: Any = None) -> bool:
        if not value or not isinstance(param, str):
            return False
        try:
            return re.search(param, value) is not None
        except re.error:
            return False


class DateFormatValidator(FieldValidator):
    """Value must be a real calendar date in the given format."""

    rule_type: str = RuleType.DATE_FORMAT
    description: str = "Field must be a valid date"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return False
        if param is not None and not isinstance(param, str):
            return False
        return parse_date(value, param) is not None


class EmailValidator(FieldValidator):
    """Value must look like local@domain.tld."""

    rule_type: str = RuleType.EMAIL
    description: str = "Field must be an email address"

    def check(self, value: str, param: Any = None) -> bool:
        if not value:
            return False
        return _EMAIL_PATTERN.fullmatch(value) is not None


def get_format_validators() -> list[FieldValidator]:
    """Return all pattern, date and email validators."""
    return [RegexValidator(), DateFormatValidator(), EmailValidator()]
