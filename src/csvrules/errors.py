"""Fatal error types.

These exceptions mean validation could not even be attempted. Problems found
while validating are never raised; they are collected as ValidationFinding
values instead.
"""

from __future__ import annotations


class CsvRulesError(Exception):
    """Base class for all fatal csvrules errors."""


class RuleSchemaError(CsvRulesError, ValueError):
    """Raised when a rule schema is malformed and cannot be loaded."""


class HeaderConfigError(CsvRulesError, ValueError):
    """Raised when strict header validation is requested on a headerless table."""


class TableReadError(CsvRulesError):
    """Raised when tabular input cannot be parsed into a Table."""
