"""Rule-based validation of tabular data.

Provides the validator registry, the validation engine that applies a
RuleSet to a Table, and the report builder and row filter that consume its
findings.
"""

from csvrules.validation.engine import ValidationEngine, validate_table
from csvrules.validation.filter import filter_valid_rows
from csvrules.validation.messages import default_message
from csvrules.validation.registry import ValidatorRegistry, default_registry
from csvrules.validation.report import ValidationReport, build_report
from csvrules.validation.rules.base import FieldValidator, ValidationFinding

__all__ = [
    "FieldValidator",
    "ValidationEngine",
    "ValidationFinding",
    "ValidationReport",
    "ValidatorRegistry",
    "build_report",
    "default_message",
    "default_registry",
    "filter_valid_rows",
    "validate_table",
]
