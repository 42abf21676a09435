"""Built-in field validators.

Validators are organized by concern:
- presence: required, notEmpty
- limits: minLength, maxLength, min, max
- terminology: in, notIn
- format: regex, dateFormat, email
- custom: host-registered predicates
"""

from csvrules.validation.rules.base import FieldValidator, ValidationFinding

__all__ = [
    "FieldValidator",
    "ValidationFinding",
]
