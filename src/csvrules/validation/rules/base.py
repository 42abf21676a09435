"""Base models for field validators and validation findings.

Defines the core abstractions: ValidationFinding, the record of one failed
check, and FieldValidator, the single-method predicate every rule tag is
implemented by. Concrete validators subclass FieldValidator and implement
check().
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationFinding(BaseModel):
    """One problem found while validating a table.

    ``row_number`` is the 1-based line in the source file (header line
    included), or 0 for table-level findings such as a missing required
    column.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    row_number: int = Field(..., ge=0, alias="rowNumber", description="Source line, 0 for table-level")
    column: int | str = Field(..., description="Column display name, or index if unnamed")
    value: str = Field(default="", description="Observed field content")
    rule: str = Field(..., description="Rule tag that produced the finding")
    message: str = Field(..., description="Human-readable finding message")

    @property
    def is_table_level(self) -> bool:
        """True if the finding is not attributable to a data row."""
        return self.row_number == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)


class FieldValidator(BaseModel):
    """Abstract base class for all field validators.

    A validator is a pure predicate over one cell value and the rule's
    parameter. Subclasses must never raise from check(): malformed input or
    parameters are reported as a failed check.
    """

    model_config = ConfigDict(frozen=True)

    rule_type: str = Field(..., description="Tag this validator is registered under")
    description: str = Field(default="", description="Human-readable description")

    @abstractmethod
    def check(self, value: str, param: Any = None) -> bool:
        """Return True if ``value`` satisfies the rule.

        Args:
            value: Cell content ("" for a missing field).
            param: The rule's ``value`` parameter.
        """
        ...
