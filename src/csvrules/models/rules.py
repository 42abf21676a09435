"""Declarative rule schema.

A rule set is an ordered list of rules plus optional global settings. It is
normally loaded from JSON:

    {
      "rules": [{"column": "age", "type": "min", "value": 18}],
      "settings": {"strictHeaders": true, "requiredColumns": ["name"]}
    }

Loading is all-or-nothing: a malformed schema raises RuleSchemaError before
any row is looked at.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from csvrules.errors import RuleSchemaError

# Rule tag used for table-level findings about missing header columns.
REQUIRED_COLUMN_TAG = "requiredColumn"


class RuleType(StrEnum):
    """Built-in validator tags.

    Any other string in a rule's ``type`` is an extension tag: it is looked up
    in the validator registry and reported as an unknown rule type if nothing
    is registered under it.
    """

    REQUIRED = "required"
    NOT_EMPTY = "notEmpty"
    REGEX = "regex"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    MIN = "min"
    MAX = "max"
    IN = "in"
    NOT_IN = "notIn"
    DATE_FORMAT = "dateFormat"
    EMAIL = "email"
    CUSTOM = "custom"

    @classmethod
    def from_tag(cls, tag: str) -> RuleType | None:
        """Return the built-in member for ``tag``, or None for an extension tag."""
        try:
            return cls(tag)
        except ValueError:
            return None


class Rule(BaseModel):
    """One declarative check against one column."""

    model_config = ConfigDict(frozen=True)

    # Strict so JSON true/false or 1.0 is rejected instead of coerced to an index.
    column: StrictInt | StrictStr = Field(
        ..., description="Positional index (int) or exact header name (str)"
    )
    type: str = Field(..., min_length=1, description="Validator tag")
    value: Any = Field(default=None, description="Validator parameter, type depends on tag")
    message: str | None = Field(default=None, description="Override for the default message")

    @property
    def rule_type(self) -> RuleType | None:
        """Built-in tag for this rule, or None if it names an extension."""
        return RuleType.from_tag(self.type)

    @property
    def is_positional(self) -> bool:
        """True if the column is addressed by index rather than by name."""
        return isinstance(self.column, int)


class RuleSettings(BaseModel):
    """Global settings applied to the whole rule set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strict_headers: bool = Field(
        default=False,
        alias="strictHeaders",
        description="Report rules that name a missing column instead of skipping them",
    )
    required_columns: list[str] | None = Field(
        default=None,
        alias="requiredColumns",
        description="Header names that must be present",
    )


class RuleSet(BaseModel):
    """Ordered rules plus settings. Rule order is evaluation order within a row."""

    model_config = ConfigDict(frozen=True)

    rules: list[Rule] = Field(default_factory=list, description="Rules in evaluation order")
    settings: RuleSettings = Field(default_factory=RuleSettings)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the JSON schema shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


def load_rule_set(data: Any) -> RuleSet:
    """Validate a decoded rule schema and build a RuleSet.

    Args:
        data: Decoded JSON object (a mapping with a ``rules`` list).

    Returns:
        The loaded RuleSet.

    Raises:
        RuleSchemaError: If ``rules`` is missing or not a list, or any rule
            lacks ``column`` or ``type``, or a field has the wrong type.
    """
    if not isinstance(data, Mapping):
        msg = 'Invalid rules format: missing or invalid "rules" array'
        raise RuleSchemaError(msg)

    raw_rules = data.get("rules")
    if not isinstance(raw_rules, list):
        msg = 'Invalid rules format: missing or invalid "rules" array'
        raise RuleSchemaError(msg)

    for index, raw in enumerate(raw_rules):
        if not isinstance(raw, Mapping):
            msg = f"Rule at index {index} must be an object"
            raise RuleSchemaError(msg)
        if raw.get("column") is None:
            msg = f'Rule at index {index} is missing required "column" property'
            raise RuleSchemaError(msg)
        if not raw.get("type"):
            msg = f'Rule at index {index} is missing required "type" property'
            raise RuleSchemaError(msg)

    settings = data.get("settings")
    if settings is not None and not isinstance(settings, Mapping):
        msg = 'Invalid rules format: "settings" must be an object'
        raise RuleSchemaError(msg)

    try:
        rule_set = RuleSet.model_validate(
            {"rules": raw_rules, "settings": settings or {}}
        )
    except PydanticValidationError as e:
        msg = f"Invalid rules format: {e}"
        raise RuleSchemaError(msg) from e

    logger.debug(
        "Loaded {} rules (strictHeaders={}, requiredColumns={})",
        len(rule_set.rules),
        rule_set.settings.strict_headers,
        rule_set.settings.required_columns,
    )
    return rule_set


def parse_rules(content: str) -> RuleSet:
    """Parse rule schema JSON text.

    Raises:
        RuleSchemaError: If the text is not valid JSON or the schema is malformed.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse JSON rules: {e}"
        raise RuleSchemaError(msg) from e
    return load_rule_set(data)
