"""Pydantic data models shared across csvrules components.

All models are re-exported here for convenient imports:
    from csvrules.models import Table, Rule, RuleSet, ValidatorConfig
"""

from csvrules.models.config import ValidatorConfig
from csvrules.models.rules import (
    REQUIRED_COLUMN_TAG,
    Rule,
    RuleSet,
    RuleSettings,
    RuleType,
    load_rule_set,
    parse_rules,
)
from csvrules.models.table import Table

__all__ = [
    # table
    "Table",
    # rules
    "RuleType",
    "Rule",
    "RuleSettings",
    "RuleSet",
    "REQUIRED_COLUMN_TAG",
    "load_rule_set",
    "parse_rules",
    # config
    "ValidatorConfig",
]
