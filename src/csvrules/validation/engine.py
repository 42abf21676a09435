"""Validation engine orchestrator.

Runs a RuleSet against a Table and returns findings in discovery order:
table-level required-column findings first, then per-row findings with rows
in file order and rules in declared order within each row. That order is
what fail-fast mode uses to decide which finding is "first".
"""

from __future__ import annotations

from loguru import logger

from csvrules.errors import HeaderConfigError
from csvrules.models.config import ValidatorConfig
from csvrules.models.rules import REQUIRED_COLUMN_TAG, Rule, RuleSet
from csvrules.models.table import Table
from csvrules.validation.messages import (
    default_message,
    missing_column_message,
    required_column_message,
    unknown_rule_message,
)
from csvrules.validation.registry import ValidatorRegistry
from csvrules.validation.rules.base import ValidationFinding


class ValidationEngine:
    """Evaluates rule sets against tables using a validator registry.

    The engine holds no per-run state, so one instance can validate any
    number of tables, from several threads if the inputs are not mutated.
    """

    def __init__(self, registry: ValidatorRegistry | None = None) -> None:
        """Initialize the validation engine.

        Args:
            registry: Validators to look rule tags up in. Defaults to a
                registry holding only the built-in validators.
        """
        self._registry = registry if registry is not None else ValidatorRegistry()

    @property
    def registry(self) -> ValidatorRegistry:
        """Return the validator registry used by this engine."""
        return self._registry

    def validate(
        self,
        table: Table,
        rule_set: RuleSet,
        config: ValidatorConfig | None = None,
    ) -> list[ValidationFinding]:
        """Validate every row of ``table`` against ``rule_set``.

        Args:
            table: Parsed table to check.
            rule_set: Rules and settings to apply.
            config: Row numbering and fail-fast options. Defaults to a header
                row present and fail-fast off.

        Returns:
            Findings in discovery order. Empty if the table is valid.

        Raises:
            HeaderConfigError: If strict header validation is requested but
                the table has no headers.
        """
        config = config or ValidatorConfig()
        settings = rule_set.settings

        if settings.strict_headers and not table.headers:
            msg = "CSV is missing headers, but rules require strict header validation"
            raise HeaderConfigError(msg)

        logger.info(
            "Validating {} rows against {} rules (failFast={})",
            table.row_count,
            len(rule_set.rules),
            config.fail_fast,
        )

        findings: list[ValidationFinding] = []

        if settings.required_columns and table.headers:
            findings.extend(self._check_required_columns(table, settings.required_columns))
            if findings and config.fail_fast:
                logger.debug("Stopping early: {} required columns missing", len(findings))
                return findings

        row_offset = 2 if config.has_header else 1
        for row_index in range(len(table.rows)):
            row_number = row_index + row_offset
            for rule in rule_set.rules:
                finding = self._evaluate(table, row_index, row_number, rule, settings.strict_headers)
                if finding is None:
                    continue
                findings.append(finding)
                if config.fail_fast:
                    logger.debug("Stopping early at row {} ({})", row_number, finding.rule)
                    return findings

        logger.info("Validation finished with {} findings", len(findings))
        return findings

    @staticmethod
    def _check_required_columns(
        table: Table, required_columns: list[str]
    ) -> list[ValidationFinding]:
        """Return one table-level finding per required column missing from the headers."""
        return [
            ValidationFinding(
                row_number=0,
                column=name,
                value="",
                rule=REQUIRED_COLUMN_TAG,
                message=required_column_message(name),
            )
            for name in required_columns
            if name not in table.headers
        ]

    def _evaluate(
        self,
        table: Table,
        row_index: int,
        row_number: int,
        rule: Rule,
        strict_headers: bool,
    ) -> ValidationFinding | None:
        """Apply one rule to one row. Returns the finding, or None if it passed or was skipped."""
        if isinstance(rule.column, int):
            column_index = rule.column
            column_name: int | str = table.column_label(column_index)
        else:
            column_name = rule.column
            resolved = table.header_index(column_name)
            if resolved is None:
                if not strict_headers:
                    return None
                return ValidationFinding(
                    row_number=row_number,
                    column=column_name,
                    value="",
                    rule=rule.type,
                    message=missing_column_message(column_name),
                )
            column_index = resolved

        cell_value = table.cell(row_index, column_index)

        validator = self._registry.get(rule.type)
        if validator is None:
            return ValidationFinding(
                row_number=row_number,
                column=column_name,
                value=cell_value,
                rule=rule.type,
                message=unknown_rule_message(rule.type),
            )

        try:
            passed = validator.check(cell_value, rule.value)
        except Exception as exc:
            logger.error("Validator {} failed on row {}: {}", rule.type, row_number, exc)
            passed = False

        if passed:
            return None
        return ValidationFinding(
            row_number=row_number,
            column=column_name,
            value=cell_value,
            rule=rule.type,
            message=rule.message or default_message(rule.type, rule.value, column_name),
        )


def validate_table(
    table: Table,
    rule_set: RuleSet,
    config: ValidatorConfig | None = None,
    *,
    registry: ValidatorRegistry | None = None,
) -> list[ValidationFinding]:
    """Validate ``table`` with a one-off engine. See ValidationEngine.validate."""
    return ValidationEngine(registry).validate(table, rule_set, config)
