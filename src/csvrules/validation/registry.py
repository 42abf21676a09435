"""Validator registry.

Maps rule tags to FieldValidator instances. The built-in validators are
registered at construction; host programs add extension tags with
register() or register_predicate(), and named predicates for the ``custom``
tag with register_custom().
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator
from csvrules.validation.rules.custom import (
    CellPredicate,
    CustomValidator,
    ParamPredicate,
    PredicateValidator,
)
from csvrules.validation.rules.format import get_format_validators
from csvrules.validation.rules.limits import get_limit_validators
from csvrules.validation.rules.presence import get_presence_validators
from csvrules.validation.rules.terminology import get_terminology_validators


class ValidatorRegistry:
    """Lookup table from rule tag to validator."""

    def __init__(self) -> None:
        self._validators: dict[str, FieldValidator] = {}
        self.register_defaults()

    @property
    def tags(self) -> list[str]:
        """Return all registered tags in registration order."""
        return list(self._validators)

    def __contains__(self, tag: object) -> bool:
        return tag in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def get(self, tag: str) -> FieldValidator | None:
        """Return the validator for ``tag``, or None if nothing is registered."""
        return self._validators.get(tag)

    def register(self, validator: FieldValidator) -> None:
        """Register a validator under its rule_type, replacing any existing one.

        Args:
            validator: A FieldValidator instance.
        """
        tag = str(validator.rule_type)
        if tag in self._validators:
            logger.debug("Replacing validator for tag: {}", tag)
        self._validators[tag] = validator
        logger.debug("Registered validator: {}", tag)

    def register_defaults(self) -> None:
        """Register every built-in validator."""
        for validator in get_presence_validators():
            self.register(validator)
        for validator in get_limit_validators():
            self.register(validator)
        for validator in get_terminology_validators():
            self.register(validator)
        for validator in get_format_validators():
            self.register(validator)
        self.register(CustomValidator())

    def register_predicate(
        self, tag: str, predicate: ParamPredicate, *, description: str = ""
    ) -> None:
        """Register a plain ``(value, param) -> bool`` callable as an extension tag.

        Raises:
            ValueError: If ``tag`` is empty or names a built-in rule type.
        """
        if not tag:
            msg = "Extension tag must be a non-empty string"
            raise ValueError(msg)
        if RuleType.from_tag(tag) is not None:
            msg = f"Cannot override built-in rule type with a predicate: {tag}"
            raise ValueError(msg)
        self.register(
            PredicateValidator(rule_type=tag, description=description, predicate=predicate)
        )

    def register_custom(self, name: str, predicate: CellPredicate) -> None:
        """Register a named predicate for ``{"type": "custom", "value": name}`` rules."""
        custom = self._validators.get(RuleType.CUSTOM)
        if not isinstance(custom, CustomValidator):
            msg = "The custom validator has been replaced and cannot take named predicates"
            raise TypeError(msg)
        custom.register(name, predicate)

    def check(self, tag: str, value: str, param: Any = None) -> bool:
        """Run the validator for ``tag`` directly.

        Raises:
            KeyError: If no validator is registered for ``tag``.
        """
        validator = self._validators.get(tag)
        if validator is None:
            msg = f"Unknown rule type: {tag}"
            raise KeyError(msg)
        return validator.check(value, param)


def default_registry() -> ValidatorRegistry:
    """Return a fresh registry with only the built-in validators."""
    return ValidatorRegistry()
