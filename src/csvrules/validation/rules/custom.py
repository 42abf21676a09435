"""Host-registered validators.

Rule schemas are plain JSON and cannot carry code, so custom checks are
registered by the host program before validating and the schema refers to
them by name. Two styles are supported:

- ``{"type": "custom", "value": "isbn"}`` runs the predicate registered as
  ``"isbn"`` via ``ValidatorRegistry.register_custom``.
- ``{"type": "isbn"}`` runs a PredicateValidator registered under the
  extension tag ``"isbn"`` via ``ValidatorRegistry.register_predicate``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger
from pydantic import ConfigDict, Field, PrivateAttr

from csvrules.models.rules import RuleType
from csvrules.validation.rules.base import FieldValidator

CellPredicate = Callable[[str], bool]
ParamPredicate = Callable[[str, Any], bool]


class CustomValidator(FieldValidator):
    """Dispatch ``custom`` rules to named host predicates.

    The rule parameter is either the name of a registered predicate or, when
    rules are built in code rather than loaded from JSON, a callable taking
    the cell value. An unknown name or a non-callable parameter passes, as
    there is nothing to check against. A predicate that raises fails.
    """

    rule_type: str = RuleType.CUSTOM
    description: str = "Field must satisfy a host-registered predicate"

    _predicates: dict[str, CellPredicate] = PrivateAttr(default_factory=dict)

    @property
    def names(self) -> list[str]:
        """Names of all registered predicates."""
        return sorted(self._predicates)

    def register(self, name: str, predicate: CellPredicate) -> None:
        """Register (or replace) a named predicate."""
        if not callable(predicate):
            msg = f"Custom predicate {name!r} is not callable"
            raise TypeError(msg)
        self._predicates[name] = predicate
        logger.debug("Registered custom predicate: {}", name)

    def check(self, value: str, param: Any = None) -> bool:
        if isinstance(param, str):
            predicate = self._predicates.get(param)
        elif callable(param):
            predicate = param
        else:
            predicate = None
        if predicate is None:
            return True
        try:
            return bool(predicate(value))
        except Exception as exc:
            logger.warning("Custom predicate {!r} raised on {!r}: {}", param, value, exc)
            return False


class PredicateValidator(FieldValidator):
    """Wrap a ``(value, param) -> bool`` callable as an extension-tag validator."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    predicate: ParamPredicate = Field(..., description="Callable taking (value, param)")

    def check(self, value: str, param: Any = None) -> bool:
        try:
            return bool(self.predicate(value, param))
        except Exception as exc:
            logger.warning("Validator {} raised on {!r}: {}", self.rule_type, value, exc)
            return False
