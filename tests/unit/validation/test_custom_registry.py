"""Tests for custom validators and the ValidatorRegistry."""

from __future__ import annotations

import pytest

from csvrules.models.rules import RuleType
from csvrules.validation.registry import ValidatorRegistry, default_registry
from csvrules.validation.rules.custom import CustomValidator, PredicateValidator
from csvrules.validation.rules.presence import RequiredValidator


def _explode(value: str) -> bool:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def registry() -> ValidatorRegistry:
    return ValidatorRegistry()


class TestCustomValidator:
    def test_named_predicate(self) -> None:
        v = CustomValidator()
        v.register("even", lambda s: s.isdigit() and int(s) % 2 == 0)
        assert v.check("4", "even") is True
        assert v.check("5", "even") is False

    def test_callable_param(self) -> None:
        assert CustomValidator().check("abc", lambda s: s == "abc") is True

    def test_unknown_name_passes(self) -> None:
        assert CustomValidator().check("anything", "not-registered") is True

    def test_non_callable_param_passes(self) -> None:
        assert CustomValidator().check("anything", 42) is True
        assert CustomValidator().check("anything") is True

    def test_raising_predicate_fails(self) -> None:
        v = CustomValidator()
        v.register("bad", _explode)
        assert v.check("x", "bad") is False

    def test_register_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError):
            CustomValidator().register("x", "not callable")  # type: ignore[arg-type]

    def test_names(self) -> None:
        v = CustomValidator()
        v.register("b", str.isdigit)
        v.register("a", str.isalpha)
        assert v.names == ["a", "b"]


class TestPredicateValidator:
    def test_receives_param(self) -> None:
        v = PredicateValidator(rule_type="startsWith", predicate=lambda s, p: s.startswith(p))
        assert v.check("prefix-1", "prefix") is True
        assert v.check("other", "prefix") is False

    def test_raising_predicate_fails(self) -> None:
        v = PredicateValidator(rule_type="bad", predicate=lambda s, p: _explode(s))
        assert v.check("x") is False


class TestValidatorRegistry:
    def test_all_builtins_registered(self, registry: ValidatorRegistry) -> None:
        assert set(registry.tags) == {t.value for t in RuleType}
        assert len(registry) == 12

    def test_get_builtin(self, registry: ValidatorRegistry) -> None:
        assert isinstance(registry.get("required"), RequiredValidator)
        assert isinstance(registry.get(RuleType.CUSTOM), CustomValidator)

    def test_get_unknown_returns_none(self, registry: ValidatorRegistry) -> None:
        assert registry.get("isbn") is None
        assert "isbn" not in registry

    def test_register_predicate_extension(self, registry: ValidatorRegistry) -> None:
        registry.register_predicate("upper", lambda s, p: s.isupper())
        assert "upper" in registry
        assert registry.check("upper", "ABC") is True
        assert registry.check("upper", "abc") is False

    def test_register_predicate_cannot_shadow_builtin(self, registry: ValidatorRegistry) -> None:
        with pytest.raises(ValueError, match="built-in"):
            registry.register_predicate("email", lambda s, p: True)

    def test_register_predicate_rejects_empty_tag(self, registry: ValidatorRegistry) -> None:
        with pytest.raises(ValueError):
            registry.register_predicate("", lambda s, p: True)

    def test_register_replaces(self, registry: ValidatorRegistry) -> None:
        replacement = PredicateValidator(rule_type="required", predicate=lambda s, p: True)
        registry.register(replacement)
        assert registry.get("required") is replacement
        assert len(registry) == 12

    def test_register_custom(self, registry: ValidatorRegistry) -> None:
        registry.register_custom("yes", lambda s: s == "yes")
        assert registry.check("custom", "yes", "yes") is True
        assert registry.check("custom", "no", "yes") is False

    def test_register_custom_after_replacement_fails(self, registry: ValidatorRegistry) -> None:
        registry.register(PredicateValidator(rule_type="custom", predicate=lambda s, p: True))
        with pytest.raises(TypeError):
            registry.register_custom("x", str.isdigit)

    def test_check_unknown_raises(self, registry: ValidatorRegistry) -> None:
        with pytest.raises(KeyError):
            registry.check("isbn", "x")

    def test_default_registry_is_fresh(self) -> None:
        first = default_registry()
        first.register_predicate("extra", lambda s, p: True)
        assert "extra" not in default_registry()
