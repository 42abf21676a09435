"""Tests for presence, length and numeric bound validators."""

from __future__ import annotations

import pytest

from csvrules.models.rules import RuleType
from csvrules.validation.rules.limits import (
    MaxLengthValidator,
    MaxValidator,
    MinLengthValidator,
    MinValidator,
    get_limit_validators,
    parse_number,
)
from csvrules.validation.rules.presence import (
    NotEmptyValidator,
    RequiredValidator,
    get_presence_validators,
)


class TestRequiredValidator:
    def test_present(self) -> None:
        assert RequiredValidator().check("x") is True

    def test_empty(self) -> None:
        assert RequiredValidator().check("") is False

    def test_none(self) -> None:
        assert RequiredValidator().check(None) is False  # type: ignore[arg-type]

    def test_whitespace_counts_as_present(self) -> None:
        assert RequiredValidator().check("   ") is True


class TestNotEmptyValidator:
    def test_text(self) -> None:
        assert NotEmptyValidator().check(" a ") is True

    def test_whitespace_only(self) -> None:
        assert NotEmptyValidator().check(" \t ") is False

    def test_empty(self) -> None:
        assert NotEmptyValidator().check("") is False


class TestParseNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42.0), (" -3.5 ", -3.5), ("1e3", 1000.0), (".5", 0.5), ("+7", 7.0), (18, 18.0)],
    )
    def test_valid(self, text: object, expected: float) -> None:
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "1_000", "nan", "inf", "12abc", None, True])
    def test_invalid(self, text: object) -> None:
        assert parse_number(text) is None


class TestLengthValidators:
    def test_min_length_pass(self) -> None:
        assert MinLengthValidator().check("John", 3) is True

    def test_min_length_exact(self) -> None:
        assert MinLengthValidator().check("Jon", 3) is True

    def test_min_length_fail(self) -> None:
        assert MinLengthValidator().check("Jo", 3) is False

    def test_min_length_empty_fails(self) -> None:
        assert MinLengthValidator().check("", 0) is False

    def test_max_length_pass(self) -> None:
        assert MaxLengthValidator().check("abc", 3) is True

    def test_max_length_fail(self) -> None:
        assert MaxLengthValidator().check("abcd", 3) is False

    def test_max_length_empty_passes(self) -> None:
        assert MaxLengthValidator().check("", 0) is True

    def test_bad_bound_fails(self) -> None:
        assert MinLengthValidator().check("abc", "three") is False
        assert MaxLengthValidator().check("abc", None) is False

    def test_string_bound_accepted(self) -> None:
        assert MinLengthValidator().check("abc", "2") is True


class TestNumericValidators:
    def test_min_pass(self) -> None:
        assert MinValidator().check("30", 18) is True

    def test_min_equal(self) -> None:
        assert MinValidator().check("18", 18) is True

    def test_min_fail(self) -> None:
        assert MinValidator().check("17.9", 18) is False

    def test_min_empty_fails(self) -> None:
        assert MinValidator().check("", 0) is False

    def test_min_non_numeric_fails(self) -> None:
        assert MinValidator().check("abc", 0) is False

    def test_max_pass(self) -> None:
        assert MaxValidator().check("99", 100) is True

    def test_max_fail(self) -> None:
        assert MaxValidator().check("101", 100) is False

    def test_max_empty_passes(self) -> None:
        assert MaxValidator().check("", 100) is True

    def test_max_non_numeric_fails(self) -> None:
        assert MaxValidator().check("abc", 100) is False

    def test_negative_and_float_bounds(self) -> None:
        assert MinValidator().check("-1", -1.5) is True
        assert MaxValidator().check("2.5", 2.4) is False

    def test_missing_bound_fails(self) -> None:
        assert MinValidator().check("5") is False


class TestGetters:
    def test_presence_tags(self) -> None:
        tags = {v.rule_type for v in get_presence_validators()}
        assert tags == {RuleType.REQUIRED, RuleType.NOT_EMPTY}

    def test_limit_tags(self) -> None:
        tags = {v.rule_type for v in get_limit_validators()}
        assert tags == {RuleType.MIN_LENGTH, RuleType.MAX_LENGTH, RuleType.MIN, RuleType.MAX}
