"""Tests for the built-in validation rules."""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal

import pytest

from valchain import NotCoercibleError, RuleName, ValidatableValue
from valchain.rules.null import NotEmptyRule, NotNullRule
from valchain.rules.set import MustExistInRule, RangeRule
from valchain.rules.standard import (
    EqualsRule,
    GreaterThanOrEqualsToRule,
    GreaterThanRule,
    LessThanOrEqualsToRule,
    LessThanRule,
    NotEqualsRule,
)
from valchain.rules.string import (
    EmailRule,
    MinDigitRule,
    MinLengthRule,
    MinLowercaseRule,
    MinSymbolRule,
    MinUppercaseRule,
    RegexRule,
)


def v(raw):
    return ValidatableValue.of(raw)


TEXT = v("text")
NUMBER = v(5)
DATE = v(dt.date(2024, 6, 1))
ABSENT = v(None)


# ══════════════════════════════════════════════════════════════════════
# Applicability
# ══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("rule", "applies"),
    [
        (NotNullRule(), (True, False, True, True)),
        (NotEmptyRule(), (True, False, True, True)),
        (EmailRule(), (True, False, False, False)),
        (RegexRule(), (True, True, True, True)),
        (EqualsRule(), (True, True, True, True)),
        (NotEqualsRule(), (True, True, True, True)),
        (MinLengthRule(), (True, False, False, False)),
        (MinUppercaseRule(), (True, False, False, False)),
        (MinLowercaseRule(), (True, False, False, False)),
        (MinDigitRule(), (True, False, False, False)),
        (MinSymbolRule(), (True, False, False, False)),
        (RangeRule(), (False, True, True, False)),
        (LessThanRule(), (False, True, True, False)),
        (LessThanOrEqualsToRule(), (False, True, True, False)),
        (GreaterThanRule(), (False, True, True, False)),
        (GreaterThanOrEqualsToRule(), (False, True, True, False)),
        (MustExistInRule(), (True, True, True, True)),
    ],
    ids=lambda x: x.name.value if hasattr(x, "name") else None,
)
def test_applicability(rule, applies):
    """(text, numeric, temporal, absent)"""
    got = tuple(rule.applies_to(val) for val in (TEXT, NUMBER, DATE, ABSENT))
    assert got == applies


# ══════════════════════════════════════════════════════════════════════
# Presence
# ══════════════════════════════════════════════════════════════════════


class TestPresenceRules:
    def test_not_null(self) -> None:
        rule = NotNullRule()
        assert rule.name is RuleName.NOT_NULL
        assert rule.passes(v("x"), None) is True
        assert rule.passes(v(""), None) is True
        assert rule.passes(DATE, None) is True
        assert rule.passes(ABSENT, None) is False

    def test_not_empty(self) -> None:
        rule = NotEmptyRule()
        assert rule.passes(v("x"), None) is True
        assert rule.passes(v(" "), None) is True
        assert rule.passes(v(""), None) is False
        assert rule.passes(DATE, None) is True
        assert rule.passes(ABSENT, None) is False


# ══════════════════════════════════════════════════════════════════════
# Text
# ══════════════════════════════════════════════════════════════════════


class TestEmailRule:
    @pytest.mark.parametrize(
        "address",
        ["abc@def.gh", "john_doe@example.com", "x@y.z", "contact: a@b.c please"],
    )
    def test_matches(self, address: str) -> None:
        assert EmailRule().passes(v(address), None) is True

    @pytest.mark.parametrize(
        "address",
        ["not-an-email", "a@b", "@b.c", "a@.c", "a@b.1", "", "josé@é.fr"],
    )
    def test_rejects(self, address: str) -> None:
        assert EmailRule().passes(v(address), None) is False

    def test_is_a_heuristic(self) -> None:
        # Only word@word.letter is looked for; the rest is not checked.
        assert EmailRule().passes(v("a@b.c d e f"), None) is True


class TestRegexRule:
    def test_searches_anywhere(self) -> None:
        rule = RegexRule()
        assert rule.passes(v("xxabcxx"), "abc") is True
        assert rule.passes(v("abc"), "^b") is False

    def test_accepts_compiled_pattern(self) -> None:
        assert RegexRule().passes(v("ABC"), re.compile("abc", re.I)) is True

    def test_numeric_string_form(self) -> None:
        rule = RegexRule()
        assert rule.passes(v(123), r"^\d+$") is True
        assert rule.passes(v(2.0), r"^2$") is True
        assert rule.passes(v(2.5), r"^\d+$") is False

    def test_temporal_string_form(self) -> None:
        assert RegexRule().passes(DATE, r"^2024-06-01$") is True

    def test_absent_raises(self) -> None:
        with pytest.raises(NotCoercibleError):
            RegexRule().passes(ABSENT, "^a")


class TestCountRules:
    def test_min_length(self) -> None:
        rule = MinLengthRule()
        assert rule.passes(v("abcd"), 4) is True
        assert rule.passes(v("abc"), 4) is False
        assert rule.passes(v(""), 0) is True

    def test_min_uppercase(self) -> None:
        rule = MinUppercaseRule()
        assert rule.passes(v("AbC"), 2) is True
        assert rule.passes(v("Abc"), 2) is False
        assert rule.passes(v("ÀÉ"), 1) is False

    def test_min_lowercase(self) -> None:
        rule = MinLowercaseRule()
        assert rule.passes(v("aBc"), 2) is True
        assert rule.passes(v("ABc"), 2) is False

    def test_min_digit(self) -> None:
        rule = MinDigitRule()
        assert rule.passes(v("a1b2"), 2) is True
        assert rule.passes(v("a1b"), 2) is False

    def test_min_symbol(self) -> None:
        rule = MinSymbolRule()
        assert rule.passes(v("a!b?"), 2) is True
        # whitespace and underscores are not symbols
        assert rule.passes(v("a b_c"), 1) is False
        assert rule.passes(v("é"), 1) is True

    def test_zero_count_always_passes(self) -> None:
        for rule in (MinUppercaseRule(), MinLowercaseRule(), MinDigitRule()):
            assert rule.passes(v("!!!"), 0) is True


# ══════════════════════════════════════════════════════════════════════
# Equality / ordering
# ══════════════════════════════════════════════════════════════════════


class TestEqualityRules:
    def test_equals(self) -> None:
        rule = EqualsRule()
        assert rule.passes(v(42), 42) is True
        assert rule.passes(v(42), "42") is False
        assert rule.passes(ABSENT, None) is True

    def test_not_equals(self) -> None:
        rule = NotEqualsRule()
        assert rule.passes(v("a"), "b") is True
        assert rule.passes(v("a"), "a") is False
        assert rule.passes(v(1), True) is True


class TestOrderingRules:
    def test_less_than(self) -> None:
        rule = LessThanRule()
        assert rule.passes(v(4), 5) is True
        assert rule.passes(v(5), 5) is False
        assert rule.passes(v(6), 5) is False

    def test_less_than_or_equals_to(self) -> None:
        rule = LessThanOrEqualsToRule()
        assert rule.passes(v(5), 5) is True
        assert rule.passes(v(6), 5) is False

    def test_greater_than(self) -> None:
        rule = GreaterThanRule()
        assert rule.passes(v(6), 5) is True
        assert rule.passes(v(5), 5) is False

    def test_greater_than_or_equals_to(self) -> None:
        rule = GreaterThanOrEqualsToRule()
        assert rule.passes(v(5), 5) is True
        assert rule.passes(v(4), 5) is False

    def test_temporal(self) -> None:
        later = dt.date(2024, 12, 31)
        assert LessThanRule().passes(DATE, later) is True
        assert GreaterThanRule().passes(DATE, later) is False

    def test_nan_never_fails(self) -> None:
        nan = v(float("nan"))
        for rule in (
            LessThanRule(),
            LessThanOrEqualsToRule(),
            GreaterThanRule(),
            GreaterThanOrEqualsToRule(),
        ):
            assert rule.passes(nan, 0) is True

    def test_decimal_nan_never_fails(self) -> None:
        nan = v(Decimal("NaN"))
        for rule in (
            LessThanRule(),
            LessThanOrEqualsToRule(),
            GreaterThanRule(),
            GreaterThanOrEqualsToRule(),
        ):
            assert rule.passes(nan, 1) is True
            assert rule.passes(v(Decimal("1")), Decimal("NaN")) is True
        assert RangeRule().passes(nan, (0, 10)) is True

    def test_datetime_against_date_bound(self) -> None:
        noon = v(dt.datetime(2024, 1, 31, 12))
        assert LessThanRule().passes(noon, dt.date(2024, 1, 31)) is False
        assert GreaterThanRule().passes(noon, dt.date(2024, 1, 31)) is True

    def test_aware_against_naive_bound(self) -> None:
        aware = v(dt.datetime(2024, 1, 15, tzinfo=dt.timezone.utc))
        assert LessThanRule().passes(aware, dt.datetime(2025, 1, 1)) is True
        assert GreaterThanRule().passes(aware, dt.datetime(2025, 1, 1)) is False

    def test_wrapped_bound(self) -> None:
        assert LessThanRule().passes(v(1), v(2)) is True

    def test_incompatible_bound_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            LessThanRule().passes(DATE, 5)


# ══════════════════════════════════════════════════════════════════════
# Set
# ══════════════════════════════════════════════════════════════════════


class TestSetRules:
    def test_range_is_inclusive(self) -> None:
        rule = RangeRule()
        assert rule.passes(v(1), (1, 5)) is True
        assert rule.passes(v(5), (1, 5)) is True
        assert rule.passes(v(0), (1, 5)) is False
        assert rule.passes(v(10), (1, 5)) is False

    def test_range_temporal(self) -> None:
        bounds = (dt.date(2024, 1, 1), dt.date(2024, 12, 31))
        assert RangeRule().passes(DATE, bounds) is True
        assert RangeRule().passes(v(dt.date(2025, 1, 1)), bounds) is False

    def test_range_mixed_temporal_forms(self) -> None:
        bounds = (dt.date(2024, 1, 1), dt.date(2024, 1, 31))
        assert RangeRule().passes(v(dt.datetime(2024, 1, 15, 12)), bounds) is True
        # the upper date bound is midnight, so later that day is outside
        assert RangeRule().passes(v(dt.datetime(2024, 1, 31, 12)), bounds) is False

    def test_must_exist_in(self) -> None:
        rule = MustExistInRule()
        assert rule.passes(v("b"), ["a", "b"]) is True
        assert rule.passes(v("c"), ["a", "b"]) is False
        assert rule.passes(v(1), ["1", True]) is False
        assert rule.passes(v(1), [1.0]) is True
        assert rule.passes(ABSENT, [None]) is True
        assert rule.passes(v("a"), []) is False

    def test_must_exist_in_accepts_any_iterable(self) -> None:
        assert MustExistInRule().passes(v(3), range(5)) is True
        assert MustExistInRule().passes(v("x"), ("x",)) is True
