"""Equality and ordering rules: equals, not_equals, <, <=, >, >=."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from ..evaluator import ValidationRule
from ..rule_names import RuleName
from ..values import ValidatableValue, ValueKind, comparable, is_nan

ORDERED_KINDS = frozenset({ValueKind.NUMERIC, ValueKind.TEMPORAL})


class EqualsRule(ValidationRule):
    @property
    def name(self) -> RuleName:
        return RuleName.EQUALS

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return value.strictly_equals(argument)


class NotEqualsRule(ValidationRule):
    @property
    def name(self) -> RuleName:
        return RuleName.NOT_EQUALS

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return not value.strictly_equals(argument)


# Ordering rules state the failing comparison and negate it.  A NaN on
# either side makes every comparison false, so it never fails.


def violates(
    compare: Callable[[Any, Any], Any], value: ValidatableValue, bound: Any
) -> bool:
    """Apply *compare* to normalised operands; NaN never violates."""
    left, right = comparable(value.raw), comparable(bound)
    if is_nan(left) or is_nan(right):
        return False
    return bool(compare(left, right))


class LessThanRule(ValidationRule):
    kinds = ORDERED_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.LESS_THAN

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return not violates(operator.ge, value, argument)


class LessThanOrEqualsToRule(ValidationRule):
    kinds = ORDERED_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.LESS_THAN_OR_EQUALS_TO

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return not violates(operator.gt, value, argument)


class GreaterThanRule(ValidationRule):
    kinds = ORDERED_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.GREATER_THAN

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return not violates(operator.le, value, argument)


class GreaterThanOrEqualsToRule(ValidationRule):
    kinds = ORDERED_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.GREATER_THAN_OR_EQUALS_TO

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return not violates(operator.lt, value, argument)
