"""Set rules: range, must_exist_in."""

from __future__ import annotations

import operator
from typing import Any

from ..evaluator import ValidationRule
from ..rule_names import RuleName
from ..values import ValidatableValue
from .standard import ORDERED_KINDS, violates


class RangeRule(ValidationRule):
    """Inclusive on both bounds.  The argument is a ``(low, high)`` pair."""

    kinds = ORDERED_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.RANGE

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        low, high = argument
        return not (
            violates(operator.lt, value, low) or violates(operator.gt, value, high)
        )


class MustExistInRule(ValidationRule):
    """Membership under strict equality."""

    @property
    def name(self) -> RuleName:
        return RuleName.MUST_EXIST_IN

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return any(value.strictly_equals(item) for item in argument)
