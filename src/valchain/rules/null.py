"""Presence rules: not_null, not_empty.

Numeric values are always present, so both rules skip them.
"""

from __future__ import annotations

from typing import Any

from ..evaluator import ValidationRule
from ..rule_names import RuleName
from ..values import ValidatableValue, ValueKind

PRESENCE_KINDS = frozenset({ValueKind.TEXT, ValueKind.TEMPORAL})


class NotNullRule(ValidationRule):
    kinds = PRESENCE_KINDS

    @property
    def name(self) -> RuleName:
        return RuleName.NOT_NULL

    def passes(self, value: ValidatableValue, _argument: Any) -> bool:
        return not value.is_absent


class NotEmptyRule(ValidationRule):
    """Fails for an absent value and for the empty string."""

    kinds = PRESENCE_KINDS

    @property
    def name(self) -> RuleName:
        return RuleName.NOT_EMPTY

    def passes(self, value: ValidatableValue, _argument: Any) -> bool:
        if value.is_absent:
            return False
        return not (value.kind is ValueKind.TEXT and len(value.raw) == 0)
