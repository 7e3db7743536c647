"""
Valchain exception hierarchy.

All exceptions inherit from ``ValchainError`` and provide ``to_dict()``
for API-friendly error responses.  Soft rule failures are never raised;
they are recorded on the ``ValidationResult`` instead.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ValchainError(Exception):
    """Base exception for all valchain errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnsupportedValueError(ValchainError, TypeError):
    """The value is neither text, numeric, temporal nor ``None``."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.value_type = type(value).__name__
        super().__init__(
            f"Cannot validate value of type '{self.value_type}': "
            f"expected str, a real number, date/datetime or None"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_VALUE",
            "type": self.value_type,
        }


class NotCoercibleError(ValchainError, TypeError):
    """
    The value has no string representation.

    Raised by the ``regex`` rule for an absent value.  This is a hard
    failure: it propagates to the caller instead of being recorded as a
    validation message.
    """

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Rule '{rule}' cannot convert an absent value to a string")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "NOT_COERCIBLE",
            "rule": self.rule,
        }


class RuleNotFoundError(ValchainError, LookupError):
    """
    Unknown rule requested from a registry.

    Provides fuzzy-matched suggestions for likely intended rules.
    """

    def __init__(self, rule: str, valid_rules: list[str]) -> None:
        self.rule = rule
        self.valid_rules = valid_rules
        self.suggestions = get_close_matches(rule, valid_rules, n=3, cutoff=0.6)

        message = f"Unknown rule: '{rule}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if valid_rules:
            message += f" Registered rules: {', '.join(sorted(valid_rules)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_NOT_FOUND",
            "rule": self.rule,
            "suggestions": self.suggestions,
            "valid_rules": sorted(self.valid_rules),
        }


class ValidationFailedError(ValchainError, ValueError):
    """
    Raised by ``ValidationResult.raise_if_invalid()``.

    Carries the recorded messages in the order the rules failed.
    """

    def __init__(self, messages: list[str], value: Any = None) -> None:
        self.messages = list(messages)
        self.value = value
        super().__init__("; ".join(self.messages) or "Validation failed")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "messages": list(self.messages),
        }
