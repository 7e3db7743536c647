"""
Fluent validation chain.

Example::

    chain = (
        validate("Secr3t!")
        .not_empty("Password is required")
        .min_length(8, "At least 8 characters")
        .min_digit(1, "At least one digit")
    )
    chain.is_valid        # False
    chain.error_messages  # ["At least 8 characters"]

Every rule records its message when it fails and returns the same
chain, so later rules always run.  A rule that does not concern the
value's kind (``email`` on a number, ``range`` on text...) is skipped
without a message.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .result import ValidationResult
from .rule_names import RuleName
from .rules import build_default_registry

if TYPE_CHECKING:
    import re

    from .evaluator import RuleRegistry
    from .values import ValidatableValue

logger = logging.getLogger("valchain.chain")

# Shared by every chain built without an explicit registry; never mutated.
DEFAULT_REGISTRY = build_default_registry()


class ValidationChain:
    """
    Rule vocabulary over one owned ``ValidationResult``.

    The chain creates its result and never shares it; all rules mutate
    that result in place.
    """

    def __init__(
        self,
        value: Any,
        registry: RuleRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._result = ValidationResult(value)

    # -- accessors -----------------------------------------------------------

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def subject(self) -> ValidatableValue:
        return self._result.subject

    @property
    def original_value(self) -> Any:
        return self._result.original_value

    @property
    def error_messages(self) -> list[str]:
        return self._result.error_messages

    @property
    def is_valid(self) -> bool:
        return self._result.is_valid

    # -- presence ------------------------------------------------------------

    def not_null(self, message: str) -> ValidationChain:
        """Fail for ``None``.  Numbers, including zero, always pass."""
        return self._apply(RuleName.NOT_NULL, None, message)

    def not_empty(self, message: str) -> ValidationChain:
        """Fail for ``None`` and the empty string.  Numbers always pass."""
        return self._apply(RuleName.NOT_EMPTY, None, message)

    # -- text ----------------------------------------------------------------

    def email(self, message: str) -> ValidationChain:
        """
        Fail unless the text contains ``word@word.letter``.

        This is a heuristic, not address-grammar validation.
        """
        return self._apply(RuleName.EMAIL, None, message)

    def regex(self, pattern: str | re.Pattern[str], message: str) -> ValidationChain:
        """
        Fail unless *pattern* is found in the string form of the value.

        Applies to every kind.

        Raises:
            NotCoercibleError: If the value is ``None``.  Nothing is
                recorded in that case.
        """
        return self._apply(RuleName.REGEX, pattern, message)

    def min_length(self, length: int, message: str) -> ValidationChain:
        return self._apply(RuleName.MIN_LENGTH, length, message)

    def min_uppercase(self, count: int, message: str) -> ValidationChain:
        return self._apply(RuleName.MIN_UPPERCASE, count, message)

    def min_lowercase(self, count: int, message: str) -> ValidationChain:
        return self._apply(RuleName.MIN_LOWERCASE, count, message)

    def min_digit(self, count: int, message: str) -> ValidationChain:
        return self._apply(RuleName.MIN_DIGIT, count, message)

    def min_symbol(self, count: int, message: str) -> ValidationChain:
        """Count characters that are neither word characters nor whitespace."""
        return self._apply(RuleName.MIN_SYMBOL, count, message)

    # -- equality ------------------------------------------------------------

    def equals(self, other: Any, message: str) -> ValidationChain:
        """Fail unless the value strictly equals *other* (same kind and equal)."""
        return self._apply(RuleName.EQUALS, other, message)

    def not_equals(self, other: Any, message: str) -> ValidationChain:
        return self._apply(RuleName.NOT_EQUALS, other, message)

    # -- ordering (numeric and temporal) -------------------------------------

    def range(self, minimum: Any, maximum: Any, message: str) -> ValidationChain:
        """Fail outside ``[minimum, maximum]``; both bounds are inclusive."""
        return self._apply(RuleName.RANGE, (minimum, maximum), message)

    def less_than(self, comparison: Any, message: str) -> ValidationChain:
        return self._apply(RuleName.LESS_THAN, comparison, message)

    def less_than_or_equals_to(self, comparison: Any, message: str) -> ValidationChain:
        return self._apply(RuleName.LESS_THAN_OR_EQUALS_TO, comparison, message)

    def greater_than(self, comparison: Any, message: str) -> ValidationChain:
        return self._apply(RuleName.GREATER_THAN, comparison, message)

    def greater_than_or_equals_to(
        self, comparison: Any, message: str
    ) -> ValidationChain:
        return self._apply(RuleName.GREATER_THAN_OR_EQUALS_TO, comparison, message)

    # -- membership ----------------------------------------------------------

    def must_exist_in(self, items: Iterable[Any], message: str) -> ValidationChain:
        """Fail unless some item strictly equals the value."""
        return self._apply(RuleName.MUST_EXIST_IN, items, message)

    # -- internals -----------------------------------------------------------

    def _apply(self, name: RuleName, argument: Any, message: str) -> ValidationChain:
        rule = self._registry.require(name)
        subject = self._result.subject
        if not rule.applies_to(subject):
            logger.debug(
                "Skipping %s for %s value", name.value, _kind_label(subject)
            )
            return self
        if not rule.passes(subject, argument):
            self._result.invalidate(message)
        return self

    def __repr__(self) -> str:
        return (
            f"ValidationChain(value={self.original_value!r}, "
            f"is_valid={self.is_valid})"
        )


def _kind_label(value: ValidatableValue) -> str:
    return value.kind.value if value.kind is not None else "absent"


def validate(value: Any, *, registry: RuleRegistry | None = None) -> ValidationChain:
    """
    Start a validation chain for *value*.

    Each call returns a new chain with its own result.

    Raises:
        UnsupportedValueError: If *value* is not text, a real number, a
            date/datetime or ``None``.
    """
    return ValidationChain(value, registry=registry)
