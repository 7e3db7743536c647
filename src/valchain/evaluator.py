"""
Rule evaluation strategy.

Provides the ValidationRule interface and a registry that maps rule
names to rule instances.  ``ValidationChain`` looks every rule up here,
so a custom registry can replace the behaviour behind a rule name.

New rules are added by subclassing ValidationRule and registering via
``register()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from .exceptions import RuleNotFoundError
from .values import ALL_KINDS

if TYPE_CHECKING:
    from .rule_names import RuleName
    from .values import ValidatableValue, ValueKind

logger = logging.getLogger("valchain.registry")


class ValidationRule(ABC):
    """
    Strategy interface for a single validation rule.

    ``kinds`` and ``accepts_absent`` describe which values the rule
    concerns.  For every other value the rule is skipped without a
    message.
    """

    kinds: ClassVar[frozenset[ValueKind]] = ALL_KINDS
    accepts_absent: ClassVar[bool] = True

    @property
    @abstractmethod
    def name(self) -> RuleName:
        """The rule name this strategy handles."""
        ...

    def applies_to(self, value: ValidatableValue) -> bool:
        if value.kind is None:
            return self.accepts_absent
        return value.kind in self.kinds

    @abstractmethod
    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        """
        Check the rule against a value it applies to.

        Args:
            value: The tagged value under validation.
            argument: The rule parameter (bound, pattern, count, items...).

        Returns:
            True if the value satisfies the rule.
        """
        ...


def _key(name: RuleName | str) -> str:
    return str(getattr(name, "value", name))


class RuleRegistry:
    """
    Registry of ValidationRule instances keyed by rule name.

    Usage::

        registry = RuleRegistry()
        registry.register(MinLengthRule())

        ok = registry.evaluate(RuleName.MIN_LENGTH, ValidatableValue.of("abc"), 2)
    """

    def __init__(self) -> None:
        self._rules: dict[str, ValidationRule] = {}

    # -- registration --------------------------------------------------------

    def register(self, rule: ValidationRule) -> None:
        """Register a rule instance, replacing any rule of the same name."""
        key = _key(rule.name)
        if key in self._rules:
            logger.debug(
                "Replacing rule %s: %s -> %s",
                key,
                type(self._rules[key]).__name__,
                type(rule).__name__,
            )
        self._rules[key] = rule

    def register_all(self, *rules: ValidationRule) -> None:
        """Register multiple rule instances at once."""
        for rule in rules:
            self.register(rule)

    def unregister(self, name: RuleName | str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(_key(name), None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: RuleName | str) -> ValidationRule | None:
        """Return the registered rule or ``None``."""
        return self._rules.get(_key(name))

    def require(self, name: RuleName | str) -> ValidationRule:
        """
        Return the registered rule.

        Raises:
            RuleNotFoundError: If no rule is registered under *name*.
        """
        rule = self.get(name)
        if rule is None:
            raise RuleNotFoundError(_key(name), list(self._rules))
        return rule

    def has(self, name: RuleName | str) -> bool:
        return _key(name) in self._rules

    @property
    def supported_rules(self) -> set[str]:
        return set(self._rules.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: RuleName | str,
        value: ValidatableValue,
        argument: Any = None,
    ) -> bool:
        """
        Look up the rule and evaluate it.

        A rule that does not apply to the value's kind counts as passed.

        Raises:
            RuleNotFoundError: If the rule is not registered.
        """
        rule = self.require(name)
        if not rule.applies_to(value):
            return True
        return rule.passes(value, argument)
