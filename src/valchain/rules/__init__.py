"""
Built-in validation rules.

Provides concrete ValidationRule subclasses for each RuleName and a
factory function to create registries.

Usage::

    from valchain.rules import build_default_registry

    registry = build_default_registry()
    ok = registry.evaluate(RuleName.MIN_LENGTH, ValidatableValue.of("abc"), 2)
"""

from __future__ import annotations

from ..evaluator import RuleRegistry
from .null import NotEmptyRule, NotNullRule
from .set import MustExistInRule, RangeRule
from .standard import (
    EqualsRule,
    GreaterThanOrEqualsToRule,
    GreaterThanRule,
    LessThanOrEqualsToRule,
    LessThanRule,
    NotEqualsRule,
)
from .string import (
    EmailRule,
    MinDigitRule,
    MinLengthRule,
    MinLowercaseRule,
    MinSymbolRule,
    MinUppercaseRule,
    RegexRule,
)


def build_default_registry() -> RuleRegistry:
    """
    Create a registry with all built-in rules.

    Each call returns a fresh registry, so replacing a rule in one
    registry never affects chains built with another.
    """
    registry = RuleRegistry()
    registry.register_all(
        # Presence
        NotNullRule(),
        NotEmptyRule(),
        # Text
        EmailRule(),
        RegexRule(),
        MinLengthRule(),
        MinUppercaseRule(),
        MinLowercaseRule(),
        MinDigitRule(),
        MinSymbolRule(),
        # Equality / ordering
        EqualsRule(),
        NotEqualsRule(),
        LessThanRule(),
        LessThanOrEqualsToRule(),
        GreaterThanRule(),
        GreaterThanOrEqualsToRule(),
        # Set
        RangeRule(),
        MustExistInRule(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "RuleRegistry",
    "EmailRule",
    "EqualsRule",
    "GreaterThanOrEqualsToRule",
    "GreaterThanRule",
    "LessThanOrEqualsToRule",
    "LessThanRule",
    "MinDigitRule",
    "MinLengthRule",
    "MinLowercaseRule",
    "MinSymbolRule",
    "MinUppercaseRule",
    "MustExistInRule",
    "NotEmptyRule",
    "NotEqualsRule",
    "NotNullRule",
    "RangeRule",
    "RegexRule",
]
