from .chain import ValidationChain, validate
from .evaluator import RuleRegistry, ValidationRule
from .exceptions import (
    NotCoercibleError,
    RuleNotFoundError,
    UnsupportedValueError,
    ValchainError,
    ValidationFailedError,
)
from .result import ValidationResult
from .rule_names import RuleName
from .rules import build_default_registry
from .values import ValidatableValue, ValueKind, kind_of

__all__ = [
    # Entry point
    "validate",
    "ValidationChain",
    "ValidationResult",
    # Values
    "ValidatableValue",
    "ValueKind",
    "kind_of",
    # Rules / strategy
    "RuleName",
    "ValidationRule",
    "RuleRegistry",
    "build_default_registry",
    # Exceptions
    "ValchainError",
    "UnsupportedValueError",
    "NotCoercibleError",
    "RuleNotFoundError",
    "ValidationFailedError",
]
