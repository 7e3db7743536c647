from enum import Enum


class RuleName(str, Enum):
    """Names of the built-in validation rules."""

    # Presence
    NOT_NULL = "not_null"
    NOT_EMPTY = "not_empty"

    # Text patterns
    EMAIL = "email"
    REGEX = "regex"
    MIN_LENGTH = "min_length"
    MIN_UPPERCASE = "min_uppercase"
    MIN_LOWERCASE = "min_lowercase"
    MIN_DIGIT = "min_digit"
    MIN_SYMBOL = "min_symbol"

    # Equality
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"

    # Ordering
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUALS_TO = "less_than_or_equals_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS_TO = "greater_than_or_equals_to"

    # Set
    RANGE = "range"
    MUST_EXIST_IN = "must_exist_in"
