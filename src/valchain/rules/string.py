"""Text rules: email, regex, min_length and character-class counts."""

from __future__ import annotations

import re
from typing import Any

from ..evaluator import ValidationRule
from ..rule_names import RuleName
from ..values import ValidatableValue, ValueKind

# Heuristic only: word@word.letter somewhere in the text.
EMAIL_PATTERN = re.compile(r"(\w+)@(\w+)\.[a-zA-Z]", re.ASCII)
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SYMBOL_PATTERN = re.compile(r"[^\w\s]", re.ASCII)

TEXT_KINDS = frozenset({ValueKind.TEXT})


class EmailRule(ValidationRule):
    kinds = TEXT_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.EMAIL

    def passes(self, value: ValidatableValue, _argument: Any) -> bool:
        return EMAIL_PATTERN.search(value.raw) is not None


class RegexRule(ValidationRule):
    """
    Search the string form of any value for a pattern.

    An absent value has no string form: ``as_text()`` raises
    ``NotCoercibleError`` and the error reaches the caller unrecorded.
    """

    @property
    def name(self) -> RuleName:
        return RuleName.REGEX

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        text = value.as_text(rule=self.name.value)
        return re.search(argument, text) is not None


class MinLengthRule(ValidationRule):
    kinds = TEXT_KINDS
    accepts_absent = False

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_LENGTH

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return len(value.raw) >= argument


class _MinCountRule(ValidationRule):
    """Require at least *argument* matches of ``pattern``."""

    kinds = TEXT_KINDS
    accepts_absent = False
    pattern: re.Pattern[str]

    def passes(self, value: ValidatableValue, argument: Any) -> bool:
        return len(self.pattern.findall(value.raw)) >= argument


class MinUppercaseRule(_MinCountRule):
    pattern = UPPERCASE_PATTERN

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_UPPERCASE


class MinLowercaseRule(_MinCountRule):
    pattern = LOWERCASE_PATTERN

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_LOWERCASE


class MinDigitRule(_MinCountRule):
    pattern = DIGIT_PATTERN

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_DIGIT


class MinSymbolRule(_MinCountRule):
    """Symbols are characters that are neither word characters nor whitespace."""

    pattern = SYMBOL_PATTERN

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_SYMBOL
