"""
Value kinds and the tagged value a validation chain runs against.

A value is classified exactly once, when it is wrapped::

    ValidatableValue.of("abc").kind            # ValueKind.TEXT
    ValidatableValue.of(Decimal("1.5")).kind   # ValueKind.NUMERIC
    ValidatableValue.of(date.today()).kind     # ValueKind.TEMPORAL
    ValidatableValue.of(None).kind             # None (absent)

``None`` has no kind.  Rules decide individually whether an absent
value concerns them.
"""

from __future__ import annotations

import datetime as dt
import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import NotCoercibleError, UnsupportedValueError


class ValueKind(str, Enum):
    """The closed set of value kinds a chain can validate."""

    TEXT = "text"
    NUMERIC = "numeric"
    TEMPORAL = "temporal"


ALL_KINDS: frozenset[ValueKind] = frozenset(ValueKind)


def kind_of(raw: Any) -> ValueKind | None:
    """
    Classify *raw*.

    Returns ``None`` for ``None``.

    Raises:
        UnsupportedValueError: For ``bool`` and any type outside the
            three kinds.
    """
    kind = _match_kind(raw)
    if kind is None and raw is not None:
        raise UnsupportedValueError(raw)
    return kind


def _match_kind(raw: Any) -> ValueKind | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        return ValueKind.TEXT
    # datetime is a subclass of date
    if isinstance(raw, dt.date):
        return ValueKind.TEMPORAL
    if isinstance(raw, (numbers.Real, Decimal)):
        return ValueKind.NUMERIC
    return None


class ValidatableValue(BaseModel):
    """
    Immutable, kind-tagged wrapper around the value under validation.

    Build instances with ``ValidatableValue.of(raw)``; the kind is derived
    from the raw value and can never disagree with it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    raw: Any = None
    kind: ValueKind | None = None

    @classmethod
    def of(cls, raw: Any) -> ValidatableValue:
        if isinstance(raw, ValidatableValue):
            return raw
        return cls(raw=raw, kind=kind_of(raw))

    @model_validator(mode="after")
    def _kind_matches_raw(self) -> ValidatableValue:
        if kind_of(self.raw) is not self.kind:
            raise ValueError(
                f"kind {self.kind!r} does not match value of type "
                f"'{type(self.raw).__name__}'"
            )
        return self

    @property
    def is_absent(self) -> bool:
        return self.raw is None

    def as_text(self, rule: str = "regex") -> str:
        """
        String form of the value, used for pattern matching.

        Integral floats drop their fractional part (``1.0`` → ``"1"``);
        dates and datetimes use ISO 8601.

        Raises:
            NotCoercibleError: If the value is absent.
        """
        if self.kind is ValueKind.TEXT:
            return str(self.raw)
        if self.kind is ValueKind.NUMERIC:
            if isinstance(self.raw, float) and self.raw.is_integer():
                return str(int(self.raw))
            return str(self.raw)
        if self.kind is ValueKind.TEMPORAL:
            return str(self.raw.isoformat())
        raise NotCoercibleError(rule)

    def strictly_equals(self, other: Any) -> bool:
        """
        Strict equality: same kind and equal, or both absent.

        ``1`` equals ``1.0`` (both numeric) but never ``"1"`` or ``True``.
        """
        if isinstance(other, ValidatableValue):
            other = other.raw
        if self.raw is None or other is None:
            return self.raw is None and other is None
        return _match_kind(other) is self.kind and bool(self.raw == other)


def comparable(raw: Any) -> Any:
    """
    Normalise an ordering operand.

    Temporal values of every form compare against each other: a plain
    date becomes midnight of that day and aware datetimes are converted
    to naive UTC.  Naive datetimes are taken as UTC.  Other values are
    returned unchanged.
    """
    if isinstance(raw, ValidatableValue):
        raw = raw.raw
    if isinstance(raw, dt.datetime):
        if raw.tzinfo is not None and raw.utcoffset() is not None:
            return raw.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return raw.replace(tzinfo=None)
    if isinstance(raw, dt.date):
        return dt.datetime.combine(raw, dt.time.min)
    return raw


def is_nan(raw: Any) -> bool:
    """True for float and Decimal NaN (quiet or signalling)."""
    if isinstance(raw, Decimal):
        return raw.is_nan()
    if isinstance(raw, float):
        return math.isnan(raw)
    return False
