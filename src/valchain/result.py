"""ValidationResult — the accumulated outcome for one value."""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import ValidationFailedError
from .values import ValidatableValue

logger = logging.getLogger("valchain.result")


class ValidationResult:
    """Collects failure messages for a single value.

    Messages are append-only and kept in the order rules failed.  The
    result starts valid and becomes invalid with the first message; it
    never becomes valid again.

    Usage::

        result = ValidationResult("secret")
        result.invalidate("too short")
        result.is_valid        # False
        result.error_messages  # ["too short"]
    """

    __slots__ = ("_subject", "_error_messages")

    def __init__(self, value: Any) -> None:
        self._subject = ValidatableValue.of(value)
        self._error_messages: list[str] = []

    @property
    def subject(self) -> ValidatableValue:
        """The kind-tagged value under validation."""
        return self._subject

    @property
    def original_value(self) -> Any:
        return self._subject.raw

    @property
    def error_messages(self) -> list[str]:
        """A copy of the recorded messages, oldest first."""
        return list(self._error_messages)

    @property
    def is_valid(self) -> bool:
        return len(self._error_messages) == 0

    def invalidate(self, message: str) -> None:
        """Record a failure.  Duplicate messages are kept."""
        self._error_messages.append(message)
        logger.debug(
            "Value %r invalidated (%d message(s)): %s",
            self._subject.raw,
            len(self._error_messages),
            message,
        )

    # ── Reporting ────────────────────────────────────────────────

    def raise_if_invalid(self) -> None:
        """
        Raise when any rule failed.

        Raises:
            ValidationFailedError: Carrying all recorded messages.
        """
        if not self.is_valid:
            raise ValidationFailedError(self._error_messages, self._subject.raw)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "value": self._subject.raw,
            "errors": list(self._error_messages),
        }

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return (
            f"ValidationResult(value={self._subject.raw!r}, "
            f"errors={self._error_messages!r})"
        )
