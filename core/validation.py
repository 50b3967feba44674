"""Error-accumulating validation context.

Unlike pydantic's field validators, a `ValidationContext` is threaded by hand
through a fixed sequence of checks over an object graph and keeps going after
the first failure. Messages are stored in the order the checks ran and are
never sorted or deduplicated; callers and tests rely on that order.

Each ``check_*`` helper returns whether the value passed, so that dependent
checks on the same field can be skipped::

    ctx = ValidationContext()
    if ctx.check_not_null("Recipe name", name):
        ctx.check_max_length("Recipe name", name, 255)
"""

from typing import List, Optional

from core.exceptions import ValidationError


def _bound(value) -> str:
    return str(float(value))


class ValidationContext:
    """Ordered collection of human-readable field violations."""

    def __init__(self):
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        """Collected messages in insertion order (a copy)."""
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    def add_error_if_invalid(self, message: str, valid: bool) -> bool:
        """Append `message` unless `valid`; return `valid`."""
        if not valid:
            self.add_error(message)
        return valid

    def check_not_null(self, label: str, value) -> bool:
        return self.add_error_if_invalid(f"The field '{label}' cannot be null", value is not None)

    def check_min_length(self, label: str, value: Optional[str], length: int) -> bool:
        return self.add_error_if_invalid(
            f"Enter at least {length} characters in the field '{label}'",
            value is not None and len(value.strip()) >= length,
        )

    def check_max_length(self, label: str, value: Optional[str], length: int) -> bool:
        return self.add_error_if_invalid(
            f"Enter only {length} characters in the field '{label}'",
            value is not None and len(value) <= length,
        )

    def check_greater_than(self, label: str, value, bound) -> bool:
        return self.add_error_if_invalid(
            f"Enter a value that is greater than {_bound(bound)} in the field '{label}'",
            value is not None and value > bound,
        )

    def check_at_least(self, label: str, value, bound) -> bool:
        return self.add_error_if_invalid(
            f"Enter a value that is greater than or equal to {_bound(bound)} in the field '{label}'",
            value is not None and value >= bound,
        )

    def check_smaller_than(self, label: str, value, bound) -> bool:
        return self.add_error_if_invalid(
            f"Enter a value that is smaller than {_bound(bound)} in the field '{label}'",
            value is not None and value < bound,
        )

    def check_at_most(self, label: str, value, bound) -> bool:
        return self.add_error_if_invalid(
            f"Enter a value that is smaller than or equal to {_bound(bound)} in the field '{label}'",
            value is not None and value <= bound,
        )

    def raise_if_invalid(self) -> None:
        """Raise `ValidationError` carrying every collected message."""
        if self._errors:
            raise ValidationError.from_messages(self.errors)

    def __repr__(self) -> str:
        return f"ValidationContext(errors={self._errors!r})"
