"""Validation error raised by parse_field."""

from __future__ import annotations


class FieldValidationError(ValueError):
    """A value failed its field rule. Always local to one field and recoverable."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name
        self.message = message
