"""Form and field state models. One FormState aggregate keyed by field name."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FieldState(BaseModel):
    """State for one input: raw value, touched/focused flags, last validation error."""

    field_name: str
    value: str = ""
    touched: bool = Field(default=False, description="Set on first blur, never reverts")
    focused: bool = False
    error: str | None = Field(default=None, description="Only displayed once touched")
    show_password: bool = Field(default=False, description="Secure fields: reveal typed text")

    @property
    def is_pristine(self) -> bool:
        return not self.touched

    @property
    def visible_error(self) -> str | None:
        """Error as the user sees it: suppressed while pristine."""
        return self.error if self.touched else None


class FormState(BaseModel):
    """All field states for one mounted form."""

    fields: dict[str, FieldState] = Field(default_factory=dict)

    @property
    def values(self) -> dict[str, str]:
        """field_name -> raw value."""
        return {name: fs.value for name, fs in self.fields.items()}

    def field(self, field_name: str) -> FieldState:
        """Return the state for field_name; KeyError if the form has no such field."""
        try:
            return self.fields[field_name]
        except KeyError:
            raise KeyError(f"Unknown field: {field_name}") from None

    @classmethod
    def initial(cls, field_names: list[str]) -> FormState:
        """Every field empty and pristine."""
        return cls(fields={name: FieldState(field_name=name) for name in field_names})
