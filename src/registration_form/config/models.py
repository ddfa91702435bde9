"""Pydantic models for form configuration. Central contract for IDE and validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from registration_form.domain.rules import FieldName


# --- Field configuration ---


class FieldConfig(BaseModel):
    """Configuration for a single input field."""

    name: FieldName = Field(..., description="Which rule applies (e.g. email, age)")
    label: str | None = Field(default=None, description="Display label")
    placeholder: str = ""
    helper_text: str | None = Field(default=None, description="Shown until the field is touched")
    validate_on_change: bool = Field(
        default=False,
        description="Re-validate on every change once touched; otherwise only on blur",
    )
    show_success_state: bool = Field(default=True, description="Show valid state after blur")
    disabled: bool = False
    # Password-style input: masked with a visibility toggle
    secure: bool = False

    @property
    def display_label(self) -> str:
        return self.label or self.name.value.replace("_", " ").capitalize()


# --- Top-level form config ---


class FormConfig(BaseModel):
    """Full form configuration loaded from YAML."""

    title: str = Field(default="Crear cuenta")
    subtitle: str = Field(default="Completa el formulario para registrarte")
    submit_label: str = Field(default="Registrarse")
    fields: list[FieldConfig] = Field(..., min_length=1, description="Fields in display order")
    revalidate_dependents: bool = Field(
        default=True,
        description="Re-check a touched confirm_password whenever password changes",
    )

    @model_validator(mode="after")
    def _check_fields(self) -> FormConfig:
        names = [f.name.value for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate fields: {', '.join(duplicates)}")
        if FieldName.CONFIRM_PASSWORD.value in names and FieldName.PASSWORD.value not in names:
            raise ValueError("confirm_password requires a password field")
        return self

    @property
    def field_names(self) -> list[str]:
        return [f.name.value for f in self.fields]

    def field(self, field_name: str) -> FieldConfig:
        for f in self.fields:
            if f.name.value == field_name:
                return f
        raise KeyError(f"Unknown field: {field_name}")
