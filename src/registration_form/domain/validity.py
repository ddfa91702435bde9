"""Whole-form validity and submit outcome. Pure functions over raw values, no I/O."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from registration_form.domain.rules import FieldName, Result, normalize_value, validate_field

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "✅ Registro exitoso"
FAILURE_TITLE = "❌ Error en el formulario"
FAILURE_MESSAGE = "Por favor completa todos los campos correctamente"


class SubmitResult(BaseModel):
    """What the screen should show after a submit attempt. The core performs no side effect."""

    success: bool
    title: str
    message: str
    data: dict[str, str] = Field(default_factory=dict, description="Normalized values on success")
    errors: dict[str, str] = Field(default_factory=dict, description="field_name -> first error")


def validate_value(field_name: str, values: dict[str, str]) -> Result:
    """Run the rule for one field against the current raw values of the whole form."""
    return validate_field(
        field_name,
        values.get(field_name, ""),
        password=values.get(FieldName.PASSWORD.value, ""),
    )


def evaluate_form(values: dict[str, str], field_names: list[str]) -> dict[str, Result]:
    """field_name -> (is_valid, error_message) for every field, from raw values only."""
    return {name: validate_value(name, values) for name in field_names}


def is_form_valid(values: dict[str, str], field_names: list[str]) -> bool:
    """
    AND over every field's rule. Ignores touched/error state, so an untouched
    field still blocks submission.
    """
    return all(ok for ok, _ in evaluate_form(values, field_names).values())


def build_submit_result(values: dict[str, str], field_names: list[str]) -> SubmitResult:
    """Re-validate everything and describe the outcome."""
    outcome = evaluate_form(values, field_names)
    errors = {name: msg for name, (ok, msg) in outcome.items() if not ok}
    if errors:
        logger.info("Submit rejected: %d invalid field(s): %s", len(errors), ", ".join(errors))
        return SubmitResult(
            success=False,
            title=FAILURE_TITLE,
            message=FAILURE_MESSAGE,
            errors=errors,
        )

    data = {name: normalize_value(name, values.get(name, "")) for name in field_names}
    lines = [f"Bienvenido {data.get(FieldName.FULL_NAME.value, '')}!", ""]
    if FieldName.EMAIL.value in data:
        lines.append(f"Email: {data[FieldName.EMAIL.value]}")
    if FieldName.PHONE.value in data:
        lines.append(f"Teléfono: {data[FieldName.PHONE.value]}")
    logger.info("Submit accepted for %d field(s)", len(data))
    return SubmitResult(
        success=True,
        title=SUCCESS_TITLE,
        message="\n".join(lines),
        data=data,
    )
