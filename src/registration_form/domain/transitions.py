"""Field state machine: pristine -> touched. Pure reducer-style transitions over FormState."""

from __future__ import annotations

import logging

from registration_form.config.models import FieldConfig, FormConfig
from registration_form.domain.rules import FieldName
from registration_form.domain.state import FieldState, FormState
from registration_form.domain.validity import validate_value

logger = logging.getLogger(__name__)


def _validated(field_state: FieldState, values: dict[str, str]) -> FieldState:
    """Copy of field_state with error recomputed from the current form values."""
    ok, message = validate_value(field_state.field_name, values)
    logger.debug("Validated %s: %s", field_state.field_name, "valid" if ok else message)
    return field_state.model_copy(update={"error": None if ok else message})


def _lookup(state: FormState, config: FormConfig, field_name: str) -> tuple[FieldState, FieldConfig]:
    return state.field(field_name), config.field(field_name)


def on_change(state: FormState, config: FormConfig, field_name: str, text: str) -> FormState:
    """
    Store the new raw value. Re-validate only when the field is already touched
    and configured to validate on change; a pristine field never shows an error.
    """
    field_state, field_cfg = _lookup(state, config, field_name)
    if field_cfg.disabled:
        return state

    fields = dict(state.fields)
    updated = field_state.model_copy(update={"value": text})
    fields[field_name] = updated
    values = {name: fs.value for name, fs in fields.items()}

    if updated.touched and field_cfg.validate_on_change:
        fields[field_name] = _validated(updated, values)

    # The confirm rule reads the password at evaluation time, so a fresh check is enough
    confirm = FieldName.CONFIRM_PASSWORD.value
    if (
        field_name == FieldName.PASSWORD.value
        and config.revalidate_dependents
        and confirm in fields
        and fields[confirm].touched
        and config.field(confirm).validate_on_change
    ):
        fields[confirm] = _validated(fields[confirm], values)

    return FormState(fields=fields)


def on_blur(state: FormState, config: FormConfig, field_name: str) -> FormState:
    """Mark touched (idempotent), drop focus and always validate the current value."""
    field_state, field_cfg = _lookup(state, config, field_name)
    if field_cfg.disabled:
        return state

    if field_state.is_pristine:
        logger.debug("Field %s touched", field_name)
    blurred = field_state.model_copy(update={"touched": True, "focused": False})
    fields = dict(state.fields)
    fields[field_name] = _validated(blurred, state.values)
    return FormState(fields=fields)


def on_focus(state: FormState, config: FormConfig, field_name: str) -> FormState:
    """Presentational only: touched and error are left alone."""
    field_state, field_cfg = _lookup(state, config, field_name)
    if field_cfg.disabled:
        return state
    fields = dict(state.fields)
    fields[field_name] = field_state.model_copy(update={"focused": True})
    return FormState(fields=fields)


def toggle_password_visibility(state: FormState, config: FormConfig, field_name: str) -> FormState:
    """Reveal or mask a secure field's text. No effect on other fields or validation."""
    field_state, field_cfg = _lookup(state, config, field_name)
    if not field_cfg.secure:
        return state
    fields = dict(state.fields)
    fields[field_name] = field_state.model_copy(update={"show_password": not field_state.show_password})
    return FormState(fields=fields)


def touch_all(state: FormState, config: FormConfig) -> FormState:
    """Blur every enabled field, e.g. after a submit attempt, so all errors become visible."""
    for name in config.field_names:
        state = on_blur(state, config, name)
    return state
