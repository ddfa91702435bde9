"""Derived display state for the rendering layer: category enum and field view model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from registration_form.config.models import FieldConfig
from registration_form.domain.state import FieldState

SUCCESS_TEXT = "Campo válido"


class DisplayCategory(str, Enum):
    """Border/status category, in precedence order."""

    DISABLED = "disabled"
    INVALID = "invalid"
    VALID = "valid"
    FOCUSED = "focused"
    DEFAULT = "default"


def shows_valid(field_state: FieldState) -> bool:
    """Touched, no error and something typed."""
    return field_state.touched and not field_state.error and len(field_state.value) > 0


def display_category(field_state: FieldState, field_cfg: FieldConfig) -> DisplayCategory:
    """
    disabled > invalid > valid > focused > default. Pure function, testable
    without any rendering environment.
    """
    if field_cfg.disabled:
        return DisplayCategory.DISABLED
    if field_state.error and field_state.touched:
        return DisplayCategory.INVALID
    if shows_valid(field_state) and field_cfg.show_success_state:
        return DisplayCategory.VALID
    if field_state.focused:
        return DisplayCategory.FOCUSED
    return DisplayCategory.DEFAULT


class FieldView(BaseModel):
    """Everything a renderer needs for one field."""

    field_name: str
    label: str
    placeholder: str
    value: str
    category: DisplayCategory
    error_text: str | None = None
    helper_text: str | None = None
    success_text: str | None = None
    show_check_icon: bool = False
    masked: bool = False
    secure: bool = False
    disabled: bool = False
    is_valid: bool = False


def build_field_view(field_state: FieldState, field_cfg: FieldConfig, is_valid: bool) -> FieldView:
    """
    Assemble the view. is_valid is the rule outcome over the raw value and is
    independent of touched state (it gates the submit action).
    """
    success = shows_valid(field_state) and field_cfg.show_success_state
    helper = None
    if field_cfg.helper_text and not field_state.error and not field_state.touched:
        helper = field_cfg.helper_text
    return FieldView(
        field_name=field_state.field_name,
        label=field_cfg.display_label,
        placeholder=field_cfg.placeholder,
        value=field_state.value,
        category=display_category(field_state, field_cfg),
        error_text=field_state.visible_error,
        helper_text=helper,
        success_text=SUCCESS_TEXT if success else None,
        show_check_icon=success and not field_cfg.secure,
        masked=field_cfg.secure and not field_state.show_password,
        secure=field_cfg.secure,
        disabled=field_cfg.disabled,
        is_valid=is_valid,
    )
