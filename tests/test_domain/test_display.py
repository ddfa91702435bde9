"""Display category precedence and field view assembly."""

from __future__ import annotations

from registration_form.config.models import FieldConfig
from registration_form.domain.display import (
    SUCCESS_TEXT,
    DisplayCategory,
    build_field_view,
    display_category,
)
from registration_form.domain.state import FieldState


def _fs(**kwargs) -> FieldState:
    return FieldState(field_name="email", **kwargs)


def test_default_when_untouched_and_unfocused() -> None:
    assert display_category(_fs(), FieldConfig(name="email")) == DisplayCategory.DEFAULT


def test_focused() -> None:
    assert display_category(_fs(focused=True), FieldConfig(name="email")) == DisplayCategory.FOCUSED


def test_disabled_wins_over_everything() -> None:
    fs = _fs(touched=True, focused=True, error="Por favor ingresa un email válido", value="x")
    assert display_category(fs, FieldConfig(name="email", disabled=True)) == DisplayCategory.DISABLED


def test_invalid_requires_touched() -> None:
    cfg = FieldConfig(name="email")
    assert display_category(_fs(error="El email es requerido"), cfg) == DisplayCategory.DEFAULT
    assert display_category(_fs(error="El email es requerido", touched=True, focused=True), cfg) == DisplayCategory.INVALID


def test_valid_needs_value_and_success_display() -> None:
    cfg = FieldConfig(name="email")
    assert display_category(_fs(touched=True, value="a@b.com"), cfg) == DisplayCategory.VALID
    assert display_category(_fs(touched=True, value=""), cfg) == DisplayCategory.DEFAULT
    quiet = FieldConfig(name="email", show_success_state=False)
    assert display_category(_fs(touched=True, value="a@b.com", focused=True), quiet) == DisplayCategory.FOCUSED


def test_view_shows_helper_until_touched() -> None:
    cfg = FieldConfig(name="email", label="Correo electrónico", helper_text="Usaremos este email para contactarte")
    view = build_field_view(_fs(value="bad"), cfg, is_valid=False)
    assert view.label == "Correo electrónico"
    assert view.helper_text == "Usaremos este email para contactarte"
    assert view.error_text is None

    touched = build_field_view(_fs(value="bad", touched=True, error="Por favor ingresa un email válido"), cfg, False)
    assert touched.helper_text is None
    assert touched.error_text == "Por favor ingresa un email válido"
    assert touched.category == DisplayCategory.INVALID


def test_view_success_text_and_check_icon() -> None:
    cfg = FieldConfig(name="email")
    view = build_field_view(_fs(value="a@b.com", touched=True), cfg, is_valid=True)
    assert view.success_text == SUCCESS_TEXT
    assert view.show_check_icon is True
    assert view.is_valid is True


def test_secure_view_is_masked_without_check_icon() -> None:
    cfg = FieldConfig(name="password", secure=True)
    fs = FieldState(field_name="password", value="Abcd123!", touched=True)
    view = build_field_view(fs, cfg, is_valid=True)
    assert view.masked is True
    assert view.show_check_icon is False
    assert view.success_text == SUCCESS_TEXT

    revealed = build_field_view(fs.model_copy(update={"show_password": True}), cfg, is_valid=True)
    assert revealed.masked is False


def test_view_default_label_from_field_name() -> None:
    view = build_field_view(FieldState(field_name="confirm_password"), FieldConfig(name="confirm_password"), False)
    assert view.label == "Confirm password"
