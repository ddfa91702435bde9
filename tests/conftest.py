"""Pytest fixtures: form configs, a mounted form, state factories."""

from __future__ import annotations

import pytest

from registration_form.config.loader import default_config
from registration_form.config.models import FieldConfig, FormConfig
from registration_form.domain.rules import REGISTRATION_FIELDS
from registration_form.domain.state import FormState
from registration_form.orchestration.form import RegistrationForm


VALID_VALUES = {
    "full_name": "Ana María",
    "email": "USER@Example.com",
    "phone": "+593 99 123 4567",
    "age": "25",
    "password": "Abcd123!",
    "confirm_password": "Abcd123!",
}


@pytest.fixture
def form_config() -> FormConfig:
    """The packaged six-field registration screen."""
    return default_config()


@pytest.fixture
def minimal_config() -> FormConfig:
    """Two fields: one validating on change, one only on blur."""
    return FormConfig(
        fields=[
            FieldConfig(name="password", validate_on_change=True, secure=True),
            FieldConfig(name="age", helper_text="Debes ser mayor de 18 años"),
        ],
    )


@pytest.fixture
def initial_state(form_config: FormConfig) -> FormState:
    return FormState.initial(form_config.field_names)


@pytest.fixture
def form(form_config: FormConfig) -> RegistrationForm:
    return RegistrationForm(form_config)


@pytest.fixture
def valid_values() -> dict[str, str]:
    return dict(VALID_VALUES)


@pytest.fixture
def registration_fields() -> list[str]:
    return list(REGISTRATION_FIELDS)
