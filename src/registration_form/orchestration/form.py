"""Registration form controller: owns FormState and routes screen events to transitions."""

from __future__ import annotations

import logging

from registration_form.config.models import FormConfig
from registration_form.domain import transitions
from registration_form.domain.display import FieldView, build_field_view
from registration_form.domain.state import FieldState, FormState
from registration_form.domain.validity import (
    SubmitResult,
    build_submit_result,
    is_form_valid,
    validate_value,
)

logger = logging.getLogger(__name__)


class RegistrationForm:
    """One mounted form: config + state. Every event resolves synchronously before returning."""

    def __init__(self, config: FormConfig) -> None:
        self.config = config
        self._state = FormState.initial(config.field_names)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def values(self) -> dict[str, str]:
        return self._state.values

    def field_state(self, field_name: str) -> FieldState:
        return self._state.field(field_name)

    def change(self, field_name: str, text: str) -> FieldState:
        """Keystroke: store text, re-validate if already touched."""
        self._state = transitions.on_change(self._state, self.config, field_name, text)
        return self._state.field(field_name)

    def blur(self, field_name: str) -> FieldState:
        """Focus lost: touch the field and validate it."""
        self._state = transitions.on_blur(self._state, self.config, field_name)
        return self._state.field(field_name)

    def focus(self, field_name: str) -> FieldState:
        self._state = transitions.on_focus(self._state, self.config, field_name)
        return self._state.field(field_name)

    def toggle_password_visibility(self, field_name: str) -> FieldState:
        self._state = transitions.toggle_password_visibility(self._state, self.config, field_name)
        return self._state.field(field_name)

    def is_field_valid(self, field_name: str) -> bool:
        """Rule outcome over the current raw value, regardless of touched state."""
        self._state.field(field_name)
        ok, _ = validate_value(field_name, self.values)
        return ok

    def field_view(self, field_name: str) -> FieldView:
        return build_field_view(
            self._state.field(field_name),
            self.config.field(field_name),
            self.is_field_valid(field_name),
        )

    def views(self) -> list[FieldView]:
        """Views for every field, in configured order."""
        return [self.field_view(name) for name in self.config.field_names]

    @property
    def is_form_valid(self) -> bool:
        """Gates the submit action. Recomputed from raw values on every read."""
        return is_form_valid(self.values, self.config.field_names)

    def submit(self) -> SubmitResult:
        """
        Re-validate all fields from current raw values and describe the outcome.
        Also touches every field so per-field errors become visible. Reaching
        this with an invalid form still yields the whole-form failure notice.
        """
        result = build_submit_result(self.values, self.config.field_names)
        self._state = transitions.touch_all(self._state, self.config)
        logger.debug("Submit finished: success=%s", result.success)
        return result

    def reset(self) -> None:
        """Back to an empty, pristine form (screen remount)."""
        self._state = FormState.initial(self.config.field_names)
