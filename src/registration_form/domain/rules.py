"""Pure validation rules for registration fields. First failing clause wins. No I/O."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from registration_form.domain.errors import FieldValidationError


class FieldName(str, Enum):
    """Known form fields."""

    FULL_NAME = "full_name"
    EMAIL = "email"
    PHONE = "phone"
    AGE = "age"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"
    USERNAME = "username"


REGISTRATION_FIELDS: list[str] = [
    FieldName.FULL_NAME.value,
    FieldName.EMAIL.value,
    FieldName.PHONE.value,
    FieldName.AGE.value,
    FieldName.PASSWORD.value,
    FieldName.CONFIRM_PASSWORD.value,
]

NAME_RE = re.compile(r"[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+")
# No leading dot, no consecutive dots, TLD of at least two letters
EMAIL_RE = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Za-z0-9_'+\-.]*[A-Za-z0-9_+-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}"
)
PHONE_RE = re.compile(r"[0-9+\s()\-]+")
AGE_RE = re.compile(r"[0-9]+")
USERNAME_RE = re.compile(r"[a-z][a-z0-9_]*")

MIN_AGE = 18
MAX_AGE = 120

Result = tuple[bool, str]
OK: Result = (True, "")


def validate_full_name(value: str) -> Result:
    """Return (is_valid, error_message)."""
    if len(value) < 2:
        return False, "El nombre debe tener al menos 2 caracteres"
    if len(value) > 50:
        return False, "El nombre no puede exceder 50 caracteres"
    if not NAME_RE.fullmatch(value):
        return False, "Solo se permiten letras y espacios"
    return OK


def validate_email(value: str) -> Result:
    """Return (is_valid, error_message). Case is folded later by normalize_value."""
    if not value:
        return False, "El email es requerido"
    if not EMAIL_RE.fullmatch(value):
        return False, "Por favor ingresa un email válido"
    return OK


def validate_password(value: str) -> Result:
    if len(value) < 8:
        return False, "La contraseña debe tener al menos 8 caracteres"
    if not re.search(r"[A-Z]", value):
        return False, "Debe contener al menos una mayúscula"
    if not re.search(r"[a-z]", value):
        return False, "Debe contener al menos una minúscula"
    if not re.search(r"[0-9]", value):
        return False, "Debe contener al menos un número"
    if not re.search(r"[^A-Za-z0-9]", value):
        return False, "Debe contener al menos un carácter especial"
    return OK


def passwords_match(confirm: str, password: str) -> bool:
    """Exact, case-sensitive comparison against the current password."""
    return confirm == password


def validate_confirm_password(value: str, password: str) -> Result:
    """Compare against the password value as it is right now."""
    if not value:
        return False, "Por favor confirma tu contraseña"
    if not passwords_match(value, password):
        return False, "Las contraseñas no coinciden"
    return OK


def validate_phone(value: str) -> Result:
    if len(value) < 10:
        return False, "El teléfono debe tener al menos 10 dígitos"
    if not PHONE_RE.fullmatch(value):
        return False, "Formato de teléfono inválido"
    return OK


def validate_age(value: str) -> Result:
    """Digits only, then the numeric range. A non-numeric value never reaches the range check."""
    if not AGE_RE.fullmatch(value):
        return False, "Solo se permiten números"
    # Anything past three significant digits is out of range; never hand int() a huge string
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_AGE)) or not MIN_AGE <= int(digits) <= MAX_AGE:
        return False, "Debes ser mayor de 18 años"
    return OK


def validate_username(value: str) -> Result:
    if len(value) < 3:
        return False, "El nombre de usuario debe tener al menos 3 caracteres"
    if len(value) > 20:
        return False, "El nombre de usuario no puede exceder 20 caracteres"
    if not USERNAME_RE.fullmatch(value):
        return False, "Solo minúsculas, números y guiones bajos. Debe comenzar con letra"
    return OK


# Single-argument rules; confirm_password is handled separately in validate_field
STATIC_RULES: dict[str, Callable[[str], Result]] = {
    FieldName.FULL_NAME.value: validate_full_name,
    FieldName.EMAIL.value: validate_email,
    FieldName.PASSWORD.value: validate_password,
    FieldName.PHONE.value: validate_phone,
    FieldName.AGE.value: validate_age,
    FieldName.USERNAME.value: validate_username,
}


def validate_field(field_name: str, value: str, *, password: str | None = None) -> Result:
    """Dispatch to the rule for field_name.

    confirm_password needs the current password value; pass it on every call.
    """
    if field_name == FieldName.CONFIRM_PASSWORD.value:
        return validate_confirm_password(value, password or "")
    rule = STATIC_RULES.get(field_name)
    if rule is None:
        return False, f"Campo desconocido: {field_name}"
    return rule(value)


def normalize_value(field_name: str, value: str) -> str:
    """Value as used after a successful validation (email is lowercased)."""
    if field_name == FieldName.EMAIL.value:
        return value.lower()
    return value


def parse_field(field_name: str, value: str, *, password: str | None = None) -> str:
    """Return the normalized value, or raise FieldValidationError with the first failing message."""
    ok, message = validate_field(field_name, value, password=password)
    if not ok:
        raise FieldValidationError(field_name, message)
    return normalize_value(field_name, value)
