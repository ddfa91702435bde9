"""Configuration loading and validation."""

from registration_form.config.models import (
    FieldConfig,
    FormConfig,
)
from registration_form.config.loader import default_config, load_config

__all__ = [
    "FieldConfig",
    "FormConfig",
    "default_config",
    "load_config",
]
