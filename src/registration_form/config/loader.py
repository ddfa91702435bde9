"""Read a form definition from YAML and validate it into FormConfig."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from registration_form.config.models import FormConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "registration_form.yaml"


def load_config(path: str | Path) -> FormConfig:
    """
    Parse the YAML form definition at path.

    The document must be a mapping with at least a ``fields`` list. Raises
    FileNotFoundError for a missing file, yaml.YAMLError for unparsable text
    and ValueError for an empty, non-mapping or schema-invalid document.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        raise ValueError("Config file is empty")
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config: expected a mapping at the top level, got {type(data).__name__}")

    try:
        config = FormConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config: {e}") from e
    logger.debug("Loaded form %r with fields %s from %s", config.title, config.field_names, path)
    return config


def default_config() -> FormConfig:
    """The six-field registration screen shipped with the package."""
    return load_config(DEFAULT_CONFIG_PATH)
