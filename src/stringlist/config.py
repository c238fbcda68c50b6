"""Handles the parsing and validation of StringList pattern settings."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .types import ReplacementSyntax

logger = logging.getLogger(__name__)

# Top-level key under which settings may be nested in a shared YAML file
CONFIG_SECTION = "stringlist"


class PatternSettings(BaseModel):
    """Options applied when StringList compiles and substitutes regular expressions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    ascii_only: bool = False
    replacement_syntax: ReplacementSyntax = ReplacementSyntax.PYTHON

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PatternSettings":
        """
        Create a PatternSettings object from a dictionary.

        Raises:
            ValueError: If the dictionary contains unknown keys or invalid values.

        """
        try:
            return cls(**data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e


def load_config(config_path: str | Path) -> PatternSettings:
    """
    Load, parse, and validate a YAML settings file.

    The settings may sit at the top level of the document or under a
    `stringlist:` key, so they can share a file with other tools.

    Args:
        config_path: The path to the YAML file.

    Returns:
        A validated PatternSettings object. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e

    if data is None:
        logger.debug("Configuration file %s is empty, using default settings.", path)
        return PatternSettings()

    if not isinstance(data, dict):
        msg = "Invalid or missing configuration: config file must be a YAML mapping (dictionary)."
        raise ValueError(msg)

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        msg = f"Invalid or missing configuration: '{CONFIG_SECTION}' must be a mapping."
        raise ValueError(msg)

    settings = PatternSettings.from_dict(section)
    logger.debug("Loaded pattern settings from %s: %s", path, settings)
    return settings
