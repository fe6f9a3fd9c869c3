# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Session configuration model and its YAML loader."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_NAME = ".pylox.yaml"

OutputFormat = Literal["text", "json"]


class SessionConfigError(Exception):
    """Raised when the session configuration cannot be read or is invalid."""


class SessionConfig(BaseModel):
    """Settings for an interactive or file scanning session.

    Attributes:
        prompt: Text written before each line read by the interactive loop.
        color: Print diagnostics in colour.
        output_format: How scanned tokens are printed, ``text`` or ``json``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    prompt: str = "pylox> "
    color: bool = False
    output_format: OutputFormat = Field(alias="output-format", default="text")


def load_session_config(path: Path) -> SessionConfig:
    """Load and validate a session configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the .pylox.yaml file.

    Returns:
        A validated SessionConfig instance.

    Raises:
        SessionConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SessionConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise SessionConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SessionConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SessionConfigError(f"{path}: config must be a YAML mapping")

    try:
        return SessionConfig.model_validate(data)
    except ValidationError as exc:
        raise SessionConfigError(f"Invalid config file '{path}': {exc}") from exc
