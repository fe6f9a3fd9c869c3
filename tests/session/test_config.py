# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the session configuration module."""

from pathlib import Path

import pytest

from pylox.session import CONFIG_NAME, SessionConfig, SessionConfigError, load_session_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_name_constant() -> None:
    assert CONFIG_NAME == ".pylox.yaml"


def test_defaults() -> None:
    config = SessionConfig()
    assert config.prompt == "pylox> "
    assert config.color is False
    assert config.output_format == "text"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty YAML file is treated as a config with all defaults."""
    config = load_session_config(_write_config(tmp_path, ""))
    assert config == SessionConfig()


def test_full_config(tmp_path: Path) -> None:
    content = """\
prompt: "lox> "
color: true
output-format: json
"""
    config = load_session_config(_write_config(tmp_path, content))

    assert config.prompt == "lox> "
    assert config.color is True
    assert config.output_format == "json"


def test_partial_config_keeps_other_defaults(tmp_path: Path) -> None:
    config = load_session_config(_write_config(tmp_path, "color: true\n"))
    assert config.color is True
    assert config.prompt == "pylox> "


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SessionConfigError, match="not found"):
        load_session_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(SessionConfigError, match="Invalid YAML"):
        load_session_config(_write_config(tmp_path, "prompt: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(SessionConfigError, match="mapping"):
        load_session_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(SessionConfigError, match="Invalid config file"):
        load_session_config(_write_config(tmp_path, "colour: true\n"))


def test_unknown_output_format_raises(tmp_path: Path) -> None:
    with pytest.raises(SessionConfigError):
        load_session_config(_write_config(tmp_path, "output-format: xml\n"))
