# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sessions, their configuration and the interactive loop."""

from pylox.session.config import (
    CONFIG_NAME,
    OutputFormat,
    SessionConfig,
    SessionConfigError,
    load_session_config,
)
from pylox.session.repl import run_prompt
from pylox.session.session import Session, render_tokens

__all__ = [
    "CONFIG_NAME",
    "OutputFormat",
    "Session",
    "SessionConfig",
    "SessionConfigError",
    "load_session_config",
    "render_tokens",
    "run_prompt",
]
