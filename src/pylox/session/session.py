# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scan-and-report sessions."""

from __future__ import annotations

from typing import TextIO

from pylox.diagnostics.sink import DiagnosticSink, ErrorState
from pylox.scanner.lexer import Lexer, Token
from pylox.scanner.serialization import serialize_tokens
from pylox.session.config import OutputFormat, SessionConfig

# ###############
# Public Interface
# ###############


class Session:
    """Drives scans of successive inputs and owns their error flag.

    The flag is sticky across :meth:`run` calls until :meth:`reset` is called,
    so a caller can scan several inputs and check once whether any failed.

    Args:
        config: Session settings. Defaults are used when omitted.
        stderr: Stream for diagnostics. Defaults to ``sys.stderr``.
    """

    def __init__(self, config: SessionConfig | None = None, stderr: TextIO | None = None) -> None:
        self.config = config if config is not None else SessionConfig()
        self.state = ErrorState()
        self.sink = DiagnosticSink(self.state, stream=stderr, color=self.config.color)

    @property
    def had_error(self) -> bool:
        return self.state.had_error

    def run(self, source: str) -> list[Token]:
        """Scan *source* and return its tokens, reporting problems to the session sink."""
        return Lexer(source, self.sink).scan()

    def reset(self) -> None:
        """Clear the error flag before the next input."""
        self.state.reset()


def render_tokens(tokens: list[Token], output_format: OutputFormat = "text") -> str:
    """Render *tokens* for display, one per line or as a JSON dump."""
    if output_format == "json":
        return serialize_tokens(tokens)
    return "\n".join(str(token) for token in tokens)
