# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reporting of line-numbered diagnostics and the sticky error flag."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from yachalk import chalk

from pylox.scanner.lexer import Token, TokenType

# ###############
# Public Interface
# ###############


@dataclass
class ErrorState:
    """Sticky error flag for one session.

    Once set by a report, ``had_error`` stays set until :meth:`reset` is called
    by the owner of the state.
    """

    had_error: bool = False

    def reset(self) -> None:
        self.had_error = False


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem.

    Attributes:
        line: 1-based line the problem was found on.
        where: Location qualifier, e.g. "at end" or "at 'foo'"; empty for none.
        message: Human-readable description.
    """

    line: int
    where: str
    message: str

    def __str__(self) -> str:
        return f"[line #{self.line}] Error {self.where}: {self.message}"


class DiagnosticSink:
    """Formats diagnostics, prints them and latches the owner's error flag.

    Args:
        state: The error flag to latch. Owned by the caller, shared by reference.
        stream: Where formatted diagnostics are printed. Defaults to the
            current ``sys.stderr`` at report time.
        color: Print diagnostics in red.
    """

    def __init__(self, state: ErrorState, stream: TextIO | None = None, color: bool = False) -> None:
        self.state = state
        self.diagnostics: list[Diagnostic] = []
        self._stream = stream
        self._color = color

    @property
    def had_error(self) -> bool:
        return self.state.had_error

    def simple_error(self, line: int, message: str) -> None:
        """Report a problem located only by its line."""
        self.report(line, "", message)

    def error(self, token: Token, message: str) -> None:
        """Report a problem at *token*."""
        if token.kind == TokenType.EOF:
            self.report(token.line, "at end", message)
        else:
            self.report(token.line, f"at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        """Record, print and flag a diagnostic."""
        diagnostic = Diagnostic(line=line, where=where, message=message)
        self.diagnostics.append(diagnostic)
        self.state.had_error = True

        text = str(diagnostic)
        if self._color:
            text = chalk.red(text)
        print(text, file=self._stream if self._stream is not None else sys.stderr)
