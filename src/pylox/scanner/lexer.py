# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a flat sequence of tokens. Lexical errors are
reported to a diagnostic sink and scanning continues, so a single pass
surfaces every malformed lexeme in the input.

Lexical grammar:

    NUMBER     -> DIGIT+ ( "." DIGIT+ )? ;
    STRING     -> "\"" <any character except "\"">* "\"" ;
    IDENTIFIER -> ALPHA ( ALPHA | DIGIT )* ;
    ALPHA      -> "a" ... "z" | "A" ... "Z" | "_" ;
    DIGIT      -> "0" ... "9" ;
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pylox.diagnostics.sink import DiagnosticSink

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Lox lexer."""

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One, two or doubled character tokens
    MINUS = "-"
    MINUS_EQUAL = "-="
    MINUS_MINUS = "--"
    PLUS = "+"
    PLUS_EQUAL = "+="
    PLUS_PLUS = "++"
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUN = "fun"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class NoLiteral:
    """Literal slot of every token that is neither a STRING nor a NUMBER."""

    @property
    def value(self) -> None:
        return None

    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class StringLiteral:
    """Text between the quotes of a STRING token, backslashes kept verbatim."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberLiteral:
    """Double-precision value of a NUMBER token."""

    value: float

    def __str__(self) -> str:
        return repr(self.value)


TokenLiteral = NoLiteral | StringLiteral | NumberLiteral

NO_LITERAL = NoLiteral()


@dataclass(frozen=True)
class Token:
    """A lexical token with the line it starts on.

    Attributes:
        kind: The kind of token.
        lexeme: The exact source text consumed for the token (empty for EOF).
        literal: Decoded value for STRING and NUMBER tokens, NO_LITERAL otherwise.
        line: 1-based line number where the token starts.
    """

    kind: TokenType
    lexeme: str
    literal: TokenLiteral
    line: int

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme} {self.literal}"


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)

UNTERMINATED_BLOCK_COMMENT = "Unterminated block comment."
UNTERMINATED_STRING = "Unterminated string."


class Lexer:
    """Scanner over a single source string.

    A Lexer scans its source once; calling :meth:`scan` again returns the
    tokens produced by the first call.
    """

    def __init__(self, source: str, sink: DiagnosticSink) -> None:
        self._source = source
        self._sink = sink
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens: list[Token] = []
        self._done = False

    def scan(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        if self._done:
            return self._tokens
        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", NO_LITERAL, self._line))
        self._done = True
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals *expected*."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _add_token(self, kind: TokenType, literal: TokenLiteral = NO_LITERAL) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(kind, lexeme, literal, self._start_line))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one character and dispatch on it."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in " \t\r":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch in _DOUBLING_OPERATORS:
            single, doubled, with_equal = _DOUBLING_OPERATORS[ch]
            if self._match(ch):
                self._add_token(doubled)
            elif self._match("="):
                self._add_token(with_equal)
            else:
                self._add_token(single)
        elif ch in _EQUAL_SUFFIX_OPERATORS:
            single, with_equal = _EQUAL_SUFFIX_OPERATORS[ch]
            self._add_token(with_equal if self._match("=") else single)
        elif ch == "/":
            self._scan_slash()
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self._sink.simple_error(self._line, f"Unexpected character {ch!r}.")

    # ------------------------------------------------------------------
    # Slash and comment handling
    # ------------------------------------------------------------------

    def _scan_slash(self) -> None:
        """Handle '//' line comments, '/*' block comments and the bare '/' operator."""
        if self._match("/"):
            while self._peek() != "\n" and not self._is_at_end():
                self._advance()
        elif self._match("*"):
            self._skip_block_comment()
        else:
            self._add_token(TokenType.SLASH)

    def _skip_block_comment(self) -> None:
        """Consume through the first '*/'. Block comments do not nest."""
        start_line = self._line
        while not self._is_at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()  # *
                self._advance()  # /
                return
            if self._advance() == "\n":
                self._line += 1
        self._sink.simple_error(start_line, UNTERMINATED_BLOCK_COMMENT)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string; newlines are allowed, escapes are not decoded."""
        while self._peek() != '"' and not self._is_at_end():
            if self._advance() == "\n":
                self._line += 1

        if self._is_at_end():
            self._sink.simple_error(self._line, UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, StringLiteral(value))

    def _scan_number(self) -> None:
        """Scan an integer or decimal literal.

        The '.' is only part of the number when a digit follows it, so "123."
        is NUMBER followed by DOT.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume the '.'
            while _is_digit(self._peek()):
                self._advance()

        value = float(self._source[self._start : self._current])
        self._add_token(TokenType.NUMBER, NumberLiteral(value))

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        while _is_alpha_numeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, sink: DiagnosticSink | None = None) -> list[Token]:
    """Scan Lox source text into a sequence of tokens.

    Comments and whitespace are consumed and not included in the output.
    Lexical errors are reported to *sink* and never raised.

    Args:
        source: The full source text.
        sink: Receiver for lexical diagnostics. When omitted, a fresh sink
            writing to stderr is used.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    if sink is None:
        from pylox.diagnostics.sink import DiagnosticSink, ErrorState

        sink = DiagnosticSink(ErrorState())
    return Lexer(source, sink).scan()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# character -> (single, doubled, single followed by '=')
_DOUBLING_OPERATORS: dict[str, tuple[TokenType, TokenType, TokenType]] = {
    "-": (TokenType.MINUS, TokenType.MINUS_MINUS, TokenType.MINUS_EQUAL),
    "+": (TokenType.PLUS, TokenType.PLUS_PLUS, TokenType.PLUS_EQUAL),
}

# character -> (single, single followed by '=')
_EQUAL_SUFFIX_OPERATORS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alpha_numeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)
