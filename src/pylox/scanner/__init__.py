# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text."""

from pylox.scanner.lexer import (
    KEYWORDS,
    NO_LITERAL,
    Lexer,
    NoLiteral,
    NumberLiteral,
    StringLiteral,
    Token,
    TokenLiteral,
    TokenType,
    scan,
)
from pylox.scanner.serialization import TOKENS_FORMAT_VERSION, deserialize_tokens, serialize_tokens

__all__ = [
    "KEYWORDS",
    "Lexer",
    "NO_LITERAL",
    "NoLiteral",
    "NumberLiteral",
    "StringLiteral",
    "TOKENS_FORMAT_VERSION",
    "Token",
    "TokenLiteral",
    "TokenType",
    "deserialize_tokens",
    "scan",
    "serialize_tokens",
]
