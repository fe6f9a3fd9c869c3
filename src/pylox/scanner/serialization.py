# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON serialization of token sequences.

The dump is a compact, versioned JSON document so that a later stage can
consume a scan without re-running the lexer.
"""

from __future__ import annotations

import json
from typing import Any

from pylox.scanner.lexer import NO_LITERAL, NumberLiteral, StringLiteral, Token, TokenLiteral, TokenType

# ###############
# Public Interface
# ###############

TOKENS_FORMAT_VERSION = "1"


def serialize_tokens(tokens: list[Token]) -> str:
    """Serialize a token sequence to a compact JSON string."""
    obj = {"v": TOKENS_FORMAT_VERSION, "tokens": [_token_to_dict(t) for t in tokens]}
    return json.dumps(obj, separators=(",", ":"))


def deserialize_tokens(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize_tokens`.

    Returns:
        The reconstructed list of tokens.

    Raises:
        ValueError: If the format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != TOKENS_FORMAT_VERSION:
        raise ValueError(f"Unsupported token dump format version: {version!r}")
    return [_token_from_dict(d) for d in obj["tokens"]]


# ################
# Implementation
# ################


def _token_to_dict(token: Token) -> dict[str, Any]:
    return {
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "literal": token.literal.value,
        "line": token.line,
    }


def _token_from_dict(d: dict[str, Any]) -> Token:
    kind = TokenType[d["kind"]]
    return Token(kind=kind, lexeme=d["lexeme"], literal=_literal_from_value(kind, d["literal"]), line=d["line"])


def _literal_from_value(kind: TokenType, value: Any) -> TokenLiteral:
    if kind == TokenType.STRING:
        return StringLiteral(value)
    if kind == TokenType.NUMBER:
        return NumberLiteral(float(value))
    return NO_LITERAL
