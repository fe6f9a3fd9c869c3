# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON token dump."""

import io
import json

import pytest

from pylox.diagnostics.sink import DiagnosticSink, ErrorState
from pylox.scanner.lexer import NO_LITERAL, Lexer, NumberLiteral, StringLiteral, Token, TokenType
from pylox.scanner.serialization import TOKENS_FORMAT_VERSION, deserialize_tokens, serialize_tokens

# ###############
# Helpers
# ###############


def _scan(source: str) -> list[Token]:
    return Lexer(source, DiagnosticSink(ErrorState(), stream=io.StringIO())).scan()


# ###############
# Serialization
# ###############


def test_dump_is_versioned_compact_json():
    """The dump carries the format version and uses compact separators."""
    data = serialize_tokens(_scan(""))
    assert " " not in data
    obj = json.loads(data)
    assert obj["v"] == TOKENS_FORMAT_VERSION
    assert obj["tokens"] == [{"kind": "EOF", "lexeme": "", "literal": None, "line": 1}]


def test_dump_literals_by_kind():
    """STRING and NUMBER literals are plain JSON values, everything else is null."""
    obj = json.loads(serialize_tokens(_scan('var s = "hi";\nx = 2.5;')))
    records = obj["tokens"]
    assert records[0] == {"kind": "VAR", "lexeme": "var", "literal": None, "line": 1}
    assert records[3] == {"kind": "STRING", "lexeme": '"hi"', "literal": "hi", "line": 1}
    assert records[7] == {"kind": "NUMBER", "lexeme": "2.5", "literal": 2.5, "line": 2}


def test_load_restores_tokens():
    """A dump read back yields equal tokens with the right literal variants."""
    tokens = _scan('print "a" + 1;')
    restored = deserialize_tokens(serialize_tokens(tokens))
    assert restored == tokens
    assert restored[1].literal == StringLiteral("a")
    assert restored[3].literal == NumberLiteral(1.0)
    assert restored[0].literal == NO_LITERAL
    assert restored[-1].kind == TokenType.EOF


def test_load_rejects_unknown_version():
    """An unrecognised format version is rejected."""
    with pytest.raises(ValueError, match="Unsupported token dump format version"):
        deserialize_tokens('{"v":"99","tokens":[]}')
