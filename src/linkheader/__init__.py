# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for single HTTP 'Link' header values (RFC 8288)."""

from linkheader.model import LinkValue, Parameter
from linkheader.parser import (
    ByteStream,
    Lexeme,
    LexemeBuffer,
    Lexer,
    LexerError,
    ParseError,
    Parser,
    TokenType,
    parse,
    tokenize,
)

__all__ = [
    "ByteStream",
    "Lexeme",
    "LexemeBuffer",
    "Lexer",
    "LexerError",
    "LinkValue",
    "Parameter",
    "ParseError",
    "Parser",
    "TokenType",
    "parse",
    "tokenize",
]
