# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for HTTP 'Link' header values."""

from linkheader.parser.lexer import Lexer, tokenize
from linkheader.parser.parser import ParseError, Parser, parse
from linkheader.parser.source import ByteStream, LexerError
from linkheader.parser.tokens import Lexeme, LexemeBuffer, TokenType

__all__ = [
    "ByteStream",
    "Lexeme",
    "LexemeBuffer",
    "Lexer",
    "LexerError",
    "ParseError",
    "Parser",
    "TokenType",
    "parse",
    "tokenize",
]
