# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for a single HTTP 'Link' header value.

Consumes the lexeme buffer produced by the lexer and builds a LinkValue. Every
decision is made on one lexeme of lookahead; nothing is ever backtracked.
"""

from __future__ import annotations

import logging

from linkheader.model.entities import LinkValue, Parameter
from linkheader.parser.lexer import Lexer
from linkheader.parser.source import ByteStream
from linkheader.parser.tokens import Lexeme, LexemeBuffer, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the next lexeme is not one of the kinds allowed at that point.

    Attributes:
        unexpected: The kind that was found, or None at end of stream.
        expected: The kinds that would have been accepted.
    """

    def __init__(self, unexpected: TokenType | None, expected: tuple[TokenType, ...]) -> None:
        self.unexpected = unexpected
        self.expected = tuple(dict.fromkeys(expected))
        subject = "end of stream" if unexpected is None else f"{unexpected.name} token"
        names = ", ".join(token_type.name for token_type in self.expected)
        super().__init__(f"Unexpected {subject}; expecting token(s): {names}")


class Parser:
    """Parses 'Link' header values using the given lexer."""

    def __init__(self, lexer: Lexer | None = None) -> None:
        self._lexer = lexer if lexer is not None else Lexer()

    def parse(self, stream: ByteStream | bytes | str) -> LinkValue:
        """Lex and parse one ``link-value``.

        Raises:
            LexerError: If the input is lexically malformed.
            ParseError: If the lexemes are not in a valid order.
        """
        return self.parse_lexemes(self._lexer.analyze(stream))

    def parse_lexemes(self, buffer: LexemeBuffer) -> LinkValue:
        """Build a LinkValue from an already lexed buffer, consuming it entirely."""
        uri_reference = _consume(buffer, TokenType.URI_REFERENCE).value
        parameters = _parse_parameters(buffer)
        _expect_end(buffer)
        return LinkValue(uri_reference=uri_reference, parameters=parameters)


def parse(stream: ByteStream | bytes | str, encoding: str = "utf-8") -> LinkValue:
    """Parse one HTTP 'Link' header value.

    Args:
        stream: A seekable binary stream holding a single ``link-value``, or
            the value itself as ``bytes`` or ``str``.
        encoding: Codec used to decode the URI-Reference and parameters.

    Returns:
        The URI-Reference and the parameters keyed by lowercased name.

    Raises:
        LexerError: If the input is lexically malformed.
        ParseError: If the lexemes are not in a valid order.
    """
    return Parser(Lexer(encoding)).parse(stream)


# ################
# Implementation
# ################


def _expect(buffer: LexemeBuffer, *types: TokenType) -> None:
    """Raise ParseError unless the front lexeme is one of ``types``."""
    found = buffer.peek_type()
    if found not in types:
        raise ParseError(found, types)


def _consume(buffer: LexemeBuffer, token_type: TokenType) -> Lexeme:
    _expect(buffer, token_type)
    return buffer.consume()


def _parse_parameters(buffer: LexemeBuffer) -> dict[str, Parameter]:
    """Parse parameters until the front lexeme is no longer a name.

    A later parameter replaces an earlier one with the same name, compared
    case-insensitively.
    """
    parameters: dict[str, Parameter] = {}
    while buffer.peek_type() is TokenType.PARAMETER_NAME:
        parameter = _parse_parameter(buffer)
        key = parameter.name.lower()
        if key in parameters:
            logger.debug("Parameter %r overrides an earlier occurrence", parameter.name)
        parameters[key] = parameter
    return parameters


def _parse_parameter(buffer: LexemeBuffer) -> Parameter:
    name = _consume(buffer, TokenType.PARAMETER_NAME).value
    value = ""
    if buffer.peek_type() is TokenType.PARAMETER_VALUE:
        value = buffer.consume().value
    return Parameter(name=name, value=value)


def _expect_end(buffer: LexemeBuffer) -> None:
    """Raise ParseError if anything is left after the parameter list."""
    found = buffer.peek_type()
    if found is not None:
        raise ParseError(found, (TokenType.PARAMETER_NAME,))
