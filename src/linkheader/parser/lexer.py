# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical analysis of a single HTTP 'Link' header value.

The value has this shape (RFC 8288, section 3)::

    link-value = "<" URI-Reference ">" *( OWS ";" OWS link-param )
    link-param = token BWS [ "=" BWS ( token / quoted-string ) ]

The URI-Reference is lexed first, then the optional parameter list, both
advancing the same stream.
"""

from __future__ import annotations

import io
import logging

from linkheader.parser.source import ByteStream, Source
from linkheader.parser.tokens import Lexeme, LexemeBuffer, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Lexer:
    """Turns a 'Link' header value into a buffer of lexemes.

    Attributes:
        encoding: Codec used to decode each lexeme and to encode ``str`` input.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def analyze(self, stream: ByteStream | bytes | str) -> LexemeBuffer:
        """Lex one ``link-value``.

        Args:
            stream: A seekable binary stream positioned at the start of the
                value, or the value itself as ``bytes`` or ``str``.

        Returns:
            The lexemes in source order.

        Raises:
            LexerError: If a required delimiter or span is missing.
        """
        source = Source(_as_stream(stream, self.encoding), self.encoding)

        lexemes = [_analyze_uri_reference(source)]
        lexemes.extend(_analyze_parameters(source))

        if source.peek() is not None:
            logger.debug("Ignoring trailing input at position %d", source.position)
        logger.debug("Lexemes: %s", [(lexeme.type.name, lexeme.value) for lexeme in lexemes])
        return LexemeBuffer(lexemes)


def tokenize(stream: ByteStream | bytes | str, encoding: str = "utf-8") -> LexemeBuffer:
    """Lex a 'Link' header value with a default ``Lexer``."""
    return Lexer(encoding).analyze(stream)


# ################
# Implementation
# ################

_WHITESPACE = b"\t "
_PARAMETER_NAME_END = b"\t ;="
_TOKEN_VALUE_END = b"\t ;"
_QUOTED_STRING_STOP = b'"\\'


def _as_stream(stream: ByteStream | bytes | str, encoding: str) -> ByteStream:
    if isinstance(stream, str):
        stream = stream.encode(encoding)
    if isinstance(stream, (bytes, bytearray)):
        return io.BytesIO(stream)
    return stream


# ------------------------------------------------------------------
# URI-Reference
# ------------------------------------------------------------------


def _analyze_uri_reference(source: Source) -> Lexeme:
    """Lex the bracketed URI-Reference and the whitespace around it."""
    # Upstream HTTP parsers normally strip this already.
    source.read(_WHITESPACE)
    source.expect(b"<", "expecting a left angle bracket to delimit the start of a URI Reference")

    start = source.position
    raw = source.read_until(b">", "expecting a URI Reference")

    source.expect(b">", "expecting a right angle bracket to delimit the end of a URI Reference")
    source.read(_WHITESPACE)

    return Lexeme(TokenType.URI_REFERENCE, source.decode(raw, start))


# ------------------------------------------------------------------
# Parameter list
# ------------------------------------------------------------------


def _analyze_parameters(source: Source) -> list[Lexeme]:
    """Lex the optional ``; name[=value]`` sequence.

    Produces nothing unless the next byte is a semicolon.
    """
    lexemes: list[Lexeme] = []
    if source.peek() != b";":
        return lexemes

    while source.peek() == b";":
        source.discard()
        lexemes.append(_analyze_parameter_name(source))
        if source.peek() == b"=":
            lexemes.append(_analyze_parameter_value(source))

    source.read(_WHITESPACE)
    return lexemes


def _analyze_parameter_name(source: Source) -> Lexeme:
    """Lex a parameter name.

    The name is not checked against the HTTP ``token`` character class; any
    run of bytes up to whitespace, ``;`` or ``=`` is accepted.
    """
    source.read(_WHITESPACE)
    start = source.position
    raw = source.read_until(_PARAMETER_NAME_END, "expecting a parameter name")
    source.read(_WHITESPACE)

    return Lexeme(TokenType.PARAMETER_NAME, source.decode(raw, start))


def _analyze_parameter_value(source: Source) -> Lexeme:
    """Lex ``= value``, where value is a quoted-string or a bare token."""
    source.discard()  # =
    source.read(_WHITESPACE)

    if source.peek() == b'"':
        value = _analyze_quoted_string(source)
    else:
        start = source.position
        raw = source.read_until(_TOKEN_VALUE_END, "expecting a parameter value")
        value = source.decode(raw, start)

    source.read(_WHITESPACE)
    return Lexeme(TokenType.PARAMETER_VALUE, value)


def _analyze_quoted_string(source: Source) -> str:
    """Lex a double-quoted string, resolving backslash escapes.

    A backslash is dropped and the byte after it is kept verbatim, whatever it
    is.
    """
    source.discard()  # opening "
    start = source.position

    value = bytearray(source.read_until(_QUOTED_STRING_STOP))
    while source.peek() == b"\\":
        source.discard()
        value += source.read_byte()
        value += source.read_until(_QUOTED_STRING_STOP)

    source.expect(b'"', "expecting a double quote to delimit the end of the quoted string")
    return source.decode(bytes(value), start)
