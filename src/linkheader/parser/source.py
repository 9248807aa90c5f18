# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Byte-level access to the input stream shared by every lexing phase.

A ``Source`` wraps a caller-owned, seekable binary stream. Peeking is done by
remembering the current offset, reading one byte and seeking back, so the
stream must support ``tell()`` and ``seek()`` as well as ``read()``.
"""

from __future__ import annotations

from typing import NoReturn, Protocol

# ###############
# Public Interface
# ###############


class ByteStream(Protocol):
    """The subset of a binary file object the lexer relies on."""

    def read(self, size: int = -1, /) -> bytes: ...

    def tell(self) -> int: ...

    def seek(self, offset: int, whence: int = 0, /) -> int: ...


class LexerError(Exception):
    """Raised when a required delimiter or non-empty span is missing.

    Attributes:
        subject: The offending byte, quoted if printable, ``0xNN`` otherwise,
            or ``end of line`` when the input is exhausted.
        position: 0-based byte offset of the offending byte.
        hint: Optional description of what was expected instead.
    """

    def __init__(self, subject: str, position: int, hint: str | None = None) -> None:
        message = f"Unexpected {subject} at position {position}"
        if hint:
            message = f"{message}; {hint}"
        super().__init__(message)
        self.subject = subject
        self.position = position
        self.hint = hint


class Source:
    """A read cursor over a ``ByteStream`` with one byte of lookahead.

    Byte classes are given as ``bytes`` objects whose individual bytes are the
    members of the class, e.g. ``b"\\t "`` for horizontal whitespace.
    """

    def __init__(self, stream: ByteStream, encoding: str = "utf-8") -> None:
        self._stream = stream
        self.encoding = encoding

    @property
    def position(self) -> int:
        """Return the current byte offset of the underlying stream."""
        return self._stream.tell()

    def peek(self) -> bytes | None:
        """Return the next byte without consuming it, or None at end of input."""
        # Any failure of the stream is reported as end of input.
        try:
            offset = self._stream.tell()
            byte = self._stream.read(1)
            if isinstance(byte, bytes) and len(byte) == 1:
                self._stream.seek(offset)
                return byte
        except Exception:
            pass
        return None

    def discard(self) -> None:
        """Skip over the next byte."""
        self._stream.read(1)

    def read_byte(self) -> bytes:
        """Consume the next byte verbatim (empty at end of input)."""
        return self._stream.read(1)

    def read(self, accept: bytes, hint: str | None = None) -> bytes:
        """Consume bytes while they belong to ``accept``.

        Raises:
            LexerError: If nothing was consumed and a ``hint`` was given.
        """
        result = bytearray()
        byte = self.peek()
        while byte is not None and byte in accept:
            result += self._stream.read(1)
            byte = self.peek()
        if not result and hint is not None:
            self.error(hint)
        return bytes(result)

    def read_until(self, delimiters: bytes, hint: str | None = None) -> bytes:
        """Consume bytes up to (not including) the first one in ``delimiters``.

        An empty ``delimiters`` consumes the rest of the input.

        Raises:
            LexerError: If nothing was consumed and a ``hint`` was given.
        """
        result = bytearray()
        byte = self.peek()
        while byte is not None and byte not in delimiters:
            result += self._stream.read(1)
            byte = self.peek()
        if not result and hint is not None:
            self.error(hint)
        return bytes(result)

    def expect(self, delimiter: bytes, hint: str) -> None:
        """Consume exactly one ``delimiter`` byte or raise a LexerError."""
        if self.peek() != delimiter:
            self.error(hint)
        self.discard()

    def decode(self, data: bytes, start: int) -> str:
        """Decode a consumed span that began at byte offset ``start``."""
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise LexerError(
                _describe(data[exc.start : exc.start + 1]),
                start,
                f"span is not valid {self.encoding}",
            ) from exc

    def error(self, hint: str | None = None) -> NoReturn:
        """Raise a LexerError describing the next byte of the input."""
        raise LexerError(_describe(self.peek()), self.position, hint)


# ################
# Implementation
# ################


def _describe(byte: bytes | None) -> str:
    """Render a byte for an error message."""
    if not byte:
        return "end of line"
    if 0x21 <= byte[0] <= 0x7E:
        return repr(byte.decode("ascii"))
    return f"0x{byte[0]:02X}"
