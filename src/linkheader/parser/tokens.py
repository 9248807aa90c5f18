# Copyright 2026 Link Header Parser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds, lexemes and the buffer handed from the lexer to the parser."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token kinds produced by the 'Link' header lexer."""

    URI_REFERENCE = "uri_reference"
    PARAMETER_NAME = "parameter_name"
    PARAMETER_VALUE = "parameter_value"


@dataclass(frozen=True)
class Lexeme:
    """A classified span of the header value.

    Attributes:
        type: The kind of token.
        value: The text of the span, with quoted-string escapes resolved.
    """

    type: TokenType
    value: str = ""


class LexemeBuffer:
    """A first-in, first-out sequence of lexemes with one lexeme of lookahead."""

    def __init__(self, lexemes: Iterable[Lexeme] = ()) -> None:
        self._lexemes: deque[Lexeme] = deque(lexemes)

    def peek(self) -> Lexeme | None:
        """Return the front lexeme without consuming it, or None if empty."""
        if self._lexemes:
            return self._lexemes[0]
        return None

    def peek_type(self) -> TokenType | None:
        """Return the type of the front lexeme, or None if empty."""
        lexeme = self.peek()
        return lexeme.type if lexeme is not None else None

    def consume(self) -> Lexeme:
        """Remove and return the front lexeme.

        Raises:
            IndexError: If the buffer is empty.
        """
        if not self._lexemes:
            raise IndexError("consume from an empty lexeme buffer")
        return self._lexemes.popleft()

    def __len__(self) -> int:
        return len(self._lexemes)

    def __iter__(self) -> Iterator[Lexeme]:
        return iter(list(self._lexemes))

    def __repr__(self) -> str:
        return f"LexemeBuffer({list(self._lexemes)!r})"
