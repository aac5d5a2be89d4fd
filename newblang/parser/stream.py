"""Token stream used by the NEWB parser.

The stream is a read-only view over the scanner output plus a cursor that
only moves forward. Reading past the last token never raises: a synthetic
``EndOfInput`` token is returned instead, tagged with the token count as its
line.


File: stream.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import Sequence

from newblang.lexer import Token, TokenKind


class TokenStream:
    """Ordered tokens with a single forward-only cursor."""

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tuple(tokens)
        self._position = 0

    @property
    def position(self) -> int:
        """Index of the next unconsumed token."""
        return self._position

    def __len__(self) -> int:
        return len(self._tokens)

    def end_token(self) -> Token:
        """Return the synthetic end-of-input token for this stream."""
        return Token(TokenKind.END_OF_INPUT, "", len(self._tokens))

    def at_end(self) -> bool:
        """Return ``True`` once every token has been consumed."""
        return self._position >= len(self._tokens)

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        if self.at_end():
            return self.end_token()
        return self._tokens[self._position]

    def advance(self) -> Token:
        """Consume and return the current token."""
        if self.at_end():
            return self.end_token()
        token = self._tokens[self._position]
        self._position += 1
        return token

    def check(self, kind: TokenKind, *values: str) -> bool:
        """
        Return ``True`` if the current token has ``kind`` and, when
        ``values`` are given, one of those texts.
        """
        if self.at_end():
            return False
        token = self._tokens[self._position]
        if token.kind != kind:
            return False
        return not values or token.text in values
