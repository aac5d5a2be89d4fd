"""
Main parser entry point for NEWB.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`newblang.parser.declarations`, `newblang.parser.statements` and
`newblang.parser.expressions`.

The parser validates structure only. It does not build a tree: every rule
either consumes its tokens or raises on the first mismatch.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from newblang.exceptions import DepthExceededException, SyntaxException
from newblang.lexer import Token, TokenKind
from newblang.parser.stream import TokenStream

from . import declarations as _decl
from . import expressions as _expr
from . import statements as _stmt

MAX_NESTED_DEPTH = 50

# Bound on nested blocks, if/repeat statements and parentheses combined.
MAX_NESTING = 100


class Parser:
    """NEWB parser."""

    def __init__(self, tokens: Sequence[Token], file: str = "<string>",
                 max_depth: int = MAX_NESTED_DEPTH, max_nesting: int = MAX_NESTING):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (Sequence[Token]): Tokens produced by the scanner.
            file (str): The name of the source being checked.
            max_depth (int): Maximum number of nested blocks.
            max_nesting (int): Maximum nesting of blocks, conditionals,
                loops and parentheses together.
        """
        self.stream = TokenStream(tokens)
        self.source_file = file
        self.max_depth = max_depth
        self.depth = 0
        self.max_nesting = max_nesting
        self.nesting = 0

    @property
    def curr_token(self) -> Token:
        """The token under the cursor."""
        return self.stream.peek()

    def check(self, kind: TokenKind, *values: str) -> bool:
        """
        Return ``True`` if the current token matches ``kind`` and one of
        ``values`` (any value when none are given).
        """
        return self.stream.check(kind, *values)

    def advance(self) -> Token:
        """Consume the current token unconditionally."""
        return self.stream.advance()

    def at_end(self) -> bool:
        """Return ``True`` once all tokens are consumed."""
        return self.stream.at_end()

    def error(self, token: Token, reason: str) -> SyntaxException:
        """
        Build a syntax error pointing at ``token``.
        """
        if token.kind is TokenKind.END_OF_INPUT:
            return SyntaxException(
                f"{reason} (reached end of input)", line=token.line, depth=self.depth
            )
        return SyntaxException(
            reason, lexeme=token.text, line=token.line, depth=self.depth, column=token.column
        )

    def eat(self, kind: TokenKind, value: Optional[str] = None,
            message: Optional[str] = None) -> Token:
        """
        Consume the current token if it matches the expected kind and value.

        Parameters:
            kind (TokenKind): The expected token kind.
            value (str): The expected lexeme, or ``None`` for any.
            message (str): Reason reported when the token does not match.

        Raises:
            SyntaxException: If the token does not match.
        """
        expected = (value,) if value is not None else ()
        if self.check(kind, *expected):
            return self.advance()
        if message is None:
            wanted = f"'{value}'" if value is not None else kind.value
            message = f"Expected {wanted}"
        raise self.error(self.curr_token, message)

    @contextmanager
    def nested(self, token: Token) -> Iterator[None]:
        """
        Track one level of nesting for a recursive rule entered at ``token``.

        Raises:
            DepthExceededException: If nesting goes beyond ``max_nesting``.
        """
        self.nesting += 1
        try:
            if self.nesting > self.max_nesting:
                raise DepthExceededException(
                    self.max_nesting, lexeme=token.text, line=token.line,
                    column=token.column, construct="nesting",
                )
            yield
        finally:
            self.nesting -= 1


    # Declaration wrappers
    def program(self) -> None:
        """
        Parse a whole program: declarations, the main block and ``exit``.
        """
        _decl.parse_program(self)

    def lib_decl(self) -> None:
        """
        Parse an ``#include <name>;`` directive.
        """
        _decl.parse_lib_decl(self)

    def const_decl(self) -> None:
        """
        Parse a constant declaration.
        """
        _decl.parse_const_decl(self)

    def var_decl(self) -> None:
        """
        Parse a variable declaration.
        """
        _decl.parse_var_decl(self)

    def function_decl(self) -> None:
        """
        Parse a function declaration with its local declarations and body.
        """
        _decl.parse_function_decl(self)

    def program_exit(self) -> None:
        """
        Parse the mandatory trailing ``exit`` of a program.
        """
        _decl.parse_program_exit(self)


    # Statement wrappers
    def block(self) -> None:
        """
        Parse a ``newb ... endb`` block.
        """
        _stmt.parse_block(self)

    def statement(self) -> None:
        """
        Parse a single statement.
        """
        _stmt.parse_statement(self)

    def parse_if(self) -> None:
        """
        Parse an 'if' conditional statement.
        """
        _stmt.parse_if(self)

    def parse_while(self) -> None:
        """
        Parse a 'while' loop.
        """
        _stmt.parse_while(self)

    def parse_repeat(self) -> None:
        """
        Parse a 'repeat ... until' loop.
        """
        _stmt.parse_repeat(self)

    def parse_call(self) -> None:
        """
        Parse a 'call' statement.
        """
        _stmt.parse_call(self)

    def parse_cin(self) -> None:
        """
        Parse a 'cin' input statement.
        """
        _stmt.parse_cin(self)

    def parse_cout(self) -> None:
        """
        Parse a 'cout' output statement.
        """
        _stmt.parse_cout(self)

    def parse_exit(self) -> None:
        """
        Parse an 'exit' statement.
        """
        _stmt.parse_exit(self)

    def parse_assignment(self) -> None:
        """
        Parse a variable assignment statement.
        """
        _stmt.parse_assignment(self)


    # Expression wrappers
    def expression(self) -> None:
        """
        Parse an arithmetic expression.
        """
        _expr.parse_expression(self)

    def term(self) -> None:
        """
        Parse a term: identifier, number or parenthesized expression.
        """
        _expr.parse_term(self)

    def condition(self) -> None:
        """
        Parse a condition used by 'if', 'while' and 'until'.
        """
        _expr.parse_condition(self)


    def parse(self) -> None:
        """
        Parse the full token sequence as a program.

        Raises:
            SyntaxException: On the first grammar violation.
            DepthExceededException: If blocks nest deeper than ``max_depth``,
                or any nesting goes beyond ``max_nesting``.
        """
        self.program()
