"""
Expression parsing utilities for NEWB.

These functions operate on a `newblang.parser.parser.Parser` instance.
Expressions are a flat chain of terms joined by arithmetic operators; the
checker validates their shape only, so no precedence levels are needed.
"""

import logging
from typing import TYPE_CHECKING

from newblang.lexer import TokenKind

if TYPE_CHECKING:
    from newblang.parser import Parser

logger = logging.getLogger(__name__)

ARITHMETIC_OPERATORS = ("+", "-", "*", "/", "mod", "div")
RELATIONAL_OPERATORS = ("=", "=!", "<", "=<", ">", "=>")


def parse_expression(parser: 'Parser') -> None:
    """Parse terms joined by arithmetic operators."""
    parser.term()
    while parser.check(TokenKind.OPERATOR, *ARITHMETIC_OPERATORS):
        parser.advance()
        parser.term()


def parse_term(parser: 'Parser') -> None:
    """Parse an identifier, a number or a parenthesized expression."""
    if parser.check(TokenKind.PUNCTUATION, "("):
        tok = parser.advance()
        with parser.nested(tok):
            parser.expression()
            parser.eat(TokenKind.PUNCTUATION, ")", "Expected ')' to close the nested expression")
    elif parser.check(TokenKind.IDENTIFIER) or parser.check(TokenKind.NUMBER):
        parser.advance()
    else:
        raise parser.error(
            parser.curr_token, "Expected identifier, number, or nested expression in term"
        )


def parse_condition(parser: 'Parser') -> None:
    """
    Parse a condition.

    A condition starting with ``(`` is a nested expression and needs no
    relational operator; anything else must be ``<term> <relop> <term>``.
    """
    if parser.check(TokenKind.PUNCTUATION, "("):
        tok = parser.advance()
        with parser.nested(tok):
            parser.expression()
            parser.eat(TokenKind.PUNCTUATION, ")", "Expected ')' to close the condition")
        return

    parser.term()
    op = parser.curr_token
    if op.kind is not TokenKind.OPERATOR:
        raise parser.error(op, "Expected a comparison operator")
    if op.text not in RELATIONAL_OPERATORS:
        raise parser.error(op, f"Invalid comparison operator '{op.text}'")
    parser.advance()
    parser.term()
    logger.debug("Condition with operator %s", op.text)
