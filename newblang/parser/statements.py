"""Statement parsing utilities for NEWB.

These functions operate on a `newblang.parser.parser.Parser` instance and
handle blocks and the statement forms that may appear inside them:
assignments, conditionals, loops, calls, console input/output and ``exit``.

Every statement inside a block or a ``repeat`` body must be followed by a
``;``. The terminator is checked by the enclosing rule, right after the
statement is parsed.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
from typing import TYPE_CHECKING

from newblang.exceptions import DepthExceededException
from newblang.lexer import TokenKind

if TYPE_CHECKING:
    from newblang.parser import Parser

logger = logging.getLogger(__name__)


def _expect_terminator(parser: 'Parser') -> None:
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' after statement")


def parse_block(parser: 'Parser') -> None:
    """
    Parse a block of statements enclosed in ``newb`` / ``endb``.

    Syntax:
        newb (<statement> ;)* endb

    Args:
        parser: The parser instance.

    Raises:
        DepthExceededException: If entering the block exceeds the
            parser's maximum block depth or overall nesting.
    """
    tok = parser.curr_token
    parser.depth += 1
    try:
        if parser.depth > parser.max_depth:
            raise DepthExceededException(
                parser.max_depth, lexeme=tok.text, line=tok.line, column=tok.column
            )
        logger.debug("Parsing block at depth %d...", parser.depth)

        with parser.nested(tok):
            parser.eat(TokenKind.RESERVED_WORD, "newb", "Expected 'newb' to start a block")
            while not parser.check(TokenKind.RESERVED_WORD, "endb") and not parser.at_end():
                parser.statement()
                _expect_terminator(parser)
            parser.eat(TokenKind.RESERVED_WORD, "endb", "Expected 'endb' to close the block")
    finally:
        parser.depth -= 1


def parse_statement(parser: 'Parser') -> None:
    """
    Parse a single statement.

    The statement form is chosen from the current token alone.

    Args:
        parser: The parser instance.
    """
    tok = parser.curr_token
    if tok.kind is TokenKind.IDENTIFIER:
        parser.parse_assignment()
        return

    if tok.kind is TokenKind.RESERVED_WORD:
        dispatch = {
            "newb": parser.block,
            "if": parser.parse_if,
            "while": parser.parse_while,
            "repeat": parser.parse_repeat,
            "call": parser.parse_call,
            "cin": parser.parse_cin,
            "cout": parser.parse_cout,
            "exit": parser.parse_exit,
        }
        rule = dispatch.get(tok.text)
        if rule is not None:
            rule()
            return

    raise parser.error(tok, "Unexpected statement")


def parse_if(parser: 'Parser') -> None:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if ( <condition> ) <statement> [else <statement>]

    Args:
        parser: The parser instance.
    """
    tok = parser.eat(TokenKind.RESERVED_WORD, "if")
    with parser.nested(tok):
        parser.eat(TokenKind.PUNCTUATION, "(", "Expected '(' after 'if'")
        parser.condition()
        parser.eat(TokenKind.PUNCTUATION, ")", "Expected ')' after condition")
        parser.statement()

        if parser.check(TokenKind.RESERVED_WORD, "else"):
            parser.advance()
            parser.statement()


def parse_while(parser: 'Parser') -> None:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <block>

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "while")
    parser.eat(TokenKind.PUNCTUATION, "(", "Expected '(' after 'while'")
    parser.condition()
    parser.eat(TokenKind.PUNCTUATION, ")", "Expected ')' after condition")
    parser.block()


def parse_repeat(parser: 'Parser') -> None:
    """
    Parse a 'repeat ... until' loop.

    Syntax:
        repeat (<statement> ;)* until <condition>

    Args:
        parser: The parser instance.
    """
    tok = parser.eat(TokenKind.RESERVED_WORD, "repeat")
    with parser.nested(tok):
        while not parser.check(TokenKind.RESERVED_WORD, "until") and not parser.at_end():
            parser.statement()
            _expect_terminator(parser)
        parser.eat(TokenKind.RESERVED_WORD, "until", "Expected 'until' after repeat body")
        parser.condition()


def parse_call(parser: 'Parser') -> None:
    """
    Parse a function call.

    Syntax:
        call <identifier>

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "call")
    name = parser.eat(TokenKind.IDENTIFIER, message="Expected function name after 'call'")
    logger.debug("Function call: %s", name.text)


def parse_cin(parser: 'Parser') -> None:
    """
    Parse a console input statement. The input operator is two separate
    ``>`` tokens.

    Syntax:
        cin > > <identifier>

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "cin")
    parser.eat(TokenKind.OPERATOR, ">", "Expected '>>' after 'cin'")
    parser.eat(TokenKind.OPERATOR, ">", "Expected '>>' after 'cin'")
    parser.eat(TokenKind.IDENTIFIER, message="Expected variable after 'cin >>'")


def parse_cout(parser: 'Parser') -> None:
    """
    Parse a console output statement. The output operator is two separate
    ``<`` tokens.

    Syntax:
        cout < < (<identifier> | <number>)

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "cout")
    parser.eat(TokenKind.OPERATOR, "<", "Expected '<<' after 'cout'")
    parser.eat(TokenKind.OPERATOR, "<", "Expected '<<' after 'cout'")
    if parser.check(TokenKind.IDENTIFIER) or parser.check(TokenKind.NUMBER):
        parser.advance()
    else:
        raise parser.error(parser.curr_token, "Expected variable or number after 'cout <<'")


def parse_exit(parser: 'Parser') -> None:
    """
    Parse an 'exit' statement inside a block.

    Syntax:
        exit

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "exit")


def parse_assignment(parser: 'Parser') -> None:
    """
    Parse assignment to a variable.

    Syntax:
        <identifier> := <expression>

    Args:
        parser: The parser instance.
    """
    target = parser.eat(TokenKind.IDENTIFIER, message="Expected variable name for assignment")
    parser.eat(TokenKind.OPERATOR, ":=", "Expected ':=' in assignment")
    parser.expression()
    logger.debug("Assignment to %s", target.text)
