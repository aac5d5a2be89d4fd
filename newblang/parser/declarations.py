"""Declaration parsing utilities for NEWB.

These functions operate on a `newblang.parser.parser.Parser` instance and
handle the top level of a program: library includes, constant, variable and
function declarations, and the trailing ``exit``.

Declarations come in a fixed order. Once the parser has moved on from one
class of declaration it cannot come back to it, so a ``const`` after a
``var`` is rejected.


File: declarations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
from typing import TYPE_CHECKING, Callable

from newblang.lexer import TokenKind

if TYPE_CHECKING:
    from newblang.parser import Parser

logger = logging.getLogger(__name__)

PROGRAM_SECTIONS = ("#include", "const", "var", "function")
FUNCTION_SECTIONS = ("const", "var")


def _parse_section(parser: 'Parser', order: tuple[str, ...], index: int,
                   rule: Callable[[], None], seen: list[str]) -> None:
    """
    Parse every consecutive declaration introduced by ``order[index]``,
    then reject any keyword belonging to an earlier section.

    Args:
        parser: The parser instance.
        order: Section keywords in their required order.
        index: Position of the current section in ``order``.
        rule: The parser method handling one declaration.
        seen: Keywords of sections that have had entries so far.
    """
    keyword = order[index]
    while parser.check(TokenKind.RESERVED_WORD, keyword):
        rule()
        if keyword not in seen:
            seen.append(keyword)

    tok = parser.curr_token
    if tok.kind is TokenKind.RESERVED_WORD and tok.text in order[:index] and seen:
        raise parser.error(
            tok,
            f"'{tok.text}' declarations must appear before '{seen[-1]}' declarations",
        )


def parse_program(parser: 'Parser') -> None:
    """
    Parse a complete program.

    Syntax:
        <lib_decl>* <const_decl>* <var_decl>* <function_decl>* <block> exit [;]

    Args:
        parser: The parser instance.
    """
    logger.debug("Parsing program...")
    seen: list[str] = []
    _parse_section(parser, PROGRAM_SECTIONS, 0, parser.lib_decl, seen)
    _parse_section(parser, PROGRAM_SECTIONS, 1, parser.const_decl, seen)
    _parse_section(parser, PROGRAM_SECTIONS, 2, parser.var_decl, seen)
    _parse_section(parser, PROGRAM_SECTIONS, 3, parser.function_decl, seen)
    parser.block()
    parser.program_exit()
    logger.debug("Finished program.")


def parse_lib_decl(parser: 'Parser') -> None:
    """
    Parse a library include.

    Syntax:
        #include < <identifier> > ;

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "#include")
    parser.eat(TokenKind.PUNCTUATION, "<", "Expected '<' after #include")
    lib = parser.eat(TokenKind.IDENTIFIER, message="Expected library name after '<'")
    parser.eat(TokenKind.PUNCTUATION, ">", "Expected '>' after library name")
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' after library declaration")
    logger.debug("Parsed #include <%s>", lib.text)


def parse_const_decl(parser: 'Parser') -> None:
    """
    Parse a constant declaration.

    Syntax:
        const <type> <identifier> = <number> ;

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "const")
    parser.eat(TokenKind.IDENTIFIER, message="Expected type (e.g., int, float) after 'const'")
    name = parser.eat(TokenKind.IDENTIFIER, message="Expected constant name after type")
    parser.eat(TokenKind.OPERATOR, "=", "Expected '=' after constant name")
    parser.eat(TokenKind.NUMBER, message="Expected constant value after '='")
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' at the end of constant declaration")
    logger.debug("Declared constant %s", name.text)


def parse_var_decl(parser: 'Parser') -> None:
    """
    Parse a variable declaration of one or more names.

    Syntax:
        var <type> <identifier> (, <identifier>)* ;

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "var")
    type_tok = parser.eat(TokenKind.IDENTIFIER, message="Expected type after 'var'")
    names = [parser.eat(TokenKind.IDENTIFIER, message="Expected variable name").text]
    while parser.check(TokenKind.PUNCTUATION, ","):
        parser.advance()
        names.append(
            parser.eat(TokenKind.IDENTIFIER, message="Expected variable name after ','").text
        )
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' at the end of variable declaration")
    logger.debug("Declared %s %s", type_tok.text, ", ".join(names))


def parse_function_decl(parser: 'Parser') -> None:
    """
    Parse a function declaration.

    Syntax:
        function <identifier> ; <const_decl>* <var_decl>* <block> ;

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "function")
    name = parser.eat(TokenKind.IDENTIFIER, message="Expected function name")
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' after function declaration")
    logger.debug("Parsing function %s...", name.text)

    seen: list[str] = []
    _parse_section(parser, FUNCTION_SECTIONS, 0, parser.const_decl, seen)
    _parse_section(parser, FUNCTION_SECTIONS, 1, parser.var_decl, seen)
    parser.block()
    parser.eat(TokenKind.PUNCTUATION, ";", "Expected ';' after function body")


def parse_program_exit(parser: 'Parser') -> None:
    """
    Parse the ``exit`` closing a program and make sure nothing follows it.

    Syntax:
        exit [;]

    Args:
        parser: The parser instance.
    """
    parser.eat(TokenKind.RESERVED_WORD, "exit", "Expected 'exit' at the end of the program")
    if parser.check(TokenKind.PUNCTUATION, ";"):
        parser.advance()
    if not parser.at_end():
        raise parser.error(parser.curr_token, "Unexpected token after 'exit'")
