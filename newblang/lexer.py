"""Lexer for NEWB.

The scanner works one source line at a time. Each line is split into
fragments on whitespace and around the delimiter characters
``( ) { } ; , < > = : + * - !``, so ``a:=1`` becomes ``a``, ``:``, ``=``,
``1``. Adjacent fragments that form a compound operator (``:=``, ``=<`` …)
are merged back into a single :class:`Token` before anything is classified
on its own.

On a line beginning with ``#include`` the angle brackets are library
delimiters rather than comparison operators, and are emitted as
punctuation.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
import re
from enum import Enum
from typing import Iterable, Optional

from newblang.exceptions import LexicalException

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the scanner.
    """

    RESERVED_WORD = "ReservedWord"
    OPERATOR = "Operator"
    NUMBER = "Number"
    IDENTIFIER = "Identifier"
    PUNCTUATION = "Punctuation"
    END_OF_INPUT = "EndOfInput"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


RESERVED_WORDS = frozenset({
    "#include", "const", "var", "function", "newb", "endb", "if", "else",
    "while", "repeat", "until", "call", "cin", "cout", "exit",
})

OPERATORS = frozenset({
    "+", "-", "*", "/", "mod", "div", "=", "<", ">",
})

# Two-character operators mapped to their canonical spelling.
COMPOUND_OPERATORS = {
    ":=": ":=",
    "=>": "=>",
    "=<": "=<",
    "=!": "=!",
    "==": "==",
    ">=": "=>",
    "<=": "=<",
    "!=": "=!",
}

PUNCTUATION = frozenset({"(", ")", "{", "}", ";", ","})

INCLUDE_DELIMITERS = frozenset({"<", ">"})

_DELIMS = r"(){};,<>=:+*\-!"
# A fragment is a single delimiter or a run of anything else but whitespace.
_FRAGMENT_RE = re.compile(rf"[{_DELIMS}]|[^\s{_DELIMS}]+")
_NUMBER_RE = re.compile(r"\d+(\.\d+)?")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class Token:
    """
    Represents a lexical token with a kind, text and source position.

    ``column`` is the 0-based offset of the token on its line. It is only
    used to point diagnostics at the right place and takes no part in
    equality.
    """
    __slots__ = ("kind", "text", "line", "column")

    def __init__(self, kind: TokenKind, text: str, line: int, column: Optional[int] = None):
        """
        Initialize a new token.

        Parameters:
            kind (TokenKind): The token kind.
            text (str): The lexeme, canonicalised for compound operators.
            line (int): The 1-based source line.
            column (int): The 0-based offset on the line, if known.
        """
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "column", column)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.text, self.line) == (other.kind, other.text, other.line)

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.line))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.value}, {self.text!r}, line={self.line})"


def _fragments_with_columns(line: str) -> list[tuple[str, int]]:
    return [(m.group(), m.start()) for m in _FRAGMENT_RE.finditer(line)]


def split_fragments(line: str) -> list[str]:
    """
    Split a source line into its non-blank candidate fragments.
    """
    return [part for part, _ in _fragments_with_columns(line)]


def classify(fragment: str, line_number: int, column: Optional[int] = None) -> Token:
    """
    Classify a single fragment.

    Reserved words win over operators, operators over numbers, numbers over
    identifiers and identifiers over punctuation.

    Raises:
        LexicalException: If the fragment matches no token kind.
    """
    if fragment in RESERVED_WORDS:
        return Token(TokenKind.RESERVED_WORD, fragment, line_number, column)
    if fragment in OPERATORS:
        return Token(TokenKind.OPERATOR, fragment, line_number, column)
    if _NUMBER_RE.fullmatch(fragment):
        return Token(TokenKind.NUMBER, fragment, line_number, column)
    if _IDENTIFIER_RE.fullmatch(fragment):
        return Token(TokenKind.IDENTIFIER, fragment, line_number, column)
    if fragment in PUNCTUATION:
        return Token(TokenKind.PUNCTUATION, fragment, line_number, column)
    raise LexicalException(fragment, line_number, column=column)


def tokenize_line(line: str, line_number: int) -> list[Token]:
    """
    Convert one line of source code into tokens.

    Parameters:
        line (str): The raw source line.
        line_number (int): The 1-based number of the line.

    Returns:
        list[Token]: The tokens of the line, left to right.

    Raises:
        LexicalException: If an unrecognised fragment is encountered.
    """
    parts = _fragments_with_columns(line)
    in_include = line.strip().startswith("#include")

    tokens = []
    i = 0
    while i < len(parts):
        part, column = parts[i]

        if in_include and part in INCLUDE_DELIMITERS:
            tokens.append(Token(TokenKind.PUNCTUATION, part, line_number, column))
            i += 1
            continue

        if i + 1 < len(parts):
            combined = part + parts[i + 1][0]
            if combined in COMPOUND_OPERATORS:
                tokens.append(
                    Token(TokenKind.OPERATOR, COMPOUND_OPERATORS[combined], line_number, column)
                )
                i += 2
                continue

        tokens.append(classify(part, line_number, column))
        i += 1

    return tokens


def tokenize(lines: Iterable[str]) -> list[Token]:
    """
    Convert a sequence of source lines into a flat list of tokens.

    Line numbers start at 1 with the first item of ``lines``.
    """
    tokens: list[Token] = []
    for line_number, line in enumerate(lines, start=1):
        tokens.extend(tokenize_line(line.rstrip("\r\n"), line_number))
    logger.debug("Tokenized: %s", tokens)
    return tokens


def scan_file(path) -> list[Token]:
    """
    Read and tokenize a source file line by line.

    Parameters:
        path (str | os.PathLike): Path of the UTF-8 source file.

    Raises:
        LexicalException: If the file contains an unrecognised fragment.
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        return tokenize(f)
