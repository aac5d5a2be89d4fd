"""Syntax checker driver for NEWB.

Runs the scanner and the parser over one source and turns the outcome into
a :class:`CheckResult`. This is the only place where checker exceptions are
caught; everything below it fails fast and propagates the first error.


File: checker.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional

from newblang.exceptions import CheckException, ErrorCategory
from newblang.lexer import Token, scan_file, tokenize
from newblang.parser import MAX_NESTED_DEPTH, MAX_NESTING, Parser

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Parsing completed successfully."


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one source."""

    source: str
    ok: bool
    category: Optional[ErrorCategory] = None
    message: Optional[str] = None
    lexeme: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def success(cls, source: str) -> "CheckResult":
        """Build a passing result."""
        return cls(source=source, ok=True)

    @classmethod
    def from_exception(cls, source: str, exc: CheckException) -> "CheckResult":
        """Build a failing result from a checker exception."""
        return cls(
            source=source,
            ok=False,
            category=exc.category,
            message=exc.message,
            lexeme=exc.lexeme,
            line=exc.line,
            column=exc.column,
        )

    def render(self) -> str:
        """Return the text shown to the user for this result."""
        if self.ok:
            return SUCCESS_MESSAGE
        return f"{self.category.label}: {self.message}"


def parse_tokens(tokens: list[Token], source: str = "<string>",
                 max_depth: int = MAX_NESTED_DEPTH, max_nesting: int = MAX_NESTING) -> None:
    """
    Run the parser over an already scanned token list.

    Raises:
        SyntaxException: On the first grammar violation.
        DepthExceededException: If blocks nest deeper than ``max_depth``, or
            blocks, conditionals, loops and parentheses together nest deeper
            than ``max_nesting``.
    """
    Parser(tokens, source, max_depth=max_depth, max_nesting=max_nesting).parse()


def check_lines(lines: Iterable[str], source: str = "<string>",
                max_depth: int = MAX_NESTED_DEPTH, max_nesting: int = MAX_NESTING) -> CheckResult:
    """
    Check a sequence of source lines.
    """
    try:
        tokens = tokenize(lines)
        parse_tokens(tokens, source, max_depth, max_nesting)
    except CheckException as e:
        logger.debug("%s failed: %s", source, e)
        return CheckResult.from_exception(source, e)
    logger.debug("%s passed", source)
    return CheckResult.success(source)


def check_source(code: str, source: str = "<string>",
                 max_depth: int = MAX_NESTED_DEPTH, max_nesting: int = MAX_NESTING) -> CheckResult:
    """
    Check source code held in a string.

    Lines end at ``\\n``, ``\\r\\n`` or ``\\r`` only, the same universal
    newlines used when reading a file.
    """
    return check_lines(io.StringIO(code, newline=None), source, max_depth, max_nesting)


def check_file(path, max_depth: int = MAX_NESTED_DEPTH,
               max_nesting: int = MAX_NESTING) -> CheckResult:
    """
    Check a source file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    source = os.fspath(path)
    try:
        tokens = scan_file(path)
        parse_tokens(tokens, source, max_depth, max_nesting)
    except CheckException as e:
        logger.debug("%s failed: %s", source, e)
        return CheckResult.from_exception(source, e)
    logger.debug("%s passed", source)
    return CheckResult.success(source)
