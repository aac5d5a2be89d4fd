"""Errors.

Every failure raised while checking a NEWB source carries an
:class:`ErrorCategory`, the offending lexeme (when there is one) and the
1-based line it was found on. The checker turns these into a
:class:`newblang.checker.CheckResult` at its boundary.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """
    Categories of diagnostics reported by the checker.
    """

    LEXICAL = "Lexical"
    SYNTAX = "Syntax"
    DEPTH_EXCEEDED = "DepthExceeded"

    @property
    def label(self) -> str:
        """
        Return the human readable label used when rendering a diagnostic.
        """
        return {
            ErrorCategory.LEXICAL: "Lexical Error",
            ErrorCategory.SYNTAX: "Syntax Error",
            ErrorCategory.DEPTH_EXCEEDED: "Depth Exceeded",
        }[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class CheckException(Exception):
    """
    Base error for all checker failures.
    """
    category = ErrorCategory.SYNTAX

    def __init__(self, message, reason=None, lexeme=None, line=None, column=None):
        self.reason = reason if reason is not None else message
        self.lexeme = lexeme
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def message(self) -> str:
        """
        Return the full diagnostic message.
        """
        return str(self)


class LexicalException(CheckException):
    """
    Error for source fragments that are not a valid lexeme.
    """
    category = ErrorCategory.LEXICAL

    def __init__(self, fragment, line, column=None):
        super().__init__(
            f"Unexpected token '{fragment}' on line {line}",
            reason="Unexpected token",
            lexeme=fragment,
            line=line,
            column=column,
        )


class SyntaxException(CheckException):
    """
    Error for a token that does not fit the grammar at the cursor.
    """
    category = ErrorCategory.SYNTAX

    def __init__(self, reason, lexeme=None, line=None, depth=None, column=None):
        self.depth = depth
        message = reason
        if line is not None:
            message += f" at line {line}"
        if lexeme is not None:
            message += f", near '{lexeme}'"
        message += "."
        if depth is not None:
            message += f" Current block depth: {depth}"
        super().__init__(message, reason=reason, lexeme=lexeme, line=line, column=column)


class DepthExceededException(CheckException):
    """
    Error for nesting beyond the configured maximum.

    ``construct`` is ``"block"`` for the ``newb`` block limit and
    ``"nesting"`` for the combined limit on blocks, conditionals, loops and
    parentheses.
    """
    category = ErrorCategory.DEPTH_EXCEEDED

    def __init__(self, max_depth, lexeme=None, line=None, column=None, construct="block"):
        self.max_depth = max_depth
        self.construct = construct
        if construct == "block":
            reason = "Exceeded maximum nested block depth"
        else:
            reason = "Exceeded maximum nesting depth"
        message = f"{reason} of {max_depth}"
        if line is not None:
            message += f" at line {line}"
        super().__init__(
            message,
            reason=reason,
            lexeme=lexeme,
            line=line,
            column=column,
        )
