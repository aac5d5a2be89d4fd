"""
NEWB Language Server entry point.

This server reports syntax diagnostics for NEWB source files using
`pygls`. It reuses the NEWB checker on every open, change and save, and
publishes the single diagnostic the checker produces (or clears the
diagnostics when the source is well-formed).
"""
from __future__ import annotations

import logging
import re
from typing import List

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Position,
    Range,
)

from newblang.checker import CheckResult, check_source

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def result_to_diagnostics(result: CheckResult, text: str) -> List[Diagnostic]:
    """Convert a check result into LSP diagnostics for ``text``.

    The range covers the offending lexeme at the column the scanner
    reported. Without a column it falls back to the first occurrence of the
    lexeme on the line, and to the whole line when there is no lexeme.
    """
    if result.ok:
        return []

    lines = _LINE_BREAK_RE.split(text)
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    line_no = (result.line or 1) - 1
    line_no = min(max(line_no, 0), len(lines) - 1)
    line_text = lines[line_no]

    if result.lexeme and result.column is not None:
        start = result.column
    elif result.lexeme:
        start = line_text.find(result.lexeme)
    else:
        start = -1
    if start >= 0:
        end = start + len(result.lexeme)
    else:
        start, end = 0, len(line_text)

    return [
        Diagnostic(
            range=Range(
                start=Position(line=line_no, character=start),
                end=Position(line=line_no, character=end),
            ),
            message=result.message,
            severity=DiagnosticSeverity.Error,
            source="newb",
            code=result.category.value,
        )
    ]


class NewbLanguageServer(LanguageServer):
    """Language server for NEWB source files."""

    def __init__(self) -> None:
        super().__init__("newb-ls", "v0.1")

    def validate(self, uri: str) -> None:
        """Check the document at ``uri`` and publish its diagnostics."""
        doc = self.workspace.get_text_document(uri)
        result = check_source(doc.source, uri)
        logger.debug("%s: %s", uri, result.render())
        self.publish_diagnostics(uri, result_to_diagnostics(result, doc.source))


lang_server = NewbLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: NewbLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.validate(params.text_document.uri)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: NewbLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check a document when it changes."""
    ls.validate(params.text_document.uri)


@lang_server.feature(TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: NewbLanguageServer, params: DidSaveTextDocumentParams) -> None:
    """Re-check a document when it is saved."""
    ls.validate(params.text_document.uri)


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
