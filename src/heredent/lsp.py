"""Minimal LSP server for template files: diagnostics and formatting."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_FORMATTING,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentFormattingParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
    TextEdit,
)
from pygls.lsp.server import LanguageServer

from heredent import __version__
from heredent.normalize import normalize

SOURCE = "heredent"
WARNING = DiagnosticSeverity.Warning
INFO = DiagnosticSeverity.Information

server = LanguageServer(
    "heredent-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def check_text(source: str) -> list[Diagnostic]:
    """Report everything normalization would change in *source*."""
    lines = _lines(source)
    diagnostics: list[Diagnostic] = []

    for i, line in enumerate(lines):
        stripped = line.rstrip(" \t")
        if stripped != line:
            diagnostics.append(
                _diagnostic(i, len(stripped), i, len(line), "trailing whitespace", WARNING)
            )

    blank = [not line.strip() for line in lines]
    if all(blank):
        return diagnostics

    first = blank.index(False)
    last = len(lines) - 1 - blank[::-1].index(False)

    if first > 0:
        diagnostics.append(_diagnostic(0, 0, first, 0, "leading blank lines", INFO))
    if last < len(lines) - 1:
        diagnostics.append(
            _diagnostic(last + 1, 0, len(lines) - 1, len(lines[-1]), "trailing blank lines", INFO)
        )

    # Only lines left empty by the trailing trim count towards a run
    empty = [not line.rstrip(" \t") for line in lines]
    i = first
    while i <= last:
        if not empty[i]:
            i += 1
            continue
        run_start = i
        while empty[i]:
            i += 1
        if i - run_start > 1:
            diagnostics.append(
                _diagnostic(run_start, 0, i, 0, f"{i - run_start} consecutive blank lines", INFO)
            )

    return diagnostics


def format_text(source: str) -> list[TextEdit]:
    """Return the edits that replace *source* with its normalized form."""
    formatted = normalize([source], [])
    if formatted:
        formatted += "\n"
    if formatted == source:
        return []
    # Cover the whole document, including a final line break
    raw = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    end = Position(line=len(raw) - 1, character=len(raw[-1]))
    start = Position(line=0, character=0)
    return [TextEdit(range=Range(start=start, end=end), new_text=formatted)]


def _lines(source: str) -> list[str]:
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    # A final newline terminates the last line rather than starting a new one
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def _diagnostic(
    start_line: int,
    start_col: int,
    end_line: int,
    end_col: int,
    message: str,
    severity: DiagnosticSeverity,
) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=start_line, character=start_col),
            end=Position(line=end_line, character=end_col),
        ),
        message=message,
        severity=severity,
        source=SOURCE,
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Check the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=check_text(doc.source))
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_FORMATTING)
def formatting(ls: LanguageServer, params: DocumentFormattingParams) -> list[TextEdit]:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    return format_text(doc.source)


def main() -> None:
    server.start_io()
