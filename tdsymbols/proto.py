"""Conversion between internal locations and Language Server Protocol objects.

Protocol objects are plain dictionaries shaped as the protocol's JSON.
"""

from __future__ import annotations

from typing import Any

from tdsymbols.diagnostics import Diagnostic
from tdsymbols.document_symbol import DocumentSymbol, DocumentSymbolKind
from tdsymbols.file_system import FileRange, TextRange
from tdsymbols.line_index import LineIndex
from tdsymbols.vfs import Vfs, uri_from_path

_SYMBOL_KIND_CLASS = 5
_SYMBOL_KIND_PROPERTY = 7
_SYMBOL_KIND_FIELD = 8
_SYMBOL_KIND_VARIABLE = 13

_SYMBOL_KINDS = {
    DocumentSymbolKind.CLASS: _SYMBOL_KIND_CLASS,
    DocumentSymbolKind.TEMPLATE_ARGUMENT: _SYMBOL_KIND_PROPERTY,
    DocumentSymbolKind.FIELD: _SYMBOL_KIND_FIELD,
    DocumentSymbolKind.DEF: _SYMBOL_KIND_VARIABLE,
    DocumentSymbolKind.VARIABLE: _SYMBOL_KIND_VARIABLE,
    DocumentSymbolKind.DEFSET: _SYMBOL_KIND_VARIABLE,
    DocumentSymbolKind.MULTICLASS: _SYMBOL_KIND_CLASS,
}


def position_to_lsp(line_index: LineIndex, position: int) -> dict[str, int]:
    """Return the protocol position of a character offset."""
    line = line_index.pos_to_line(position)
    character = position - line_index.line_to_pos(line)
    return {"line": line, "character": character}


def range_to_lsp(line_index: LineIndex, text_range: TextRange) -> dict[str, Any]:
    return {
        "start": position_to_lsp(line_index, text_range.start),
        "end": position_to_lsp(line_index, text_range.end),
    }


def location(vfs: Vfs, line_index: LineIndex, file_range: FileRange) -> dict[str, Any]:
    return {
        "uri": uri_from_path(vfs.path_for_file(file_range.file)),
        "range": range_to_lsp(line_index, file_range.range),
    }


def diagnostic(line_index: LineIndex, diag: Diagnostic) -> dict[str, Any]:
    return {
        "range": range_to_lsp(line_index, diag.location.range),
        "message": diag.message,
    }


def document_symbol(line_index: LineIndex, symbol: DocumentSymbol) -> dict[str, Any]:
    """Return a protocol document symbol; children are omitted when there are none."""
    lsp_range = range_to_lsp(line_index, symbol.range)
    result: dict[str, Any] = {
        "name": symbol.name,
        "detail": symbol.typ,
        "kind": _SYMBOL_KINDS[symbol.kind],
        "range": lsp_range,
        "selectionRange": lsp_range,
    }
    if symbol.children:
        result["children"] = [
            document_symbol(line_index, child) for child in symbol.children
        ]
    return result


def position_from_lsp(line_index: LineIndex, position: dict[str, int]) -> int:
    """Return the character offset of a protocol position."""
    return line_index.line_to_pos(position["line"]) + position["character"]


def range_from_lsp(line_index: LineIndex, lsp_range: dict[str, Any]) -> TextRange:
    return TextRange(
        position_from_lsp(line_index, lsp_range["start"]),
        position_from_lsp(line_index, lsp_range["end"]),
    )