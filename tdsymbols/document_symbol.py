"""Outline of the symbols defined in a file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from tdsymbols.entities import Class, Symbol
from tdsymbols.file_system import FileId, TextRange
from tdsymbols.symbol_map import SymbolMap

logger = logging.getLogger(__name__)


class DocumentSymbolKind(Enum):
    CLASS = auto()
    TEMPLATE_ARGUMENT = auto()
    FIELD = auto()
    DEF = auto()
    VARIABLE = auto()
    DEFSET = auto()
    MULTICLASS = auto()


@dataclass
class DocumentSymbol:
    """One entry of a document outline, with nested entries."""

    name: str
    typ: str
    range: TextRange
    kind: DocumentSymbolKind
    children: list[DocumentSymbol] = field(default_factory=list)


def _class_symbol(symbol_map: SymbolMap, class_: Class) -> DocumentSymbol:
    template_args = [
        DocumentSymbol(
            name=arg.name,
            typ="",
            range=arg.define_loc.range,
            kind=DocumentSymbolKind.TEMPLATE_ARGUMENT,
        )
        for arg in map(symbol_map.__getitem__, class_.iter_template_arg())
    ]
    fields = [
        DocumentSymbol(
            name=fld.name,
            typ="",
            range=fld.define_loc.range,
            kind=DocumentSymbolKind.FIELD,
        )
        for fld in map(symbol_map.__getitem__, class_.iter_field())
    ]
    return DocumentSymbol(
        name=class_.name,
        typ="class",
        range=class_.define_loc.range,
        kind=DocumentSymbolKind.CLASS,
        children=template_args + fields,
    )


def _to_document_symbol(
    symbol_map: SymbolMap, symbol: Symbol
) -> Optional[DocumentSymbol]:
    if isinstance(symbol, Class):
        return _class_symbol(symbol_map, symbol)
    return None


def document_symbols(
    symbol_map: SymbolMap, file_id: FileId
) -> Optional[list[DocumentSymbol]]:
    """Return the outline of a file, or None if the file holds no symbols."""
    symbol_ids = symbol_map.iter_symbols_in_file(file_id)
    if symbol_ids is None:
        logger.info("no symbols found in file: %r", file_id)
        return None
    outline = (
        _to_document_symbol(symbol_map, symbol_map[symbol_id])
        for symbol_id in symbol_ids
    )
    return [entry for entry in outline if entry is not None]