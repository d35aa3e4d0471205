# tdsymbols

Building blocks for editor tooling around the TableGen language: file
bookkeeping, a line index, a symbol map of classes, defs, fields and
template arguments, typed values and expressions, and conversions to
Language Server Protocol shapes. It has no dependencies beyond the
standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `tdsymbols.ids` — typed arena identifiers: `ClassId`, `TemplateArgumentId`,
  `FieldId`, `DefId`, `VariableId`, `DefFieldId`. Each holds an `index`.
- `tdsymbols.file_system` — `FileId`, `TextRange` (half-open, with
  `is_empty()`; a start after the end raises `ValueError`), `FilePosition`,
  `FileRange`, `FileSet` (two-way mapping between ids and paths),
  `SourceRoot` and the abstract `FileSystem` interface
  (`assign_or_get_file_id`, `path_for_file`, `read_content`).
- `tdsymbols.line_index` — `LineIndex(text)`, with `pos_to_line(pos)` and
  `line_to_pos(line)`; offsets are counted in characters and out-of-bounds
  arguments raise `IndexError`.
- `tdsymbols.typ` — `Type` and its kinds (`BitType`, `IntType`,
  `StringType`, `DagType`, `BitsType`, `ListType`, `ClassType`, `DefType`,
  `CodeType`, `UnknownType`); `Type.isa(symbol_map, other)` checks
  compatibility, including parent classes looked up in a symbol map.
- `tdsymbols.value` — evaluated values (`Uninitialized`, `BitValue`,
  `IntValue`, `StringValue`, `BitsValue`, `ListValue`, `DagValue`,
  `DefIdentifier`, `DagArgValue`) with `typ()` and
  `cast_to(symbol_map, typ)`, which returns `None` when no conversion applies.
- `tdsymbols.expr` — unevaluated expressions (`Simple`, `FieldSuffix`,
  `Paste` and the `SimpleExpr` kinds), `DagArg`, `CondClause` and the
  `BangOperatorOp` enum. `Expr.replaced(replacement)` substitutes template
  arguments from a mapping of `TemplateArgumentId` to `Expr`.
- `tdsymbols.entities` — `Class`, `TemplateArgument`, `Field`, `Def`,
  `DefField` and `Variable`, all `Symbol`s with a name, a definition
  location and reference locations.
- `tdsymbols.symbol_map` — `SymbolMap`: stores symbols, looks them up by id
  (`symbol_map[some_id]`, `KeyError` for an invalid id), by name
  (`find_class`, `find_def`), by file (`iter_symbols_in_file`) and by
  position (`iter_symbols_in_range`, `find_symbol_at`). Symbols with an
  empty range are not indexed by position. `replace_def` keeps the old
  def's references and raises `ValueError` if the names differ.
- `tdsymbols.document_symbol` — `document_symbols(symbol_map, file_id)`
  builds an outline of the classes in a file, with their template arguments
  and fields as children, or returns `None` if the file has no symbols.
- `tdsymbols.diagnostics` — `Diagnostic` and
  `group_by_file(source_root, diagnostics)`, which gives every file of the
  source root an entry.
- `tdsymbols.vfs` — `Vfs`, a `FileSystem` that reads files from disk
  (returning `None` when a file cannot be read), plus `path_from_uri` and
  `uri_from_path` for `file:` URIs.
- `tdsymbols.proto` — conversions to and from Language Server Protocol
  objects, as plain dictionaries shaped like the protocol's JSON:
  `position_to_lsp`, `range_to_lsp`, `location`, `diagnostic`,
  `document_symbol`, `position_from_lsp`, `range_from_lsp`.
- `tdsymbols.fixture` — `Fixture`, an in-memory `FileSystem` built from
  annotated text: `$` marks a cursor position, and with
  `Fixture.multiple_files` each file starts with a `; <path>` header line.
  `Fixture.single_file` places its text at `/main.td`.

## Example

    from tdsymbols.document_symbol import document_symbols
    from tdsymbols.entities import Class, Field
    from tdsymbols.file_system import FileId, FileRange, TextRange
    from tdsymbols.line_index import LineIndex
    from tdsymbols.proto import document_symbol
    from tdsymbols.symbol_map import SymbolMap

    text = "class Foo {\n  int size;\n}\n"
    main = FileId(0)

    symbol_map = SymbolMap()
    foo = Class("Foo", FileRange(main, TextRange(6, 9)))
    foo.add_field(symbol_map, Field("size", FileRange(main, TextRange(18, 22))))
    symbol_map.add_class(foo)

    line_index = LineIndex(text)
    for symbol in document_symbols(symbol_map, main):
        print(document_symbol(line_index, symbol))

## What this package does not do

- It does not parse or evaluate TableGen source. A `SymbolMap` is filled by
  the caller through its `add_*` methods; there is no reading of include
  directives and no building of a `SourceRoot` from source text.
- It produces no diagnostics of its own; `group_by_file` only arranges
  diagnostics it is given.
- It offers no completion.
- It is not a language server and has no command: there is no message loop,
  no stdin/stdout transport and no request handling. `tdsymbols.proto` only
  converts values to and from protocol-shaped dictionaries.