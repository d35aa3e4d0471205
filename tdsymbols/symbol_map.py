"""Storage of all symbols, indexed by name, by file and by position."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from tdsymbols.entities import (
    Class,
    Def,
    DefField,
    Field,
    Symbol,
    TemplateArgument,
    Variable,
)
from tdsymbols.file_system import FileId, FilePosition, FileRange, TextRange
from tdsymbols.ids import (
    ClassId,
    DefFieldId,
    DefId,
    FieldId,
    SymbolId,
    TemplateArgumentId,
    VariableId,
)

_Intervals = dict[tuple[int, int], SymbolId]


@dataclass
class SymbolMap:
    """Arenas of symbols with lookup by name, file and text position."""

    _classes: list[Class] = field(default_factory=list)
    _template_args: list[TemplateArgument] = field(default_factory=list)
    _fields: list[Field] = field(default_factory=list)
    _defs: list[Def] = field(default_factory=list)
    _variables: list[Variable] = field(default_factory=list)
    _def_fields: list[DefField] = field(default_factory=list)

    _name_to_class: dict[str, ClassId] = field(default_factory=dict)
    _name_to_def: dict[str, DefId] = field(default_factory=dict)

    _file_to_symbols: dict[FileId, list[SymbolId]] = field(default_factory=dict)
    _pos_to_symbol: dict[FileId, _Intervals] = field(default_factory=dict)

    def _arena(self, symbol_id: SymbolId) -> tuple[list, str]:
        arenas = {
            ClassId: (self._classes, "class"),
            TemplateArgumentId: (self._template_args, "template argument"),
            FieldId: (self._fields, "field"),
            DefId: (self._defs, "def"),
            VariableId: (self._variables, "variable"),
            DefFieldId: (self._def_fields, "def field"),
        }
        try:
            return arenas[type(symbol_id)]
        except KeyError:
            raise TypeError(f"not a symbol id: {symbol_id!r}") from None

    def __getitem__(self, symbol_id: SymbolId) -> Symbol:
        """Return the symbol an id refers to; raises KeyError for an invalid id."""
        arena, label = self._arena(symbol_id)
        if not 0 <= symbol_id.index < len(arena):
            raise KeyError(f"invalid {label} id: {symbol_id!r}")
        return arena[symbol_id.index]

    def find_class(self, name: str) -> Optional[ClassId]:
        return self._name_to_class.get(name)

    def find_def(self, name: str) -> Optional[DefId]:
        return self._name_to_def.get(name)

    def iter_symbols_in_file(self, file_id: FileId) -> Optional[Iterator[SymbolId]]:
        """Iterate the top-level symbols of a file, or return None if it has none."""
        symbols = self._file_to_symbols.get(file_id)
        if symbols is None:
            return None
        return iter(list(symbols))

    def iter_symbols_in_range(
        self, loc: FileRange
    ) -> Optional[Iterator[tuple[FileRange, SymbolId]]]:
        """Iterate the symbol occurrences overlapping a range, ordered by position."""
        intervals = self._pos_to_symbol.get(loc.file)
        if intervals is None:
            return None
        query = loc.range
        return (
            (FileRange(loc.file, TextRange(start, end)), symbol_id)
            for (start, end), symbol_id in sorted(intervals.items())
            if start < query.end and query.start < end
        )

    def find_symbol_at(self, pos: FilePosition) -> Optional[Symbol]:
        """Return the first symbol whose occurrence covers a position."""
        intervals = self._pos_to_symbol.get(pos.file)
        if intervals is None:
            return None
        for (start, end), symbol_id in sorted(intervals.items()):
            if start <= pos.position < end:
                return self[symbol_id]
        return None

    def _register_in_file(self, file_id: FileId, symbol_id: SymbolId) -> None:
        self._file_to_symbols.setdefault(file_id, []).append(symbol_id)

    def _register_position(self, loc: FileRange, symbol_id: SymbolId) -> None:
        if loc.range.is_empty():
            return
        intervals = self._pos_to_symbol.setdefault(loc.file, {})
        intervals[(loc.range.start, loc.range.end)] = symbol_id

    def add_class(self, class_: Class) -> ClassId:
        class_id = ClassId(len(self._classes))
        self._classes.append(class_)
        self._name_to_class[class_.name] = class_id
        self._register_in_file(class_.define_loc.file, class_id)
        self._register_position(class_.define_loc, class_id)
        return class_id

    def add_template_argument(self, template_arg: TemplateArgument) -> TemplateArgumentId:
        template_arg_id = TemplateArgumentId(len(self._template_args))
        self._template_args.append(template_arg)
        self._register_position(template_arg.define_loc, template_arg_id)
        return template_arg_id

    def add_field(self, field: Field) -> FieldId:
        field_id = FieldId(len(self._fields))
        self._fields.append(field)
        self._register_position(field.define_loc, field_id)
        return field_id

    def add_def(self, def_: Def) -> DefId:
        def_id = DefId(len(self._defs))
        self._defs.append(def_)
        self._name_to_def[def_.name] = def_id
        self._register_in_file(def_.define_loc.file, def_id)
        self._register_position(def_.define_loc, def_id)
        return def_id

    def replace_def(self, def_id: DefId, new_def: Def) -> None:
        """Put new_def in place of a def of the same name, keeping its references."""
        old_def = self[def_id]
        if old_def.name != new_def.name:
            raise ValueError(
                f"cannot replace def {old_def.name!r} with def {new_def.name!r}"
            )
        new_def.reference_locs = list(old_def.reference_locs)
        self._defs[def_id.index] = new_def

    def add_reference(self, symbol_id: SymbolId, reference_loc: FileRange) -> None:
        self[symbol_id].add_reference(reference_loc)
        self._register_position(reference_loc, symbol_id)

    def add_variable(self, variable: Variable) -> VariableId:
        variable_id = VariableId(len(self._variables))
        self._variables.append(variable)
        self._register_in_file(variable.define_loc.file, variable_id)
        return variable_id

    def add_def_field(self, def_field: DefField) -> DefFieldId:
        def_field_id = DefFieldId(len(self._def_fields))
        self._def_fields.append(def_field)
        self._register_position(def_field.define_loc, def_field_id)
        return def_field_id