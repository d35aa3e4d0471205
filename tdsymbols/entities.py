"""Symbols held by a symbol map: classes, defs, their fields and variables."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from tdsymbols.file_system import FileRange
from tdsymbols.ids import DefFieldId, FieldId, SymbolId, TemplateArgumentId
from tdsymbols.typ import Type
from tdsymbols.value import Value


class Symbol:
    """Base of everything that has a name, a definition site and references."""

    __slots__ = ()

    name: str
    define_loc: FileRange
    reference_locs: list[FileRange]

    def add_reference(self, reference_loc: FileRange) -> None:
        """Record a place where this symbol is referred to."""
        self.reference_locs.append(reference_loc)


@dataclass
class TemplateArgument(Symbol):
    """A template argument of a class."""

    name: str
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)


@dataclass
class Field(Symbol):
    """A field declared in a class body."""

    name: str
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)


@dataclass
class Class(Symbol):
    """A class with its template arguments, fields and parents."""

    name: str
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)
    name_to_template_arg: dict[str, TemplateArgumentId] = field(default_factory=dict)
    name_to_field: dict[str, FieldId] = field(default_factory=dict)
    parent_class_list: list = field(default_factory=list)

    def add_template_arg(
        self, symbol_map: Any, template_arg: TemplateArgument
    ) -> TemplateArgumentId:
        """Store a template argument in the symbol map and attach it to this class."""
        name = template_arg.name
        template_arg_id = symbol_map.add_template_argument(template_arg)
        self.name_to_template_arg[name] = template_arg_id
        return template_arg_id

    def iter_template_arg(self) -> Iterator[TemplateArgumentId]:
        yield from self.name_to_template_arg.values()

    def find_template_arg(self, name: str) -> Optional[TemplateArgumentId]:
        return self.name_to_template_arg.get(name)

    def add_field(self, symbol_map: Any, new_field: Field) -> FieldId:
        """Store a field in the symbol map and attach it to this class."""
        name = new_field.name
        field_id = symbol_map.add_field(new_field)
        self.name_to_field[name] = field_id
        return field_id

    def iter_field(self) -> Iterator[FieldId]:
        yield from self.name_to_field.values()

    def find_field(self, name: str) -> Optional[FieldId]:
        return self.name_to_field.get(name)


@dataclass
class DefField(Symbol):
    """A field of a def, with its type and evaluated value."""

    name: str
    typ: Type
    value: Value
    parent: SymbolId
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)


@dataclass
class Def(Symbol):
    """A concrete record defined with `def`."""

    name: str
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)
    name_to_def_field: dict[str, DefFieldId] = field(default_factory=dict)
    parent_class_list: list = field(default_factory=list)

    def iter_field(self) -> Iterator[DefFieldId]:
        yield from self.name_to_def_field.values()

    def find_field(self, name: str) -> Optional[DefFieldId]:
        return self.name_to_def_field.get(name)


@dataclass
class Variable(Symbol):
    """A named value such as one bound by `defvar`."""

    name: str
    value: Value
    define_loc: FileRange
    reference_locs: list[FileRange] = field(default_factory=list)