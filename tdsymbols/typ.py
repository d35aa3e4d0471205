"""Types of values and expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tdsymbols.ids import ClassId, DefId


class Type:
    """Base of all types."""

    __slots__ = ()

    def isa(self, symbol_map: Any, other: Type) -> bool:
        """Return whether a value of this type may be used where other is expected."""
        if self == other:
            return True
        if isinstance(self, UnknownType) or isinstance(other, UnknownType):
            return True
        if {type(self), type(other)} == {StringType, CodeType}:
            return True
        if isinstance(self, ClassType) and isinstance(other, ClassType):
            return other.class_id in symbol_map[self.class_id].parent_class_list
        if isinstance(self, DefType) and isinstance(other, ClassType):
            return other.class_id in symbol_map[self.def_id].parent_class_list
        if isinstance(self, ListType) and isinstance(other, ListType):
            return self.item.isa(symbol_map, other.item)
        return False


@dataclass(frozen=True)
class BitType(Type):
    def __str__(self) -> str:
        return "bit"


@dataclass(frozen=True)
class IntType(Type):
    def __str__(self) -> str:
        return "int"


@dataclass(frozen=True)
class StringType(Type):
    def __str__(self) -> str:
        return "string"


@dataclass(frozen=True)
class DagType(Type):
    def __str__(self) -> str:
        return "dag"


@dataclass(frozen=True)
class BitsType(Type):
    width: int

    def __str__(self) -> str:
        return f"bits<{self.width}>"


@dataclass(frozen=True)
class ListType(Type):
    item: Type

    def __str__(self) -> str:
        return f"list<{self.item}>"


@dataclass(frozen=True)
class ClassType(Type):
    class_id: ClassId
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DefType(Type):
    def_id: DefId
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CodeType(Type):
    def __str__(self) -> str:
        return "code"


@dataclass(frozen=True)
class UnknownType(Type):
    """Type of an uninitialized value."""

    def __str__(self) -> str:
        return "unknown"