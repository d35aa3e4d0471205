"""Evaluated values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from tdsymbols.ids import DefId
from tdsymbols.typ import (
    BitsType,
    BitType,
    DagType,
    IntType,
    ListType,
    StringType,
    Type,
    UnknownType,
)


class Value:
    """Base of all values."""

    __slots__ = ()

    def typ(self) -> Type:
        raise NotImplementedError

    def cast_to(self, symbol_map: Any, typ: Type) -> Optional[Value]:
        """Return this value converted to typ, or None if it cannot be."""
        if self.typ().isa(symbol_map, typ):
            return self
        if isinstance(self, BitValue) and isinstance(typ, IntType):
            return IntValue(int(self.value))
        if isinstance(self, BitsValue) and isinstance(typ, BitType):
            return BitValue(self.value != 0)
        if isinstance(self, IntValue):
            if isinstance(typ, BitType):
                return BitValue(self.value != 0)
            if isinstance(typ, BitsType):
                return BitsValue(self.value, typ.width)
            if isinstance(typ, StringType):
                return StringValue(str(self.value))
        return None


@dataclass(frozen=True)
class Uninitialized(Value):
    def typ(self) -> Type:
        return UnknownType()

    def __str__(self) -> str:
        return "?"


@dataclass(frozen=True)
class BitValue(Value):
    value: bool

    def typ(self) -> Type:
        return BitType()

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntValue(Value):
    value: int

    def typ(self) -> Type:
        return IntType()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringValue(Value):
    value: str

    def typ(self) -> Type:
        return StringType()

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class BitsValue(Value):
    """A bit vector held as an integer, most significant bit first when shown."""

    value: int
    length: int

    def typ(self) -> Type:
        return BitsType(self.length)

    def __str__(self) -> str:
        bits = ", ".join(
            str((self.value >> (self.length - i - 1)) & 1) for i in range(self.length)
        )
        return f"{{ {bits} }}"


@dataclass(frozen=True)
class ListValue(Value):
    values: tuple[Value, ...]
    item_typ: Type

    def __init__(self, values: Iterable[Value], item_typ: Type) -> None:
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "item_typ", item_typ)

    def typ(self) -> Type:
        return ListType(self.item_typ)

    def __str__(self) -> str:
        return f"[ {', '.join(str(v) for v in self.values)} ]"


@dataclass(frozen=True)
class DagArgValue:
    """An argument of a dag, optionally named."""

    value: Value
    var_name: Optional[str] = None

    def __str__(self) -> str:
        if self.var_name is not None:
            return f"{self.value}:${self.var_name}"
        return str(self.value)


@dataclass(frozen=True)
class DagValue(Value):
    op: DagArgValue
    args: tuple[DagArgValue, ...]

    def __init__(self, op: DagArgValue, args: Iterable[DagArgValue]) -> None:
        object.__setattr__(self, "op", op)
        object.__setattr__(self, "args", tuple(args))

    def typ(self) -> Type:
        return DagType()

    def __str__(self) -> str:
        return f"({self.op} {', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class DefIdentifier(Value):
    name: str
    def_id: DefId
    def_typ: Type

    def typ(self) -> Type:
        return self.def_typ

    def __str__(self) -> str:
        return self.name