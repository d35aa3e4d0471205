"""Unevaluated expressions as they appear in source text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tdsymbols.file_system import FileRange
from tdsymbols.ids import ClassId, SymbolId, TemplateArgumentId
from tdsymbols.typ import (
    BitsType,
    BitType,
    ClassType,
    CodeType,
    DagType,
    IntType,
    ListType,
    StringType,
    Type,
    UnknownType,
)

Replacement = Mapping[TemplateArgumentId, "Expr"]


def _join(items) -> str:
    return ", ".join(str(item) for item in items)


class BangOperatorOp(Enum):
    """Bang operators, valued by their spelling in source text."""

    CONCAT = "!concat"
    ADD = "!add"
    SUB = "!sub"
    MUL = "!mul"
    DIV = "!div"
    NOT = "!not"
    LOG2 = "!log2"
    AND = "!and"
    OR = "!or"
    XOR = "!xor"
    SRA = "!sra"
    SRL = "!srl"
    SHL = "!shl"
    LISTCONCAT = "!listconcat"
    LISTSPLAT = "!listsplat"
    STRCONCAT = "!strconcat"
    INTERLEAVE = "!interleave"
    SUBSTR = "!substr"
    FIND = "!find"
    CAST = "!cast"
    SUBST = "!subst"
    FOREACH = "!foreach"
    FILTER = "!filter"
    FOLDL = "!foldl"
    HEAD = "!head"
    TAIL = "!tail"
    SIZE = "!size"
    EMPTY = "!empty"
    IF = "!if"
    COND = "!cond"
    EQ = "!eq"
    ISA = "!isa"
    DAG = "!dag"
    NE = "!ne"
    LE = "!le"
    LT = "!lt"
    GE = "!ge"
    GT = "!gt"
    SETDAGOP = "!setdagop"
    GETDAGOP = "!getdagop"
    EXISTS = "!exists"
    LISTREMOVE = "!listremove"
    TOLOWER = "!tolower"
    TOUPPER = "!toupper"
    RANGE = "!range"
    GETDAGARG = "!getdagarg"
    GETDAGNAME = "!getdagname"
    SETDAGARG = "!setdagarg"
    SETDAGNAME = "!setdagname"

    def __str__(self) -> str:
        return self.value


class Expr:
    """Base of all expressions."""

    __slots__ = ()
    loc: FileRange

    @classmethod
    def uninitialized(cls, loc: FileRange) -> Expr:
        """Return the expression `?` located at loc."""
        return Simple(loc, UninitializedExpr(loc))

    def replaced(self, replacement: Replacement) -> Expr:
        """Return this expression with template arguments substituted."""
        raise NotImplementedError

    def typ(self) -> Type:
        raise NotImplementedError


@dataclass(frozen=True)
class Simple(Expr):
    loc: FileRange
    value: SimpleExpr

    def replaced(self, replacement: Replacement) -> Expr:
        value = self.value
        if isinstance(value, IdentifierExpr) and isinstance(
            value.symbol_id, TemplateArgumentId
        ):
            substitute = replacement.get(value.symbol_id)
            return substitute if substitute is not None else self
        return Simple(self.loc, value.replaced(replacement))

    def typ(self) -> Type:
        return self.value.typ()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FieldSuffix(Expr):
    loc: FileRange
    expr: Expr
    field: str
    field_typ: Type

    def replaced(self, replacement: Replacement) -> Expr:
        return FieldSuffix(
            self.loc, self.expr.replaced(replacement), self.field, self.field_typ
        )

    def typ(self) -> Type:
        return self.field_typ

    def __str__(self) -> str:
        return f"{self.expr}.{self.field}"


@dataclass(frozen=True)
class Paste(Expr):
    loc: FileRange
    lhs: Expr
    rhs: Expr

    def replaced(self, replacement: Replacement) -> Expr:
        return Paste(
            self.loc, self.lhs.replaced(replacement), self.rhs.replaced(replacement)
        )

    def typ(self) -> Type:
        return StringType()

    def __str__(self) -> str:
        return f"{self.lhs} # {self.rhs}"


class SimpleExpr:
    """Base of the simple expressions."""

    __slots__ = ()
    loc: FileRange

    def typ(self) -> Type:
        raise NotImplementedError

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        """Return this expression with template arguments in its parts substituted."""
        return self


@dataclass(frozen=True)
class UninitializedExpr(SimpleExpr):
    loc: FileRange

    def typ(self) -> Type:
        return UnknownType()

    def __str__(self) -> str:
        return "?"


@dataclass(frozen=True)
class BooleanExpr(SimpleExpr):
    loc: FileRange
    value: bool

    def typ(self) -> Type:
        return BitType()

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntExpr(SimpleExpr):
    loc: FileRange
    value: int

    def typ(self) -> Type:
        return IntType()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringExpr(SimpleExpr):
    loc: FileRange
    value: str

    def typ(self) -> Type:
        return StringType()

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class CodeExpr(SimpleExpr):
    loc: FileRange
    value: str

    def typ(self) -> Type:
        return CodeType()

    def __str__(self) -> str:
        return f"[{{ {self.value} }}]"


@dataclass(frozen=True)
class BitsExpr(SimpleExpr):
    loc: FileRange
    bits: tuple[Expr, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", tuple(self.bits))

    def typ(self) -> Type:
        return BitsType(len(self.bits))

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return BitsExpr(self.loc, tuple(b.replaced(replacement) for b in self.bits))

    def __str__(self) -> str:
        return f"{{ {_join(self.bits)} }}"


@dataclass(frozen=True)
class ListExpr(SimpleExpr):
    loc: FileRange
    values: tuple[Expr, ...]
    item_typ: Type

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def typ(self) -> Type:
        return ListType(self.item_typ)

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return ListExpr(
            self.loc, tuple(v.replaced(replacement) for v in self.values), self.item_typ
        )

    def __str__(self) -> str:
        return f"[ {_join(self.values)} ]"


@dataclass(frozen=True)
class DagArg:
    """An argument of a dag expression, optionally named."""

    value: Expr
    var_name: Optional[str] = None

    def replaced(self, replacement: Replacement) -> DagArg:
        return DagArg(self.value.replaced(replacement), self.var_name)

    def __str__(self) -> str:
        if self.var_name is not None:
            return f"{self.value}:${self.var_name}"
        return str(self.value)


@dataclass(frozen=True)
class DagExpr(SimpleExpr):
    loc: FileRange
    op: DagArg
    args: tuple[DagArg, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def typ(self) -> Type:
        return DagType()

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return DagExpr(
            self.loc,
            self.op.replaced(replacement),
            tuple(a.replaced(replacement) for a in self.args),
        )

    def __str__(self) -> str:
        return f"({self.op} {_join(self.args)})"


@dataclass(frozen=True)
class IdentifierExpr(SimpleExpr):
    loc: FileRange
    name: str
    symbol_id: SymbolId
    symbol_typ: Type

    def typ(self) -> Type:
        return self.symbol_typ

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassValueExpr(SimpleExpr):
    loc: FileRange
    name: str
    class_id: ClassId
    args: tuple[Expr, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def typ(self) -> Type:
        return ClassType(self.class_id, self.name)

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return ClassValueExpr(
            self.loc,
            self.name,
            self.class_id,
            tuple(a.replaced(replacement) for a in self.args),
        )

    def __str__(self) -> str:
        return f"{self.name}<{_join(self.args)}>"


@dataclass(frozen=True)
class BangOperatorExpr(SimpleExpr):
    loc: FileRange
    op: BangOperatorOp
    args: tuple[Expr, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def typ(self) -> Type:
        return UnknownType()

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return BangOperatorExpr(
            self.loc, self.op, tuple(a.replaced(replacement) for a in self.args)
        )

    def __str__(self) -> str:
        return f"{self.op}({_join(self.args)})"


@dataclass(frozen=True)
class CondClause:
    """One `condition: value` clause of a !cond operator."""

    condition: Expr
    value: Expr

    def replaced(self, replacement: Replacement) -> CondClause:
        return CondClause(
            self.condition.replaced(replacement), self.value.replaced(replacement)
        )

    def __str__(self) -> str:
        return f"{self.condition}: {self.value}"


@dataclass(frozen=True)
class CondOperatorExpr(SimpleExpr):
    loc: FileRange
    clauses: tuple[CondClause, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "clauses", tuple(self.clauses))

    def typ(self) -> Type:
        return UnknownType()

    def replaced(self, replacement: Replacement) -> SimpleExpr:
        return CondOperatorExpr(
            self.loc, tuple(c.replaced(replacement) for c in self.clauses)
        )

    def __str__(self) -> str:
        return f"!cond({_join(self.clauses)})"