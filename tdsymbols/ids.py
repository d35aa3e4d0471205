"""Typed identifiers for the symbols held in a symbol map."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Union


@total_ordering
@dataclass(frozen=True)
class _ArenaId:
    """Index of an entry in one of the symbol map's arenas."""

    index: int
    _rank: ClassVar[int] = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _ArenaId):
            return NotImplemented
        return (self._rank, self.index) < (other._rank, other.index)


@dataclass(frozen=True)
class ClassId(_ArenaId):
    """Identifier of a class."""

    _rank = 0


@dataclass(frozen=True)
class TemplateArgumentId(_ArenaId):
    """Identifier of a template argument."""

    _rank = 1


@dataclass(frozen=True)
class FieldId(_ArenaId):
    """Identifier of a class field."""

    _rank = 2


@dataclass(frozen=True)
class DefId(_ArenaId):
    """Identifier of a def."""

    _rank = 3


@dataclass(frozen=True)
class VariableId(_ArenaId):
    """Identifier of a variable."""

    _rank = 4


@dataclass(frozen=True)
class DefFieldId(_ArenaId):
    """Identifier of a field of a def."""

    _rank = 5


SymbolId = Union[ClassId, TemplateArgumentId, FieldId, DefId, VariableId, DefFieldId]