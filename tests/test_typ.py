from types import SimpleNamespace

import pytest

from tdsymbols.ids import ClassId, DefId
from tdsymbols.typ import (
    BitsType,
    BitType,
    ClassType,
    CodeType,
    DagType,
    DefType,
    IntType,
    ListType,
    StringType,
    UnknownType,
)


@pytest.mark.parametrize(
    "typ, text",
    [
        (BitType(), "bit"),
        (IntType(), "int"),
        (StringType(), "string"),
        (DagType(), "dag"),
        (CodeType(), "code"),
        (UnknownType(), "unknown"),
        (BitsType(4), "bits<4>"),
        (ListType(IntType()), "list<int>"),
        (ClassType(ClassId(0), "Bar"), "Bar"),
        (DefType(DefId(0), "foo"), "foo"),
    ],
)
def test_display(typ, text):
    assert str(typ) == text


def test_equal_types_are_isa():
    assert IntType().isa({}, IntType())
    assert BitsType(4).isa({}, BitsType(4))


def test_different_primitives_are_not_isa():
    assert IntType().isa({}, BitType()) is False
    assert BitsType(4).isa({}, BitsType(8)) is False


def test_unknown_matches_everything():
    assert UnknownType().isa({}, DagType())
    assert IntType().isa({}, UnknownType())


def test_string_and_code_interchange():
    assert StringType().isa({}, CodeType())
    assert CodeType().isa({}, StringType())


def test_class_isa_parent_class():
    parent = ClassId(0)
    child = ClassId(1)
    symbols = {
        child: SimpleNamespace(parent_class_list=[parent]),
        parent: SimpleNamespace(parent_class_list=[]),
    }
    assert ClassType(child, "Child").isa(symbols, ClassType(parent, "Parent"))
    assert ClassType(parent, "Parent").isa(symbols, ClassType(child, "Child")) is False


def test_def_isa_parent_class():
    cls = ClassId(0)
    def_id = DefId(0)
    symbols = {def_id: SimpleNamespace(parent_class_list=[cls])}
    assert DefType(def_id, "foo").isa(symbols, ClassType(cls, "Foo"))
    assert DefType(def_id, "foo").isa(symbols, ClassType(ClassId(5), "Other")) is False


def test_list_isa_follows_items():
    assert ListType(StringType()).isa({}, ListType(CodeType()))
    assert ListType(IntType()).isa({}, ListType(StringType())) is False


def test_nested_list_equality():
    assert ListType(ListType(IntType())) == ListType(ListType(IntType()))
    assert ListType(IntType()) != ListType(BitType())