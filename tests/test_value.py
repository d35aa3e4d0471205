from types import SimpleNamespace

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
from tdsymbols.value import (
    BitsValue,
    BitValue,
    DagArgValue,
    DagValue,
    DefIdentifier,
    IntValue,
    ListValue,
    StringValue,
    Uninitialized,
)


def test_types_of_values():
    assert Uninitialized().typ() == UnknownType()
    assert BitValue(True).typ() == BitType()
    assert IntValue(3).typ() == IntType()
    assert StringValue("s").typ() == StringType()
    assert BitsValue(0, 4).typ() == BitsType(4)
    assert ListValue([IntValue(1)], IntType()).typ() == ListType(IntType())
    assert DagValue(DagArgValue(IntValue(1)), []).typ() == DagType()
    def_typ = DefType(DefId(0), "foo")
    assert DefIdentifier("foo", DefId(0), def_typ).typ() == def_typ


def test_display_of_scalars():
    assert str(Uninitialized()) == "?"
    assert str(BitValue(True)) == "true"
    assert str(BitValue(False)) == "false"
    assert str(IntValue(-7)) == "-7"
    assert str(StringValue("abc")) == '"abc"'
    assert str(DefIdentifier("foo", DefId(0), DefType(DefId(0), "foo"))) == "foo"


def test_display_of_bits_most_significant_first():
    assert str(BitsValue(5, 3)) == "{ 1, 0, 1 }"


def test_display_of_composites():
    assert str(ListValue([IntValue(1), IntValue(2)], IntType())) == "[ 1, 2 ]"
    assert str(DagArgValue(IntValue(1), "x")) == "1:$x"
    dag = DagValue(DagArgValue(StringValue("op")), [DagArgValue(IntValue(1))])
    assert str(dag) == f"({StringValue('op')} {IntValue(1)})"


def test_cast_to_same_type_returns_same_value():
    value = IntValue(4)
    assert value.cast_to({}, IntType()) is value
    assert StringValue("x").cast_to({}, CodeType()) == StringValue("x")


def test_cast_bit_to_int():
    assert BitValue(False).cast_to({}, IntType()) == IntValue(0)
    assert BitValue(True).cast_to({}, IntType()) == IntValue(1)


def test_cast_bits_to_bit():
    assert BitsValue(0, 4).cast_to({}, BitType()) == BitValue(False)
    assert BitsValue(6, 4).cast_to({}, BitType()) == BitValue(True)


def test_cast_int_to_bit_bits_and_string():
    assert IntValue(0).cast_to({}, BitType()) == BitValue(False)
    assert IntValue(9).cast_to({}, BitType()) == BitValue(True)
    assert IntValue(9).cast_to({}, BitsType(4)) == BitsValue(9, 4)
    assert IntValue(42).cast_to({}, StringType()) == StringValue("42")


def test_impossible_casts_give_none():
    assert StringValue("x").cast_to({}, IntType()) is None
    assert BitValue(True).cast_to({}, StringType()) is None
    assert ListValue([], IntType()).cast_to({}, DagType()) is None


def test_uninitialized_casts_to_anything():
    value = Uninitialized()
    assert value.cast_to({}, DagType()) is value


def test_def_identifier_casts_to_parent_class():
    cls = ClassId(0)
    def_id = DefId(0)
    symbols = {def_id: SimpleNamespace(parent_class_list=[cls])}
    value = DefIdentifier("foo", def_id, DefType(def_id, "foo"))
    assert value.cast_to(symbols, ClassType(cls, "Foo")) is value
    assert value.cast_to(symbols, ClassType(ClassId(3), "Other")) is None


def test_list_values_are_hashable_and_compare_by_content():
    a = ListValue([IntValue(1)], IntType())
    b = ListValue((IntValue(1),), IntType())
    assert a == b
    assert len({a, b}) == 1