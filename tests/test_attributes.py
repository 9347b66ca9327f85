import pytest

from lumicore.attributes import (
    BoolAttribute,
    DoubleAttribute,
    IntegerAttribute,
    ObjectWithAttributes,
    SmartAttribute,
    StringAttribute,
    StringListAttribute,
    VariantListAttribute,
)
from lumicore.utils import deserialize_cbor_map, serialize_cbor_map, serialize_string_list


@pytest.fixture
def owner():
    return ObjectWithAttributes(parent="block")


def _counter(attribute):
    calls = []
    attribute.value_changed.connect(lambda: calls.append(1))
    return calls


def test_attr_finds_registered_attribute(owner):
    speed = DoubleAttribute(owner, "speed")
    assert owner.attr("speed") is speed


def test_attr_missing_returns_none(owner):
    assert owner.attr("nothing") is None


def test_attribute_checks_kind(owner):
    count = IntegerAttribute(owner, "count")
    assert owner.attribute("count", IntegerAttribute) is count
    assert owner.attribute("count", DoubleAttribute) is None
    assert owner.attribute("missing", IntegerAttribute) is None


def test_attribute_takes_owner_parent_as_block(owner):
    attribute = StringAttribute(owner, "label")
    assert attribute.block == "block"


def test_attribute_without_owner_uses_parent_and_is_unregistered(owner):
    attribute = BoolAttribute(None, "flag", True, parent="other")
    assert attribute.block == "other"
    assert owner.attr("flag") is None
    assert attribute.value is True


def test_smart_attribute_is_abstract():
    with pytest.raises(TypeError):
        SmartAttribute(None, "x")


def test_double_defaults_clamp_to_unit_range(owner):
    attribute = DoubleAttribute(owner, "x")
    attribute.value = 2.0
    assert attribute.value == 1.0
    attribute.value = -3.0
    assert attribute.value == 0.0


def test_double_initial_value_not_clamped(owner):
    attribute = DoubleAttribute(owner, "x", 5.0)
    assert float(attribute) == 5.0


def test_double_emits_only_on_change(owner):
    attribute = DoubleAttribute(owner, "x", 0.5)
    calls = _counter(attribute)
    attribute.value = 0.5
    assert calls == []
    attribute.value = 0.25
    attribute.value = 0.25
    assert len(calls) == 1


def test_double_clamped_value_equal_to_current_emits_nothing(owner):
    attribute = DoubleAttribute(owner, "x", 1.0)
    calls = _counter(attribute)
    attribute.value = 7.0
    assert calls == []
    assert attribute.value == 1.0


def test_min_max_setters_emit_and_keep_value(owner):
    attribute = DoubleAttribute(owner, "x", 0.8)
    changes = []
    attribute.max_changed.connect(lambda: changes.append("max"))
    attribute.min_changed.connect(lambda: changes.append("min"))
    attribute.max = 0.5
    attribute.min = 0.1
    assert changes == ["max", "min"]
    assert attribute.value == 0.8
    attribute.value = 0.9
    assert attribute.value == 0.5


def test_integer_default_maximum(owner):
    attribute = IntegerAttribute(owner, "n")
    attribute.value = 150
    assert int(attribute) == 100
    attribute.value = -5
    assert attribute.value == 0


def test_integer_custom_range(owner):
    attribute = IntegerAttribute(owner, "n", 3, -10, 10)
    attribute.value = -20
    assert attribute.value == -10


def test_string_and_bool_conversions(owner):
    text = StringAttribute(owner, "t", "hello")
    flag = BoolAttribute(owner, "f", True)
    assert str(text) == "hello"
    assert bool(flag) is True
    calls = _counter(text)
    text.value = "hello"
    text.value = "world"
    assert calls == [1]
    assert text.value == "world"


def test_round_trip_through_state(owner):
    DoubleAttribute(owner, "d", 0.75)
    IntegerAttribute(owner, "i", 42)
    StringAttribute(owner, "s", "name")
    BoolAttribute(owner, "b", True)
    StringListAttribute(owner, "sl", ["a", "bä"])
    VariantListAttribute(owner, "vl", [1, "two", 3.5])

    state = {}
    owner.write_attributes_to(state)
    restored_state = deserialize_cbor_map(serialize_cbor_map(state))

    other = ObjectWithAttributes(None)
    d = DoubleAttribute(other, "d")
    i = IntegerAttribute(other, "i")
    s = StringAttribute(other, "s")
    b = BoolAttribute(other, "b")
    sl = StringListAttribute(other, "sl")
    vl = VariantListAttribute(other, "vl")
    other.read_attributes_from(restored_state)

    assert d.value == 0.75
    assert i.value == 42
    assert s.value == "name"
    assert b.value is True
    assert sl.value == ["a", "bä"]
    assert vl.value == [1, "two", 3.5]


def test_non_persistent_attribute_is_not_written(owner):
    IntegerAttribute(owner, "kept", 5)
    IntegerAttribute(owner, "skipped", 6, persistent=False)
    state = {}
    owner.write_attributes_to(state)
    assert state == {"kept": 5}


def test_non_persistent_attribute_is_not_read(owner):
    attribute = IntegerAttribute(owner, "skipped", 6, persistent=False)
    owner.read_attributes_from({"skipped": 9})
    assert attribute.value == 6


def test_missing_keys_read_as_defaults(owner):
    d = DoubleAttribute(owner, "d", 0.5)
    i = IntegerAttribute(owner, "i", 50)
    s = StringAttribute(owner, "s", "x")
    b = BoolAttribute(owner, "b", True)
    sl = StringListAttribute(owner, "sl", ["x"])
    vl = VariantListAttribute(owner, "vl", [1])
    owner.read_attributes_from({})
    assert d.value == 0.0
    assert i.value == 0
    assert s.value == ""
    assert b.value is False
    assert sl.value == []
    assert vl.value == []


def test_integer_reads_float_truncated(owner):
    attribute = IntegerAttribute(owner, "i")
    attribute.read_from({"i": 3.7})
    assert attribute.value == 3


def test_double_reads_integer(owner):
    attribute = DoubleAttribute(owner, "d", 0.0, 0.0, 10.0)
    attribute.read_from({"d": 2})
    assert attribute.value == 2.0


def test_wrong_types_read_as_defaults(owner):
    b = BoolAttribute(owner, "b", True)
    s = StringAttribute(owner, "s", "x")
    b.read_from({"b": 1})
    s.read_from({"s": 5})
    assert b.value is False
    assert s.value == ""


def test_string_list_is_written_as_binary(owner):
    attribute = StringListAttribute(owner, "sl", ["one", "two"])
    state = {}
    attribute.write_to(state)
    assert state["sl"] == serialize_string_list(["one", "two"])


def test_string_list_edits_emit(owner):
    attribute = StringListAttribute(owner, "sl", ["a", "b", "a"])
    calls = _counter(attribute)
    attribute.append("c")
    attribute.remove_one("a")
    assert attribute.value == ["b", "a", "c"]
    attribute.remove_one("zzz")
    assert attribute.value == ["b", "a", "c"]
    attribute.clear()
    assert attribute.value == []
    assert len(calls) == 4


def test_list_set_equal_does_not_emit(owner):
    attribute = VariantListAttribute(owner, "vl", [1, 2])
    calls = _counter(attribute)
    attribute.value = [1, 2]
    assert calls == []
    attribute.value = (3,)
    assert attribute.value == [3]
    assert len(calls) == 1


def test_variant_list_container_protocol(owner):
    attribute = VariantListAttribute(owner, "vl", ["x", 2])
    assert len(attribute) == 2
    assert 2 in attribute
    assert list(attribute) == ["x", 2]
    attribute.remove_one(2)
    assert 2 not in attribute


def test_variant_list_reads_non_list_as_empty(owner):
    attribute = VariantListAttribute(owner, "vl", [1])
    attribute.read_from({"vl": "text"})
    assert attribute.value == []