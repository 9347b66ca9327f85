from unittest.mock import patch

import pytest

from lumicore import utils


def test_limit_clamps_both_sides():
    assert utils.limit(0, 5, 10) == 5
    assert utils.limit(0, -5, 10) == 0
    assert utils.limit(0, 50, 10) == 10


def test_limit_uses_value_type():
    result = utils.limit(0.5, 3, 10.7)
    assert result == 3
    assert isinstance(result, int)
    assert utils.limit(0.0, 20, 10.7) == 10


def test_limit_to_one():
    assert utils.limit_to_one(-0.5) == 0.0
    assert utils.limit_to_one(0.25) == 0.25
    assert utils.limit_to_one(1.5) == 1.0


def test_append_unique():
    items = ["a"]
    assert utils.append_unique(items, "b") is True
    assert utils.append_unique(items, "a") is False
    assert items == ["a", "b"]


def test_remove_unique_removes_first_only():
    items = ["a", "b", "a"]
    utils.remove_unique(items, "a")
    assert items == ["b", "a"]
    utils.remove_unique(items, "z")
    assert items == ["b", "a"]


def test_real_mod_negative_value():
    assert utils.real_mod(-1.0, 3.0) == pytest.approx(2.0)


@pytest.mark.parametrize("value", [-7.5, -1.0, 0.0, 2.25, 9.0])
def test_real_mod_in_range(value):
    result = utils.real_mod(value, 3.0)
    assert 0.0 <= result < 3.0


def test_int_mod_negative_value():
    assert utils.int_mod(-1, 3) == 2


@pytest.mark.parametrize("value", range(-10, 11))
def test_int_mod_matches_positive_range(value):
    result = utils.int_mod(value, 4)
    assert 0 <= result < 4
    assert (value - result) % 4 == 0


def test_int_mod_zero_base():
    with pytest.raises(ZeroDivisionError):
        utils.int_mod(3, 0)


def test_almost_median_odd_and_even():
    assert utils.almost_median([3, 1, 2]) == 2
    assert utils.almost_median([4, 1, 3, 2]) == 3


def test_almost_median_empty():
    with pytest.raises(ValueError):
        utils.almost_median([])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.5", 2.5),
        ("one", 1.0),
        ("eins", 1.0),
        ("fünf", 5.0),
        ("twelve", 12.0),
        ("zwölf", 12.0),
        ("0", 0.0),
        ("-3", 0.0),
        ("thirteen", 0.0),
        ("", 0.0),
    ],
)
def test_string_to_double(text, expected):
    assert utils.string_to_double(text) == expected


def test_is_equal_insensitive():
    assert utils.is_equal_insensitive("Hello", "hELLO") is True
    assert utils.is_equal_insensitive("Hello", "World") is False


def test_serialize_string_list_wire_format():
    assert utils.serialize_string_list(["a"]) == b"\x00\x00\x00\x01\x00\x00\x00\x02\x00a"


def test_string_list_round_trip():
    items = ["alpha", "", "zwölf", "snow \u2603", "\U0001F600"]
    data = utils.serialize_string_list(items)
    assert utils.deserialize_string_list(data) == items


def test_deserialize_string_list_truncated():
    data = utils.serialize_string_list(["abc"])
    with pytest.raises(ValueError):
        utils.deserialize_string_list(data[:-1])


def test_deserialize_null_string_is_empty():
    data = b"\x00\x00\x00\x01\xff\xff\xff\xff"
    assert utils.deserialize_string_list(data) == [""]


def test_cbor_map_round_trip():
    mapping = {"name": "block", "value": 0.5, "count": 3, "flag": True}
    data = utils.serialize_cbor_map(mapping)
    assert utils.deserialize_cbor_map(data) == mapping


def test_cbor_map_length_prefix():
    data = utils.serialize_cbor_map({"a": 1})
    assert int.from_bytes(data[:4], "big") == len(data) - 4


def test_cbor_non_map_gives_empty_dict():
    import cbor2

    payload = cbor2.dumps([1, 2, 3])
    data = len(payload).to_bytes(4, "big") + payload
    assert utils.deserialize_cbor_map(data) == {}


def test_base64_round_trip():
    data = bytes(range(256))
    assert utils.from_base64(utils.to_base64(data)) == data


def test_from_base64_without_padding():
    encoded = utils.to_base64(b"ab").rstrip("=")
    assert utils.from_base64(encoded) == b"ab"


def test_diff_is_antisymmetric():
    assert utils.diff(8.0, 3.0) == -utils.diff(3.0, 8.0)
    assert utils.diff(4.0, 4.0) == 0.0


def test_elapsed_sec_since_is_not_negative():
    start = utils.now()
    assert utils.elapsed_sec_since(start) >= 0.0


def test_stopwatch_lap_and_elapsed():
    with patch("time.time", side_effect=[10.0, 12.0, 12.0]):
        watch = utils.Stopwatch()
        assert watch.lap() == 2.0
        assert watch.elapsed() == 0.0