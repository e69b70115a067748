import pytest

from dtl.entity import loads
from dtl.functions import (
    Target,
    apply,
    concat,
    list_literal,
    lower,
    map_items,
    null_literal,
    number_literal,
    path,
    string_literal,
    upper,
)
from dtl.types import URI


def test_lower():
    assert lower(["a", "B", 1, None, []]) == ["a", "b"]


def test_lower_string():
    assert lower("HeLLo") == "hello"


def test_lower_other_gives_empty_list():
    assert lower(5) == []
    assert lower(URI("http://example.com")) == []


def test_upper():
    assert upper(["a", "B", 1, None, []]) == ["A", "B"]
    assert upper("abc") == "ABC"
    assert upper(None) == []


def test_concat():
    assert concat(["a", "B", 1, None, []]) == "aB"
    assert concat("a") == "a"


def test_concat_other_gives_empty_string():
    assert concat(None) == ""
    assert concat(3) == ""


def test_literals():
    assert list_literal(("a", 1)) == ["a", 1]
    assert null_literal() is None
    assert number_literal(7) == 7
    assert string_literal("x") == "x"


def test_path_single_key():
    assert path("foo", {"foo": [1, 2]}) == [1, 2]


def test_path_nested():
    assert path(["x", "y"], {"x": {"y": "D"}}) == "D"


def test_path_skips_non_string_keys():
    assert path(["x", 1, "y"], {"x": {"y": "D"}}) == "D"


def test_path_missing_gives_none():
    assert path(["x", "z"], {"x": {"y": "D"}}) is None
    assert path("x", ["not", "an", "object"]) is None
    assert path(3, {"x": 1}) is None


def test_path_empty_list_returns_value():
    value = {"a": 1}
    assert path([], value) == value


def test_path_on_decoded_entity():
    source = loads('{"link": {"to": "~rhttp://example.com/"}}')
    assert path(["link", "to"], source) == URI("http://example.com/")


def test_map_items():
    assert map_items(upper, ["a", "B", "c"]) == ["A", "B", "C"]


def test_map_items_non_list_gives_none():
    assert map_items(upper, "abc") is None


def test_apply_flattens():
    assert apply(lambda v: [v, v], [1, 2]) == [1, 1, 2, 2]


def test_apply_non_list_gives_empty():
    assert apply(lambda v: [v], {"a": 1}) == []


def test_target_output_contains_target():
    target = Target()
    target.add("a", 1)
    target.add("b", "x")
    assert target.output() == [{"a": 1, "b": "x"}]


def test_target_filter_drops_target():
    target = Target()
    target.add("a", 1)
    target.filter()
    assert target.output() == []


def test_target_create_list_and_single():
    target = Target()
    target.create([{"a": 1}, {"a": 2}])
    target.create({"a": 3})
    target.add("main", True)
    assert target.output() == [{"a": 1}, {"a": 2}, {"a": 3}, {"main": True}]


def test_target_output_is_a_copy():
    target = Target()
    target.add("items", [1])
    first = target.output()
    first[0]["items"].append(2)
    assert target.output() == [{"items": [1]}]


@pytest.mark.parametrize("value", [None, 0, "s"])
def test_target_create_scalars(value):
    target = Target()
    target.create(value)
    target.filter()
    assert target.output() == [value]