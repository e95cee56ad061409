"""
Tests for value classification, the structural matchers and the
matcher casting policy.
"""

from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from hamcrest import equal_to, greater_than
from hamcrest.core.string_description import StringDescription

from object_asserter import Failure, IncompatibleMatcherType, ValueKind, classify
from object_asserter.assertions import (
    a_non_empty_string,
    an_array,
    an_object,
    array_with_size,
    cast_matcher,
    has_field,
    has_identical_key,
)
from object_asserter.assertions.models import field_names, format_value


@dataclass
class Point:
    x: int
    y: int


@dataclass(slots=True)
class SlottedPoint:
    x: int
    y: int


def describe(matcher) -> str:
    return str(StringDescription().append_description_of(matcher))


class TestClassify:
    """Values are tagged once as null, scalar, object or array."""

    @pytest.mark.parametrize("value", ["", "text", 0, 1.5, True, b"raw"])
    def test_scalars(self, value):
        assert classify(value) is ValueKind.SCALAR

    def test_null(self):
        assert classify(None) is ValueKind.NULL

    @pytest.mark.parametrize("value", [{}, {"a": 1}, [], [1, 2], ()])
    def test_arrays(self, value):
        assert classify(value) is ValueKind.ARRAY

    @pytest.mark.parametrize("value", [SimpleNamespace(), Point(1, 2), SlottedPoint(1, 2)])
    def test_objects(self, value):
        assert classify(value) is ValueKind.OBJECT

    @pytest.mark.parametrize("value", [Point, len, lambda: None, pytest])
    def test_classes_functions_and_modules_are_not_objects(self, value):
        assert classify(value) is not ValueKind.OBJECT

    def test_field_names_keep_insertion_order(self):
        assert field_names(SimpleNamespace(b=1, a=2)) == ["b", "a"]
        assert field_names(SlottedPoint(1, 2)) == ["x", "y"]


class TestStructuralMatchers:
    """Matchers that hamcrest does not ship."""

    def test_an_object(self):
        assert an_object().matches(SimpleNamespace())
        assert not an_object().matches({})
        assert describe(an_object()) == "an object"

    def test_an_array(self):
        assert an_array().matches([])
        assert an_array().matches({"a": 1})
        assert not an_array().matches("abc")

    def test_has_field(self):
        assert has_field("x").matches(Point(1, 2))
        assert not has_field("z").matches(Point(1, 2))
        assert not has_field("x").matches({"x": 1})
        assert describe(has_field("x")) == "an object with field 'x'"

    def test_has_identical_key(self):
        assert has_identical_key("0").matches({"0": "a"})
        assert not has_identical_key(0).matches({"0": "a"})
        assert has_identical_key(0).matches(["a"])
        assert not has_identical_key(False).matches(["a"])
        assert describe(has_identical_key(0)) == "array with key <0>"

    def test_array_with_size(self):
        assert array_with_size(2).matches(["a", "b"])
        assert array_with_size(greater_than(1)).matches({"a": 1, "b": 2})
        assert not array_with_size(3).matches("abc")
        assert describe(array_with_size(2)) == "array with size <2>"

    def test_a_non_empty_string(self):
        assert a_non_empty_string().matches("x")
        assert not a_non_empty_string().matches("")
        assert not a_non_empty_string().matches(None)
        assert not a_non_empty_string().matches(["x"])


class TestCastMatcher:
    """Raw values become matchers, foreign constraints are refused."""

    def test_matchers_pass_through(self):
        matcher = equal_to(5)

        assert cast_matcher(matcher) is matcher

    def test_scalars_use_equality(self):
        assert cast_matcher(5).matches(5)
        assert cast_matcher("a").matches("a")
        assert not cast_matcher("a").matches("b")
        assert cast_matcher(None).matches(None)

    def test_arrays_use_equality(self):
        assert cast_matcher({"a": [1]}).matches({"a": [1]})
        assert cast_matcher([1, 2]).matches([1, 2])

    def test_objects_use_identity(self):
        obj = SimpleNamespace(a=1)

        assert cast_matcher(obj).matches(obj)
        assert not cast_matcher(obj).matches(SimpleNamespace(a=1))

    def test_pytest_approx_is_refused(self):
        with pytest.raises(IncompatibleMatcherType) as exc_info:
            cast_matcher(pytest.approx(0.5))

        assert exc_info.value.offending_type is type(pytest.approx(0.5))
        assert "hamcrest" in str(exc_info.value)


class TestFailure:
    """Failure messages name the path, the expectation and the value."""

    def test_message(self):
        failure = Failure(path="$root.a", reason="does not match", expected="<1>", actual=2)

        assert str(failure) == "$root.a does not match. Expected: <1>. Got: 2"

    def test_null_is_rendered_as_null(self):
        failure = Failure(path="$root", reason="is empty", expected="a non-empty string")

        assert str(failure).endswith("Got: null")

    def test_structured_values_are_rendered_as_json(self):
        assert format_value({"a": [1, 2]}) == '{"a": [1, 2]}'
        assert format_value(SimpleNamespace(a=1)) == '{"a": 1}'
        assert format_value(Point(1, 2)) == '{"x": 1, "y": 2}'

    def test_long_values_are_truncated(self):
        formatted = format_value("x" * 200, max_length=10)

        assert formatted == "'xxxxxx..."
