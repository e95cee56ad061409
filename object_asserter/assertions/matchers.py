"""
Matchers for structured values and the matcher casting policy.

Matching is delegated to PyHamcrest. This module only adds the
matchers hamcrest has no equivalent for, and decides how a raw
argument passed to Scope.is_() and friends becomes a matcher.
"""

from __future__ import annotations

from typing import Any

from hamcrest import equal_to, same_instance
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher

from .errors import IncompatibleMatcherType
from .models import ValueKind, classify, field_names
from .models import has_identical_key as _has_identical_key

# Top-level packages whose constraint objects look like matchers but are not
FOREIGN_CONSTRAINT_PACKAGES = ("_pytest", "pytest", "dirty_equals")


class IsObjectLike(BaseMatcher):
    def _matches(self, item: Any) -> bool:
        return classify(item) is ValueKind.OBJECT

    def describe_to(self, description: Description) -> None:
        description.append_text("an object")


class IsArrayLike(BaseMatcher):
    def _matches(self, item: Any) -> bool:
        return classify(item) is ValueKind.ARRAY

    def describe_to(self, description: Description) -> None:
        description.append_text("an array")


class HasField(BaseMatcher):
    """Matches objects that carry a field, whatever its value."""

    def __init__(self, name: str):
        self.name = name

    def _matches(self, item: Any) -> bool:
        return classify(item) is ValueKind.OBJECT and self.name in field_names(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("an object with field ").append_description_of(self.name)


class HasIdenticalKey(BaseMatcher):
    """Matches arrays with an entry whose key is identical in value and type."""

    def __init__(self, key: Any):
        self.key = key

    def _matches(self, item: Any) -> bool:
        return classify(item) is ValueKind.ARRAY and _has_identical_key(item, self.key)

    def describe_to(self, description: Description) -> None:
        description.append_text("array with key ").append_description_of(self.key)


class IsArrayWithSize(BaseMatcher):
    def __init__(self, size_matcher: Matcher):
        self.size_matcher = size_matcher

    def _matches(self, item: Any) -> bool:
        return classify(item) is ValueKind.ARRAY and self.size_matcher.matches(len(item))

    def describe_to(self, description: Description) -> None:
        description.append_text("array with size ").append_description_of(self.size_matcher)


class IsNonEmptyString(BaseMatcher):
    def _matches(self, item: Any) -> bool:
        return isinstance(item, str) and len(item) > 0

    def describe_to(self, description: Description) -> None:
        description.append_text("a non-empty string")


def an_object() -> Matcher:
    return IsObjectLike()


def an_array() -> Matcher:
    return IsArrayLike()


def has_field(name: str) -> Matcher:
    return HasField(name)


def has_identical_key(key: Any) -> Matcher:
    return HasIdenticalKey(key)


def array_with_size(size: Matcher | int) -> Matcher:
    return IsArrayWithSize(cast_matcher(size))


def a_non_empty_string() -> Matcher:
    return IsNonEmptyString()


def cast_matcher(matcher: Any) -> Matcher:
    """
    Turn the argument of an assertion into a hamcrest matcher.

    Hamcrest matchers are returned unchanged. Constraints from other
    assertion libraries are rejected. Objects are compared by identity,
    every other value by equality.

    Raises:
        IncompatibleMatcherType: for pytest.approx, dirty_equals and the like
    """
    if isinstance(matcher, Matcher):
        return matcher

    foreign = _foreign_constraint_type(matcher)
    if foreign is not None:
        raise IncompatibleMatcherType(foreign)

    if classify(matcher) is ValueKind.OBJECT:
        return same_instance(matcher)
    return equal_to(matcher)


def _foreign_constraint_type(value: Any) -> type | None:
    for cls in type(value).__mro__:
        package = cls.__module__.split(".")[0]
        if package in FOREIGN_CONSTRAINT_PACKAGES:
            return type(value)
    return None
