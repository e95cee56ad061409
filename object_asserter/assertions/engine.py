"""
Scope engine for fluent assertions on decoded data.

A Scope wraps one value of a decoded tree together with the path
that leads to it from the root. Navigation methods return child
scopes, assertion methods return the scope they were called on, and
end() climbs back to the parent, so a whole document can be checked
in a single chain.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from typing import Any

from hamcrest import all_of, any_of, contains_string, equal_to, instance_of, is_not
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription
from rich.panel import Panel
from rich.pretty import Pretty
from rich.text import Text

from .errors import (
    DateMismatch,
    KeyMissing,
    LengthMismatch,
    MatcherMismatch,
    NotAnArray,
    NotAnObject,
    NotNonEmptyString,
    NotStructuredValue,
    PropertyMissing,
    ScopeAssertionError,
    SubstringMissing,
    UnparsableDate,
)
from .matchers import (
    a_non_empty_string,
    an_array,
    an_object,
    array_with_size,
    cast_matcher,
    has_field,
    has_identical_key,
)
from .models import AsserterConfig, Failure, ValueKind, classify, field_value

logger = logging.getLogger(__name__)

ROOT_SEGMENT = "$root"
ISO_8601_DATE_FORMAT = "%Y-%m-%d"
_ISO_8601_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class Scope:
    """
    A value inside a decoded document, and the way back to its root.

    Scopes never change once created and never modify the value they
    wrap. Every failed check raises a ScopeAssertionError whose message
    starts with the path of the value, e.g. `$root.authors[0].name`.

    Example:
        doc = decode_json('{"name": "acme/widgets", "authors": [{"email": "a@b.c"}]}')

        (Scope(doc)
            .property("name").contains("widgets").end()
            .property("authors").is_array().length(1)
                .key(0).property("email").is_not_empty_string())
    """

    def __init__(
        self,
        value: Any,
        parent: Scope | None = None,
        path: Sequence[str] | None = None,
        config: AsserterConfig | None = None,
    ):
        self._value = value
        self._kind = classify(value)
        self._parent = parent

        if parent is None:
            self._segments: tuple[str, ...] = (ROOT_SEGMENT,)
            self._config = config or AsserterConfig()
            self._assert_that(
                NotStructuredValue,
                "should be an object or an array",
                value,
                any_of(an_object(), an_array()),
            )
        else:
            self._segments = tuple(path) if path is not None else parent._segments
            self._config = config or parent._config

    @property
    def path(self) -> str:
        """Joined path from the root, e.g. `$root.require[php]`."""
        return "".join(self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def config(self) -> AsserterConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Scope({self.path}, kind={self._kind.value})"

    # ─────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────

    def property(self, name: str, matcher: Any = None) -> Scope:
        """
        Assert that the current object has a field called `name`.

        Only the existence of the field is checked, its value may be
        None or empty. Keys of mappings are not fields, use key() for
        those.

        Args:
            name: Name of the field
            matcher: Optional hamcrest matcher (or raw value, compared
                with equality) checked against the field's value

        Returns:
            Scope of the field's value
        """
        obj = self._asserted_object()
        property_path = self._add_path(f".{name}")

        self._assert_that(
            PropertyMissing,
            "does not exist",
            obj,
            has_field(name),
            path="".join(property_path),
        )

        scope = self._descend(field_value(obj, name), property_path)

        if matcher is not None:
            scope.is_(matcher)

        return scope

    def key(self, index: Any, matcher: Any = None) -> Scope:
        """
        Assert that the current array has an entry at `index`.

        The key must be identical in value and type: `key(0)` never
        finds an entry stored under the string `"0"`.

        Args:
            index: Key of a mapping entry or index of a sequence item
            matcher: Optional hamcrest matcher (or raw value) checked
                against the entry

        Returns:
            Scope of the entry
        """
        array = self._asserted_array()

        self._assert_that(
            KeyMissing,
            f"does not have key {index}",
            array,
            has_identical_key(index),
        )

        scope = self._descend(array[index], self._add_path(f"[{index}]"))

        if matcher is not None:
            scope.is_(matcher)

        return scope

    def properties(self, names: Iterable[str], matcher: Any) -> Scope:
        """
        Check `matcher` against several fields of the current object.

        Stays on the current scope, it does not descend into the fields.
        """
        matcher = cast_matcher(matcher)

        for name in names:
            self.property(name, matcher)

        return self

    def end(self) -> Scope:
        """Return to the scope before the last property() or key() call."""
        if self._parent is None:
            return self
        logger.debug(f"Leaving {self.path}")
        return self._parent

    # ─────────────────────────────────────────────────────────────────────
    # Assertions
    # ─────────────────────────────────────────────────────────────────────

    def is_(self, matcher: Any) -> Scope:
        """
        Assert that the current value matches.

        Args:
            matcher: A hamcrest matcher. Any other value is compared with
                equal_to(), or same_instance() for objects.
        """
        matcher = cast_matcher(matcher)

        self._assert_that(MatcherMismatch, "does not match", self._value, matcher)
        return self

    def is_not(self, matcher: Any) -> Scope:
        return self.is_(is_not(cast_matcher(matcher)))

    def is_object(self) -> Scope:
        """Assert that the current value is an object (it can be empty)."""
        self._assert_that(NotAnObject, "is not an object", self._value, an_object())
        return self

    def is_array(self) -> Scope:
        """Assert that the current value is an array (it can be empty)."""
        self._assert_that(NotAnArray, "is not an array", self._value, an_array())
        return self

    def is_not_empty_string(self) -> Scope:
        self._assert_that(
            NotNonEmptyString,
            "is not a non-empty string",
            self._value,
            a_non_empty_string(),
        )
        return self

    def contains(self, needle: str) -> Scope:
        self._assert_that(
            SubstringMissing,
            f"does not contain substring {needle}",
            self._value,
            all_of(instance_of(str), contains_string(needle)),
        )
        return self

    def length(self, matcher: Matcher | int, message: str = "") -> Scope:
        """
        Assert the number of entries of the current array.

        Args:
            matcher: Expected size, or a hamcrest matcher for the size
                (e.g. greater_than(2))
            message: Extra text for the failure message
        """
        reason = "length does not match"
        if message:
            reason = f"{reason} ({message})"

        self._assert_that(LengthMismatch, reason, self._value, array_with_size(matcher))
        return self

    def equals_8601_date(self, expected: date) -> Scope:
        """
        Assert that the current value is a `YYYY-MM-DD` date string
        for the same calendar day as `expected`.

        The time of `expected` is ignored when it is a datetime.

        Raises:
            NotNonEmptyString: if the value is not a non-empty string
            UnparsableDate: if the string is not a valid `YYYY-MM-DD` date
            DateMismatch: if the dates differ
        """
        if not isinstance(expected, date):
            raise TypeError(
                f"expected must be a date or datetime, got {type(expected).__name__}"
            )

        self._assert_that(
            NotNonEmptyString,
            "should be an ISO 8601 date",
            self._value,
            a_non_empty_string(),
        )

        parsed = _parse_iso_8601_date(self._value)
        if parsed is None:
            raise UnparsableDate(self.path, self._value, "YYYY-MM-DD")

        expected_day = date(expected.year, expected.month, expected.day)
        self._assert_that(
            DateMismatch,
            f"should equal ISO 8601 date. Parsed: {self._value!r}",
            parsed.isoformat(),
            equal_to(expected_day.isoformat()),
        )
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Access
    # ─────────────────────────────────────────────────────────────────────

    def tap(self, do: Callable[[Any, Scope], Any]) -> Scope:
        """
        Call `do(value, scope)` without leaving the current scope.

        Useful for checks the fluent methods cannot express.
        """
        do(self._value, self)
        return self

    def get(self) -> Any:
        """Return the current value itself (not a copy)."""
        return self._value

    def debug(self) -> Scope:
        """Print the current value, titled with its path."""
        console = self._config.get_console()
        console.print(Panel(Pretty(self._value), title=Text(self.path), title_align="left"))
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────

    def _asserted_object(self) -> Any:
        self.is_object()
        return self._value

    def _asserted_array(self) -> Any:
        self.is_array()
        return self._value

    def _add_path(self, segment: str) -> tuple[str, ...]:
        return self._segments + (segment,)

    def _descend(self, value: Any, path: tuple[str, ...]) -> Scope:
        scope = Scope(value, parent=self, path=path)
        logger.debug(f"Entered {scope.path} ({scope.kind.value})")
        return scope

    def _assert_that(
        self,
        error_type: type[ScopeAssertionError],
        reason: str,
        item: Any,
        matcher: Matcher,
        path: str | None = None,
    ) -> None:
        _raise_unless(
            error_type,
            reason,
            item,
            matcher,
            path=path or self.path,
            config=self._config,
        )


def _raise_unless(
    error_type: type[ScopeAssertionError],
    reason: str,
    item: Any,
    matcher: Matcher,
    path: str,
    config: AsserterConfig,
) -> None:
    if matcher.matches(item):
        return

    failure = Failure(
        path=path,
        reason=reason,
        expected=str(StringDescription().append_description_of(matcher)),
        actual=item,
        max_value_length=config.max_value_length,
    )
    logger.debug(f"{error_type.__name__}: {failure}")
    raise error_type(failure)


def _parse_iso_8601_date(value: str) -> date | None:
    if not _ISO_8601_DATE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, ISO_8601_DATE_FORMAT).date()
    except ValueError:
        return None


# Entry points for test code
def assert_that_object(value: Any, config: AsserterConfig | None = None) -> Scope:
    """Assert that `value` is an object and return its root scope."""
    _raise_unless(
        NotAnObject,
        "should be an object",
        value,
        an_object(),
        path=ROOT_SEGMENT,
        config=config or AsserterConfig(),
    )
    return Scope(value, config=config)


def assert_that_array(value: Any, config: AsserterConfig | None = None) -> Scope:
    """Assert that `value` is an array and return its root scope."""
    _raise_unless(
        NotAnArray,
        "should be an array",
        value,
        an_array(),
        path=ROOT_SEGMENT,
        config=config or AsserterConfig(),
    )
    return Scope(value, config=config)
