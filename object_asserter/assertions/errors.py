"""
Errors raised by scopes.

Failed checks raise subclasses of ScopeAssertionError, which is an
AssertionError so test runners report them as ordinary failures.
Misuse of the API (a matcher from another assertion library, a date
string that cannot be parsed) raises subclasses of AsserterUsageError
instead.
"""

from __future__ import annotations

from .models import Failure


class ObjectAsserterError(Exception):
    """Base class for everything raised by object_asserter."""


class ScopeAssertionError(ObjectAsserterError, AssertionError):
    """A check on the value of a scope failed."""

    def __init__(self, failure: Failure):
        super().__init__(str(failure))
        self.failure = failure

    @property
    def path(self) -> str:
        return self.failure.path


class NotStructuredValue(ScopeAssertionError):
    """The root value is neither an object nor an array."""


class NotAnObject(ScopeAssertionError):
    pass


class NotAnArray(ScopeAssertionError):
    pass


class PropertyMissing(ScopeAssertionError):
    pass


class KeyMissing(ScopeAssertionError):
    pass


class MatcherMismatch(ScopeAssertionError):
    pass


class NotNonEmptyString(ScopeAssertionError):
    pass


class SubstringMissing(ScopeAssertionError):
    pass


class LengthMismatch(ScopeAssertionError):
    pass


class DateMismatch(ScopeAssertionError):
    pass


class AsserterUsageError(ObjectAsserterError):
    """The asserter was called with arguments it cannot work with."""


class IncompatibleMatcherType(AsserterUsageError, TypeError):
    """A constraint from another assertion library was given as a matcher."""

    def __init__(self, offending_type: type):
        name = f"{offending_type.__module__}.{offending_type.__qualname__}"
        super().__init__(
            f"{name} is not a hamcrest matcher. "
            f"Use the matchers from the hamcrest package instead "
            f"(e.g. hamcrest.close_to rather than pytest.approx)"
        )
        self.offending_type = offending_type


class UnparsableDate(AsserterUsageError, ValueError):
    """A value could not be parsed with the expected date format."""

    def __init__(self, path: str, value: str, date_format: str):
        super().__init__(
            f"{path}: cannot handle input {value!r} as format {date_format}"
        )
        self.path = path
        self.value = value
        self.date_format = date_format
