"""
Fluent assertions on decoded data

This package provides the Scope engine: navigate into a decoded
document by field or key, and check each value on the way. Every
failure names the path of the value it rejected.

Supported operations:
    - property / key: descend into a field or an array entry
    - properties: check one matcher against several fields
    - is_ / is_not: check a hamcrest matcher (or a raw value)
    - is_object / is_array: check the shape of the value
    - is_not_empty_string / contains: check strings
    - length: check the size of an array
    - equals_8601_date: check a YYYY-MM-DD date
    - tap / get / end / debug: inspect the value or climb back up

Usage:
    from hamcrest import greater_than
    from object_asserter.assertions import assert_that_object

    data = decode_json('{"results": [{"id": 1}, {"id": 2}]}')

    (assert_that_object(data)
        .property("results").is_array().length(greater_than(1))
            .key(0).property("id", 1))
"""

# Models
from .models import AsserterConfig, Failure, ValueKind, classify

# Errors
from .errors import (
    AsserterUsageError,
    DateMismatch,
    IncompatibleMatcherType,
    KeyMissing,
    LengthMismatch,
    MatcherMismatch,
    NotAnArray,
    NotAnObject,
    NotNonEmptyString,
    NotStructuredValue,
    ObjectAsserterError,
    PropertyMissing,
    ScopeAssertionError,
    SubstringMissing,
    UnparsableDate,
)

# Matchers
from .matchers import (
    a_non_empty_string,
    an_array,
    an_object,
    array_with_size,
    cast_matcher,
    has_field,
    has_identical_key,
)

# Engine
from .engine import Scope, assert_that_array, assert_that_object

__all__ = [
    # Models
    "AsserterConfig",
    "Failure",
    "ValueKind",
    "classify",
    # Errors
    "ObjectAsserterError",
    "ScopeAssertionError",
    "NotStructuredValue",
    "NotAnObject",
    "NotAnArray",
    "PropertyMissing",
    "KeyMissing",
    "MatcherMismatch",
    "NotNonEmptyString",
    "SubstringMissing",
    "LengthMismatch",
    "DateMismatch",
    "AsserterUsageError",
    "IncompatibleMatcherType",
    "UnparsableDate",
    # Matchers
    "a_non_empty_string",
    "an_array",
    "an_object",
    "array_with_size",
    "cast_matcher",
    "has_field",
    "has_identical_key",
    # Engine
    "Scope",
    "assert_that_object",
    "assert_that_array",
]
