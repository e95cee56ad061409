"""
Object Asserter - fluent assertions for decoded JSON and YAML

This package lets test code walk into nested documents by field or key
and check the values it finds, with failures that name the exact path.

Subpackages:
    - assertions: Scope engine, matchers and errors
    - decoding: JSON/YAML decoders producing navigable documents

Usage:
    from object_asserter import assert_that_object, decode_json

    response = decode_json(body)

    factor = (assert_that_object(response)
        .property("username").contains("my_").end()
        .property("validation-factors")
            .property("validationFactors").is_array()
                .key(0)
                    .property("name", "remote_address").end()
                .get())
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Models
    AsserterConfig,
    Failure,
    ValueKind,
    classify,
    # Errors
    ObjectAsserterError,
    ScopeAssertionError,
    NotStructuredValue,
    NotAnObject,
    NotAnArray,
    PropertyMissing,
    KeyMissing,
    MatcherMismatch,
    NotNonEmptyString,
    SubstringMissing,
    LengthMismatch,
    DateMismatch,
    AsserterUsageError,
    IncompatibleMatcherType,
    UnparsableDate,
    # Engine
    Scope,
    assert_that_object,
    assert_that_array,
)

# Re-export decoding for convenience
from .decoding import (
    DocumentError,
    decode_json,
    decode_yaml,
    load_document,
)

__all__ = [
    # Package info
    "__version__",
    # Assertions - Models
    "AsserterConfig",
    "Failure",
    "ValueKind",
    "classify",
    # Assertions - Errors
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
    # Assertions - Engine
    "Scope",
    "assert_that_object",
    "assert_that_array",
    # Decoding
    "DocumentError",
    "decode_json",
    "decode_yaml",
    "load_document",
]
