"""Shared fixtures: a decoded composer.json and a keyed collection."""

from types import SimpleNamespace

import pytest

from object_asserter import Scope


@pytest.fixture
def composer_data():
    return SimpleNamespace(**{
        "name": "webforge/object-asserter",
        "description": "Fluent DSL to do assertions on scalar structures",
        "type": "library",
        "require": {
            "hamcrest/hamcrest-php": "^2.0",
        },
        "require-dev": {
            "phpunit/phpunit": "^9.5",
            "phpstan/phpstan": "^0.12.92",
            "ergebnis/phpstan-rules": "^0.15.3",
        },
        "license": "MIT",
        "autoload": SimpleNamespace(**{
            "psr-4": {"Webforge\\ObjectAsserter\\": "src/"},
        }),
        "authors": [
            SimpleNamespace(name="Philipp Scheit", email="p.scheit@ps-webforge.com"),
        ],
        "minimum-stability": "stable",
    })


@pytest.fixture
def composer(composer_data):
    return Scope(composer_data)


@pytest.fixture
def array1_data():
    return {
        "list1": "value1",
        "list2": SimpleNamespace(date="2020-01-01"),
        "list3": "",
        "list4": None,
    }


@pytest.fixture
def array1(array1_data):
    return Scope(array1_data)
