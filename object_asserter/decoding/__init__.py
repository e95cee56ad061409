"""
Decoders for JSON and YAML fixtures

Turns documents into the shapes the assertion engine navigates:
objects become SimpleNamespace instances, arrays become lists.

Usage:
    from object_asserter.decoding import decode_json, load_document

    response = decode_json('{"username": "my_username"}')
    composer = load_document("composer.json")
"""

from .loader import DocumentError, decode_json, decode_yaml, load_document

__all__ = [
    "DocumentError",
    "decode_json",
    "decode_yaml",
    "load_document",
]
