"""
Document decoders for assertion fixtures.

Decodes JSON and YAML into the value shapes Scope works with: objects
become SimpleNamespace instances (fields), arrays become lists, and
scalars stay as they are.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import yaml

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as the strings they were written as."""


_DocumentLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)


class DocumentError(ValueError):
    """A document could not be read or decoded."""

    def __init__(self, source: str, message: str, suggestion: str | None = None):
        self.source = source
        self.message = message
        self.suggestion = suggestion
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.source}: {self.message}"
        if self.suggestion:
            text += f" ({self.suggestion})"
        return text


def decode_json(text: str | bytes, *, objects: bool = True, source: str = "json") -> Any:
    """
    Decode a JSON document.

    Args:
        text: JSON content
        objects: Decode JSON objects as objects (SimpleNamespace). When
            False they stay dicts and are navigated with key().
        source: Name used in error messages

    Raises:
        DocumentError: if the content is not valid JSON
    """
    try:
        return json.loads(text, object_hook=_namespace if objects else None)
    except json.JSONDecodeError as e:
        raise DocumentError(source, f"Invalid JSON syntax: {e}") from e


def decode_yaml(text: str, *, objects: bool = True, source: str = "yaml") -> Any:
    """
    Decode a YAML document.

    Mappings whose keys are all strings become objects when `objects`
    is True. Mappings with other keys (e.g. integers) stay dicts.
    Dates and timestamps stay strings, as written in the document.

    Raises:
        DocumentError: if the content is not valid YAML
    """
    try:
        data = yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError as e:
        raise DocumentError(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)",
        ) from e

    if objects:
        return _objects_from_mappings(data)
    return data


def load_document(path: str | Path, *, objects: bool = True) -> Any:
    """
    Load and decode a JSON or YAML file, chosen by its suffix.

    Example:
        composer = load_document("composer.json")
        assert_that_object(composer).property("name").contains("acme")

    Raises:
        DocumentError: if the file is missing, has an unknown suffix or
            cannot be decoded
    """
    path = Path(path)

    if not path.exists():
        raise DocumentError(
            str(path),
            "File not found",
            suggestion="Check the file path is correct",
        )

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise DocumentError(
            str(path),
            f"Unsupported file type {suffix or '(none)'}",
            suggestion="Use a .json, .yaml or .yml file",
        )

    text = path.read_text(encoding="utf-8")
    logger.debug(f"Loaded {path} ({len(text)} characters)")

    if suffix in JSON_SUFFIXES:
        return decode_json(text, objects=objects, source=str(path))
    return decode_yaml(text, objects=objects, source=str(path))


def _namespace(fields: dict[str, Any]) -> SimpleNamespace:
    # keyword arguments would reject keys such as "__dict__"
    namespace = SimpleNamespace()
    vars(namespace).update(fields)
    return namespace


def _objects_from_mappings(data: Any) -> Any:
    if isinstance(data, dict):
        converted = {k: _objects_from_mappings(v) for k, v in data.items()}
        if all(isinstance(k, str) for k in converted):
            return _namespace(converted)
        return converted
    if isinstance(data, list):
        return [_objects_from_mappings(item) for item in data]
    return data
