"""
Declarative schema documents.

Builds node trees from JSON documents so a schema can be stored next to the
data it reshapes. Documents are checked against SCHEMA_DOCUMENT_JSON_SCHEMA
before any node is built.

Example document::

    {
      "shape": {
        "test": {"to": "tested"},
        "status": {"enum": {"from": [0, 1], "to": ["off", "on"]}, "to": "state"},
        "inner": {"shape": {"foo": {"to": "bar"}}, "to": "outer"}
      }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema

from .constants import SCHEMA_DOCUMENT_JSON_SCHEMA
from .errors import SchemaError
from .nodes import EnumNode, KeyNode, Node, ObjectNode

logger = logging.getLogger(__name__)


def validate_document(document: Any) -> list[str]:
    """
    Validate a schema document.

    Returns:
        List of validation errors (empty if valid)
    """
    validator = jsonschema.Draft7Validator(SCHEMA_DOCUMENT_JSON_SCHEMA)
    errors = []
    found = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
    for error in found:
        path = ".".join(str(p) for p in error.absolute_path)
        errors.append(f"{path}: {error.message}" if path else error.message)
    return errors


def schema_from_dict(document: dict[str, Any]) -> ObjectNode:
    """
    Build a schema tree from a parsed document.

    Raises:
        SchemaError: If the document is not a valid schema document, or an
            enum entry has mismatched lengths
    """
    errors = validate_document(document)
    if errors:
        raise SchemaError("Invalid schema document:\n" + "\n".join(f"  - {e}" for e in errors))
    return _build_object(document["shape"], path=())


def load_schema(path: Union[str, Path]) -> ObjectNode:
    """
    Load a schema tree from a JSON file.

    Raises:
        SchemaError: If the file is not valid JSON or not a valid document
    """
    path = Path(path)
    try:
        with open(path) as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Schema file {path} is not valid JSON: {e}") from e

    schema = schema_from_dict(document)
    logger.info(f"Loaded schema from {path}")
    return schema


def _build_object(shape: dict[str, Any], path: tuple[str, ...]) -> ObjectNode:
    return ObjectNode({key: _build_field(entry, path + (key,)) for key, entry in shape.items()})


def _build_field(entry: dict[str, Any], path: tuple[str, ...]) -> Node:
    """Build the node for one shape entry, wrapping it in a rename when ``to`` is set."""
    inner: Optional[Node] = None
    if "shape" in entry:
        inner = _build_object(entry["shape"], path)
    elif "enum" in entry:
        try:
            inner = EnumNode(entry["enum"]["from"], entry["enum"]["to"])
        except SchemaError as e:
            raise SchemaError(f"{'.'.join(path)}: {e}") from e

    if "to" in entry:
        return KeyNode(entry["to"], inner)
    if inner is None:
        raise SchemaError(f"{'.'.join(path)}: field needs one of 'to', 'shape' or 'enum'")
    return inner
