"""
Constants and enums for morph schemas.

Centralizes the node discriminant, the runtime type names used in issue
messages, and the JSON Schema for declarative schema documents.
"""

from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """Schema node kinds."""

    OBJECT = "object"
    KEY = "key"
    ENUM = "enum"
    TRANSFORM = "transform"


# Names reported in "expected object, received <name>" issues
TYPE_NAMES: dict[type, str] = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
    list: "array",
    tuple: "array",
}

# Python types accepted as enum source values
ENUM_SOURCE_TYPES = (str, int, float, bool)

# Path label used when an issue sits at the top of the record
ROOT_LOCATION = "<root>"

# Declarative schema document version
SCHEMA_DOCUMENT_VERSION = "1.0"

SCHEMA_DOCUMENT_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "morph schema document",
    "type": "object",
    "properties": {
        "version": {"type": "string", "enum": [SCHEMA_DOCUMENT_VERSION]},
        "description": {"type": "string"},
        "shape": {"$ref": "#/definitions/shape"},
    },
    "required": ["shape"],
    "additionalProperties": False,
    "definitions": {
        "key": {"type": "string", "minLength": 1},
        "shape": {
            "type": "object",
            "additionalProperties": {"$ref": "#/definitions/field"},
        },
        "enum": {
            "type": "object",
            "properties": {
                "from": {
                    "type": "array",
                    "minItems": 1,
                    "items": {"type": ["string", "number", "boolean"]},
                },
                "to": {
                    "type": "array",
                    "minItems": 1,
                    "items": {"type": "string"},
                },
            },
            "required": ["from", "to"],
            "additionalProperties": False,
        },
        "field": {
            "type": "object",
            "properties": {
                "description": {"type": "string"},
                "to": {"$ref": "#/definitions/key"},
                "shape": {"$ref": "#/definitions/shape"},
                "enum": {"$ref": "#/definitions/enum"},
            },
            "anyOf": [
                {"required": ["to"]},
                {"required": ["shape"]},
                {"required": ["enum"]},
            ],
            "not": {"required": ["shape", "enum"]},
            "additionalProperties": False,
        },
    },
}
