"""
morph - declarative record reshaping.

Describe how the keys of a plain record should be renamed, nested or
value-translated, then map records through that description. Keys the schema
does not mention are copied unchanged, and structural problems are collected
into a single error instead of stopping at the first one.

Programmatic usage::

    from morph import m

    schema = m.object({
        "test": m.object({"foo": m.to("bar")}).to("tested"),
        "status": m.enum([0, 1, 2], ["Tested", "Pending", "Failed"]),
    })

    schema.map({"test": {"foo": 1}, "status": 2})
    # {"tested": {"bar": 1}, "status": "Failed"}

    result = schema.safe_map({"test": "oops"})
    if result.is_err():
        print(result.error.issues)

CLI usage::

    morph map --schema schema.json payload.json
    morph check schema.json
"""

__version__ = "0.1.0"

from . import builder as m
from .context import MorphContext, MorphIssue
from .errors import InternalMorphError, MorphError, SchemaError
from .loader import load_schema, schema_from_dict
from .nodes import EnumNode, KeyNode, Node, ObjectNode, TransformNode
from .result import MapResult

__all__ = [
    "m",
    "Node",
    "ObjectNode",
    "KeyNode",
    "EnumNode",
    "TransformNode",
    "MorphContext",
    "MorphIssue",
    "MorphError",
    "SchemaError",
    "InternalMorphError",
    "MapResult",
    "load_schema",
    "schema_from_dict",
    "__version__",
]
