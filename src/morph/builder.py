"""
Schema builder functions.

Import the module as ``m`` and compose a schema tree::

    from morph import m

    schema = m.object({
        "started_at": m.transform(parse_timestamp).to("startedAt"),
        "status": m.enum([0, 1, 2], ["Tested", "Pending", "Failed"]),
        "owner": m.object({"user_name": m.to("userName")}),
    })

All functions only allocate nodes. Invalid arguments raise SchemaError
immediately, before any record is mapped.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from .nodes import EnumNode, KeyNode, Node, ObjectNode, TransformNode

__all__ = ["object", "to", "enum", "transform"]


def object(shape: Mapping[str, Node]) -> ObjectNode:  # noqa: A001
    """Describe a record. This is also the root of every schema."""
    return ObjectNode(shape)


def to(key: str) -> KeyNode:
    """Move whatever is at this key to ``key``, unchanged."""
    return KeyNode(key)


def enum(source: Sequence[Any], target: Sequence[str]) -> EnumNode:
    """
    Translate values by position.

    Both sequences must be non-empty and the same length.
    """
    return EnumNode(source, target)


def transform(fn: Callable[[Any], Any]) -> TransformNode:
    """Replace the value with ``fn(value)``."""
    return TransformNode(fn)
