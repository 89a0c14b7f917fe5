"""
Mapper engine - recursive walk of a schema tree against a source record.

The walk pairs an ObjectNode with a source value, building a new dict key by
key. Structural problems are recorded in the shared MorphContext and never
stop the walk of sibling keys, so one run reports every issue it can find.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .constants import TYPE_NAMES, NodeType
from .context import MorphContext
from .errors import InternalMorphError

if TYPE_CHECKING:
    from .nodes import KeyNode, ObjectNode

logger = logging.getLogger(__name__)


def type_name(value: Any) -> str:
    """Name of the runtime type of ``value`` as reported in issues."""
    name = TYPE_NAMES.get(type(value))
    if name is not None:
        return name
    for py_type, candidate in TYPE_NAMES.items():
        if isinstance(value, py_type):
            return candidate
    return type(value).__name__


def run(node: "ObjectNode", source: Any) -> tuple[dict[str, Any], MorphContext]:
    """
    Map ``source`` through ``node`` with a fresh root context.

    Returns:
        The mapped record and the context holding any issues
    """
    record, context = walk(node, source, MorphContext())
    if context.has_issues:
        logger.debug(f"Mapping finished with {len(context)} issue(s)")
    else:
        logger.debug(f"Mapping finished, {len(record)} key(s) written")
    return record, context


def walk(
    node: "ObjectNode", source: Any, context: MorphContext
) -> tuple[dict[str, Any], MorphContext]:
    """
    Walk ``source`` against the shape of ``node``.

    Args:
        node: The ObjectNode describing ``source``
        source: The value found at the current path
        context: Context pointing at the current path

    Returns:
        The new record and the context it reported into. The record is
        empty when ``source`` is not a mapping.

    Raises:
        InternalMorphError: If a rename wraps a node it cannot resolve
    """
    record: dict[str, Any] = {}
    if not context.is_root:
        logger.debug(f"Walking {'.'.join(context.get_path())}")

    if not isinstance(source, Mapping):
        context.add(f"expected object, received {type_name(source)}")
        logger.debug(f"Issue at {context.get_path()}: source is {type_name(source)}")
        return record, context

    shape = node.shape
    for key, value in source.items():
        child = shape.get(key)
        if child is None:
            record[key] = value
            continue

        if child.type is NodeType.OBJECT:
            record[key], _ = walk(child, value, context.at(key))
        elif child.type is NodeType.KEY:
            record[child.target] = _resolve_rename(child, key, value, context)
        elif child.type is NodeType.ENUM:
            record[key] = child.translate(value, context.at(key))
        elif child.type is NodeType.TRANSFORM:
            record[key] = child.apply(value)
        else:
            raise InternalMorphError(
                f"Internal error! Unexpected {_node_label(child)} node at "
                f"{'.'.join(context.at(key).get_path())}"
            )

    return record, context


def _resolve_rename(node: "KeyNode", key: str, value: Any, context: MorphContext) -> Any:
    """Compute the value written under a rename target."""
    inner = node.inner
    if inner is None:
        return value

    child_context = context.at(key)
    if inner.type is NodeType.OBJECT:
        mapped, _ = walk(inner, value, child_context)
        return mapped
    if inner.type is NodeType.ENUM:
        return inner.translate(value, child_context)
    if inner.type is NodeType.TRANSFORM:
        return inner.apply(value)

    raise InternalMorphError(
        f"Internal error! Unexpected {_node_label(inner)} node at "
        f"{'.'.join(child_context.get_path())}"
    )


def _node_label(node: Any) -> str:
    """Name of a node's kind for error messages."""
    return str(getattr(node.type, "value", node.type))
