"""
Schema nodes.

A schema is a tree of nodes. Each node carries a NodeType discriminant and a
definition payload; the mapper dispatches on the discriminant. Nodes are not
meant to be changed after construction and can be shared between any number
of mapping runs.
"""

from abc import ABC
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional

from .constants import ENUM_SOURCE_TYPES, NodeType
from .context import MorphContext
from .errors import MorphError, SchemaError
from .mapper import run
from .result import MapResult


class Node(ABC):
    """
    Base class for all schema nodes.

    Attributes:
        type: The NodeType discriminant used by the mapper
    """

    def __init__(self, definition: dict[str, Any], node_type: NodeType):
        self._def = definition
        self.type = node_type

    @property
    def definition(self) -> dict[str, Any]:
        """Copy of the node's definition payload."""
        return dict(self._def)

    def to(self, key: str) -> "KeyNode":
        """
        Write this node's output under ``key`` instead of the source key.

        Args:
            key: The output key

        Returns:
            A KeyNode wrapping this node
        """
        return KeyNode(key, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._def!r})"


class ObjectNode(Node):
    """
    Describes a record: which of its keys to rename, nest or translate.

    Keys of the source record missing from the shape are copied unchanged.
    The root of every schema is an ObjectNode, so this is also where the
    public ``map`` and ``safe_map`` entry points live.

    Example:
        schema = ObjectNode({"started_at": KeyNode("startedAt")})
        schema.map({"started_at": 0, "id": 7})
        # {"startedAt": 0, "id": 7}
    """

    def __init__(self, shape: Mapping[str, Node]):
        if not isinstance(shape, Mapping):
            raise SchemaError(f"object shape must be a mapping, got {type(shape).__name__}")
        for key, node in shape.items():
            if not isinstance(key, str):
                raise SchemaError(f"object shape keys must be strings, got {key!r}")
            if not isinstance(node, Node):
                raise SchemaError(
                    f"object shape entry {key!r} must be a schema node, "
                    f"got {type(node).__name__}"
                )
        super().__init__({"shape": dict(shape)}, NodeType.OBJECT)

    @property
    def shape(self) -> dict[str, Node]:
        return dict(self._def["shape"])

    def map(self, source: Any) -> dict[str, Any]:
        """
        Map ``source`` through this schema.

        Raises:
            MorphError: If any structural issue was found
        """
        value, context = run(self, source)
        if context.has_issues:
            raise MorphError.from_context(context)
        return value

    def safe_map(self, source: Any) -> MapResult:
        """Map ``source`` through this schema, returning failures instead of raising."""
        value, context = run(self, source)
        if context.has_issues:
            return MapResult.err(MorphError.from_context(context))
        return MapResult.ok(value)

    safeMap = safe_map


class KeyNode(Node):
    """
    Renames a key, optionally passing its value through an inner node first.
    """

    def __init__(self, target: str, inner: Optional[Node] = None):
        if not isinstance(target, str) or not target:
            raise SchemaError(f"target key must be a non-empty string, got {target!r}")
        if inner is not None and not isinstance(inner, Node):
            raise SchemaError(f"inner node must be a schema node, got {type(inner).__name__}")
        super().__init__({"target": target, "inner": inner}, NodeType.KEY)

    @property
    def target(self) -> str:
        return self._def["target"]

    @property
    def inner(self) -> Optional[Node]:
        return self._def["inner"]

    def to(self, key: str) -> "KeyNode":
        # Re-target instead of stacking renames
        return KeyNode(key, self.inner)


class EnumNode(Node):
    """
    Translates values by position: ``source[i]`` becomes ``target[i]``.

    Lookup uses exact equality and the first matching position wins when
    ``source`` holds duplicates. Booleans only match booleans, so ``True``
    never translates an entry of ``1``.
    """

    def __init__(self, source: Sequence[Any], target: Sequence[str]):
        if isinstance(source, (str, bytes)) or not isinstance(source, Sequence):
            raise SchemaError("enum source values must be a list or tuple")
        if isinstance(target, (str, bytes)) or not isinstance(target, Sequence):
            raise SchemaError("enum target values must be a list or tuple")
        if len(source) == 0 or len(target) == 0:
            raise SchemaError("enum values must not be empty")
        if len(source) != len(target):
            raise SchemaError(
                f"enum source and target must have the same length, "
                f"got {len(source)} and {len(target)}"
            )
        for value in source:
            if not isinstance(value, ENUM_SOURCE_TYPES):
                raise SchemaError(f"enum source values must be primitives, got {value!r}")
        for value in target:
            if not isinstance(value, str):
                raise SchemaError(f"enum target values must be strings, got {value!r}")
        super().__init__({"source": tuple(source), "target": tuple(target)}, NodeType.ENUM)

    @property
    def source(self) -> tuple[Any, ...]:
        return self._def["source"]

    @property
    def target(self) -> tuple[str, ...]:
        return self._def["target"]

    def index_of(self, value: Any) -> Optional[int]:
        """Position of ``value`` in ``source``, or None when absent."""
        for index, candidate in enumerate(self.source):
            if isinstance(candidate, bool) != isinstance(value, bool):
                continue
            if candidate == value:
                return index
        return None

    def translate(self, value: Any, context: MorphContext) -> Any:
        """
        Translate ``value``, reporting a miss to ``context``.

        A value missing from ``source`` is recorded as an issue and returned
        unchanged.
        """
        index = self.index_of(value)
        if index is None:
            context.add(f"expected one of {list(self.source)!r}, received {value!r}")
            return value
        return self.target[index]

    def map(self, value: Any) -> str:
        """
        Translate a single value.

        Raises:
            MorphError: If ``value`` is not one of the source values
        """
        context = MorphContext()
        translated = self.translate(value, context)
        if context.has_issues:
            raise MorphError.from_context(context)
        return translated


class TransformNode(Node):
    """Replaces a value with the result of a pure function applied to it."""

    def __init__(self, fn: Callable[[Any], Any]):
        if not callable(fn):
            raise SchemaError(f"transform needs a callable, got {type(fn).__name__}")
        super().__init__({"fn": fn}, NodeType.TRANSFORM)

    @property
    def fn(self) -> Callable[[Any], Any]:
        return self._def["fn"]

    def apply(self, value: Any) -> Any:
        return self.fn(value)
