"""
Two-variant result returned by ``ObjectNode.safe_map``.
"""

import json
from typing import Any, Optional

from .errors import MorphError


class MapResult:
    """
    Result of mapping a record without raising.

    Holds either the mapped record (success) or the MorphError describing
    why mapping failed. Build with ``MapResult.ok`` or ``MapResult.err``.

    Example:
        result = schema.safe_map(payload)
        if result.is_ok():
            save(result.value)
        else:
            for issue in result.error.issues:
                print(issue.location, issue.details)
    """

    def __init__(self, value: Any = None, error: Optional[MorphError] = None):
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: Any) -> "MapResult":
        return cls(value=value)

    @classmethod
    def err(cls, error: MorphError) -> "MapResult":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> Any:
        """The mapped record. Raises ValueError on a failed result."""
        if self._error is not None:
            raise ValueError("Cannot read value of a failed MapResult")
        return self._value

    @property
    def error(self) -> MorphError:
        """The failure. Raises ValueError on a successful result."""
        if self._error is None:
            raise ValueError("Cannot read error of a successful MapResult")
        return self._error

    def unwrap(self) -> Any:
        """Return the mapped record, or raise the held MorphError."""
        if self._error is not None:
            raise self._error
        return self._value

    def unwrap_or(self, default: Any) -> Any:
        return default if self._error is not None else self._value

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Serialize the result to a JSON string.

        A success serializes the mapped record; a failure serializes
        ``{"issues": [...]}``.

        Args:
            indent: JSON indentation (None for compact)
        """
        if self._error is not None:
            payload: Any = {"issues": self._error.to_dicts()}
        else:
            payload = self._value
        return json.dumps(payload, indent=indent, default=str)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"MapResult.err({len(self._error.issues)} issue(s))"
        return f"MapResult.ok({self._value!r})"
