"""
Issue context shared across a single mapping run.

A MorphContext tracks where the walk currently is in the source record and
collects the structural issues found on the way. Child contexts created with
``at()`` extend the path but report into the same accumulator, so every issue
found anywhere in the tree is visible from the root context.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .constants import ROOT_LOCATION


@dataclass(frozen=True)
class MorphIssue:
    """
    A structural problem found while mapping a record.

    Attributes:
        path: Property-access chain from the root of the source record
        details: Human-readable cause
    """

    path: tuple[str, ...]
    details: str

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            raise TypeError(f"issue path must be a sequence of keys, got string {self.path!r}")
        # Accept any sequence for convenience, store a hashable tuple
        object.__setattr__(self, "path", tuple(self.path))

    @property
    def location(self) -> str:
        """Dotted form of the path, ``<root>`` for the empty path."""
        return ".".join(self.path) if self.path else ROOT_LOCATION

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "details": self.details}

    def __str__(self) -> str:
        return f"{self.location}: {self.details}"


class MorphContext:
    """
    Accumulates issues for one mapping run.

    The issue store is an insertion-ordered dict used as a set, so duplicate
    issues (same path and details) collapse to a single entry while the
    reporting order stays deterministic.
    """

    def __init__(
        self,
        path: tuple[str, ...] = (),
        issues: Optional[dict[MorphIssue, None]] = None,
    ):
        self._path = tuple(path)
        self._issues: dict[MorphIssue, None] = issues if issues is not None else {}

    @property
    def is_root(self) -> bool:
        """True when the context points at the top of the record."""
        return len(self._path) == 0

    @property
    def has_issues(self) -> bool:
        return len(self._issues) > 0

    def get_issues(self) -> list[MorphIssue]:
        """Return a copy of the collected issues in the order they were added."""
        return list(self._issues)

    def get_path(self) -> list[str]:
        """Return a copy of the current path."""
        return list(self._path)

    def at(self, key: str) -> "MorphContext":
        """
        Derive a child context one level deeper.

        The child shares this context's issue accumulator. This context's
        path is left untouched.
        """
        return MorphContext(path=self._path + (key,), issues=self._issues)

    def add(self, details: str) -> None:
        """Record an issue at the current path."""
        self._issues[MorphIssue(self._path, details)] = None

    def __len__(self) -> int:
        return len(self._issues)

    def __repr__(self) -> str:
        location = ".".join(self._path) if self._path else ROOT_LOCATION
        return f"MorphContext(path={location!r}, issues={len(self._issues)})"
