"""
Exceptions raised by morph.

MorphError carries the structural issues collected during a mapping run.
SchemaError and InternalMorphError signal programming errors in schema
construction rather than bad input data.
"""

from collections.abc import Iterable
from typing import Any, Union

from .context import MorphContext, MorphIssue


class MorphError(Exception):
    """
    Raised (or returned by ``safe_map``) when a mapping run found issues.

    Can be built from an iterable of issues, from issues passed as separate
    arguments, or from a context with ``MorphError.from_context``.

    Attributes:
        issues: Every issue found during the run, in discovery order
    """

    def __init__(self, *issues: Union[MorphIssue, Iterable[MorphIssue]]):
        if len(issues) == 1 and not isinstance(issues[0], MorphIssue):
            collected = list(issues[0])
        else:
            collected = list(issues)
        self.issues: list[MorphIssue] = collected
        super().__init__(self._format_message())

    @classmethod
    def from_context(cls, context: MorphContext) -> "MorphError":
        """Build an error holding every issue accumulated in ``context``."""
        return cls(context.get_issues())

    def to_dicts(self) -> list[dict[str, Any]]:
        """Issues as plain ``{"path": [...], "details": ...}`` dicts."""
        return [issue.to_dict() for issue in self.issues]

    def _format_message(self) -> str:
        if not self.issues:
            return "mapping failed"
        lines = [f"mapping failed with {len(self.issues)} issue(s):"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        return "\n".join(lines)


class SchemaError(ValueError):
    """Raised when a schema is built from invalid arguments or documents."""


class InternalMorphError(RuntimeError):
    """Raised when the mapper meets a node arrangement it cannot resolve."""
