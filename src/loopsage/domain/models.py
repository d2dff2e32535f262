"""Core entities without I/O for LoopSage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FindingKind(Enum):
    """Closed set of issue types the engine can report."""

    MUTATION_IN_LOOP = "MUTATION_IN_LOOP"
    QUERY_IN_LOOP = "QUERY_IN_LOOP"


class OperationCategory(Enum):
    """Category used to pick the reference link for a finding."""

    MUTATION = "mutation"
    QUERY = "query"


class LoopKind(Enum):
    """Iteration constructs recognised by the loop locator."""

    FOR = "for"
    WHILE = "while"
    DO_WHILE = "do-while"

    @classmethod
    def from_keyword(cls, keyword: str) -> "LoopKind":
        """Map the opening keyword of a loop to its kind."""

        if keyword == "do":
            return cls.DO_WHILE
        return cls(keyword)


@dataclass(frozen=True)
class Finding:
    """An expensive operation detected inside a loop body.

    ``line`` is the 1-based line of the enclosing loop keyword in the
    original, unmodified source text.
    """

    kind: FindingKind
    message: str
    line: int
    loop_kind: LoopKind
    snippet: tuple[str, ...]
    suggested_fix: str
    reference_link: str
    detected_at: str

    def to_mapping(self) -> dict[str, object]:
        """Return the report document form of this finding."""

        return {
            "type": self.kind.value,
            "message": self.message,
            "line": self.line,
            "loopType": self.loop_kind.value,
            "codeSnippet": list(self.snippet),
            "suggestedFix": self.suggested_fix,
            "docLink": self.reference_link,
            "timestamp": self.detected_at,
        }
