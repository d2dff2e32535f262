"""Static table of expensive operations checked inside loop bodies.

The order of :data:`SIGNATURES` is the order findings are emitted for a
single loop. Extending the table needs no change to the classifier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..domain.models import FindingKind, OperationCategory

DML_DOC_LINK = (
    "https://developer.salesforce.com/docs/atlas.en-us.256.0.apexcode.meta/"
    "apexcode/langCon_apex_dml.htm"
)
"""Reference for DML statements."""

SOQL_DOC_LINK = (
    "https://developer.salesforce.com/docs/atlas.en-us.256.0.apexcode.meta/"
    "apexcode/langCon_apex_SOQL.htm"
)
"""Reference for SOQL queries."""

REFERENCE_LINKS: dict[OperationCategory, str] = {
    OperationCategory.MUTATION: DML_DOC_LINK,
    OperationCategory.QUERY: SOQL_DOC_LINK,
}

SUGGESTED_FIXES: dict[str, str] = {
    "insert": "Bulkify by collecting records and insert outside the loop.",
    "update": "Bulkify by collecting records and update outside the loop.",
    "delete": "Bulkify by collecting records and delete outside the loop.",
    "upsert": "Bulkify by collecting records and upsert outside the loop.",
    "merge": "Avoid merge operations inside loops to prevent governor limits.",
    "undelete": "Avoid undelete operations inside loops to prevent governor limits.",
    "soql": "Move SOQL queries outside loops to avoid hitting limits.",
}

_KIND_BY_CATEGORY = {
    OperationCategory.MUTATION: FindingKind.MUTATION_IN_LOOP,
    OperationCategory.QUERY: FindingKind.QUERY_IN_LOOP,
}


@dataclass(frozen=True)
class OperationSignature:
    """A named operation, the pattern that detects it and its advisory text."""

    name: str
    category: OperationCategory
    pattern: re.Pattern[str]
    message: str

    @property
    def kind(self) -> FindingKind:
        return _KIND_BY_CATEGORY[self.category]

    @property
    def suggested_fix(self) -> str:
        return SUGGESTED_FIXES[self.name]

    @property
    def reference_link(self) -> str:
        return REFERENCE_LINKS[self.category]

    def matches(self, body: str) -> bool:
        return self.pattern.search(body) is not None


def _dml(keyword: str) -> OperationSignature:
    return OperationSignature(
        name=keyword,
        category=OperationCategory.MUTATION,
        pattern=re.compile(rf"\b{keyword}\b"),
        message=f"DML operation '{keyword}' detected inside a loop.",
    )


DML_KEYWORDS = ("insert", "update", "delete", "upsert", "merge", "undelete")

SIGNATURES: tuple[OperationSignature, ...] = tuple(
    _dml(keyword) for keyword in DML_KEYWORDS
) + (
    OperationSignature(
        name="soql",
        category=OperationCategory.QUERY,
        pattern=re.compile(r"\bselect\s+.*\s+from\s+", re.IGNORECASE),
        message="SOQL query detected inside a loop.",
    ),
)
"""Signatures in the order they are checked."""
