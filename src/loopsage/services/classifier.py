"""Classify a loop body against the expensive-operation signatures."""

from __future__ import annotations

from typing import Sequence

from ..domain.models import Finding, LoopKind
from .signatures import SIGNATURES, OperationSignature


def matching_signatures(
    body: str, signatures: Sequence[OperationSignature] = SIGNATURES
) -> list[OperationSignature]:
    """Return every signature present in ``body``, in table order."""

    return [signature for signature in signatures if signature.matches(body)]


def classify_loop_body(
    body: str,
    loop_kind: LoopKind,
    start_line: int,
    snippet: Sequence[str],
    detected_at: str,
    signatures: Sequence[OperationSignature] = SIGNATURES,
) -> list[Finding]:
    """
    Build one finding per signature found in the loop body.

    Detection is presence-based: repeated statements of the same operation
    still produce a single finding, while different operations each produce
    their own.
    """

    rendered = tuple(snippet)
    return [
        Finding(
            kind=signature.kind,
            message=signature.message,
            line=start_line,
            loop_kind=loop_kind,
            snippet=rendered,
            suggested_fix=signature.suggested_fix,
            reference_link=signature.reference_link,
            detected_at=detected_at,
        )
        for signature in matching_signatures(body, signatures)
    ]
