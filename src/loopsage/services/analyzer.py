"""Entry point of the detection engine: source text in, findings out."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from ..domain.models import Finding
from .classifier import classify_loop_body
from .loop_locator import DEFAULT_LOOP_LOCATOR, LoopLocator
from .snippet import DEFAULT_CONTEXT_LINES, render_snippet

_LOG = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock used to stamp findings."""

    return datetime.now(timezone.utc)


def analyze(
    source_text: str,
    *,
    clock: Clock | None = None,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    locator: LoopLocator | None = None,
) -> list[Finding]:
    """
    Scan ``source_text`` for DML statements and SOQL queries inside loops.

    Args:
        source_text: The full, in-memory source to analyze.
        clock: Optional clock; every finding of one call shares its reading.
        context_lines: Radius of the context window rendered per loop.
        locator: Optional loop locator replacing the pattern-based default.

    Returns:
        Findings ordered by loop position, then by signature-table order.
    """

    locator = locator or DEFAULT_LOOP_LOCATOR
    detected_at = (clock or utc_now)().isoformat()
    findings: list[Finding] = []
    loops_seen = 0

    for loop in locator.iter_loops(source_text):
        loops_seen += 1
        snippet = render_snippet(source_text, loop.start_line, context_lines)
        loop_findings = classify_loop_body(
            loop.body,
            loop.loop_kind,
            loop.start_line,
            snippet,
            detected_at,
        )
        if loop_findings:
            _LOG.debug(
                "%d expensive operations in %s loop at line %d",
                len(loop_findings),
                loop.loop_kind.value,
                loop.start_line,
            )
        findings.extend(loop_findings)

    _LOG.info("Scanned %d loops, %d findings", loops_seen, len(findings))
    return findings
