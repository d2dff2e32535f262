"""Persist analysis reports as JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from ..domain.models import Finding
from .settings import DEFAULT_OUTPUT_DIR

_LOG = logging.getLogger(__name__)

REPORT_SUFFIX = ".json"


def serialize_findings(findings: Iterable[Finding]) -> list[dict[str, object]]:
    """Return the report document for ``findings``, preserving their order."""

    return [finding.to_mapping() for finding in findings]


def report_path(base_name: str, output_dir: Path | None = None) -> Path:
    """Return where the report for ``base_name`` lives."""

    return (output_dir or DEFAULT_OUTPUT_DIR) / f"{base_name}{REPORT_SUFFIX}"


def write_report(
    document: list[Mapping[str, Any]],
    base_name: str,
    output_dir: Path | None = None,
) -> Path:
    """Write ``document`` to ``<base_name>.json``, creating the directory first."""

    path = report_path(base_name, output_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8"
    )
    _LOG.info("Wrote %d findings to %s", len(document), path)
    return path
