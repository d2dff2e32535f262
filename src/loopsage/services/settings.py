"""Environment-driven settings for the LoopSage command surface."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .snippet import DEFAULT_CONTEXT_LINES

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "output"
"""Results directory used when no override is configured."""

MAX_CONTEXT_LINES = 50
"""Upper bound on the snippet radius accepted from the environment."""

CONTEXT_LINES_ENV = "LOOPSAGE_CONTEXT_LINES"
OUTPUT_DIR_ENV = "LOOPSAGE_OUTPUT_DIR"


def _env_int(
    name: str,
    default: int,
    *,
    min_value: int = 0,
    max_value: int | None = None,
) -> int:
    """Return a bounded integer sourced from the environment."""

    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    if parsed < min_value:
        return default
    if max_value is not None and parsed > max_value:
        return max_value
    return parsed


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings the CLI hands to the engine and the report writer."""

    context_lines: int
    output_dir: Path

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Create a config using the current environment."""

        raw_dir = os.getenv(OUTPUT_DIR_ENV)
        output_dir = DEFAULT_OUTPUT_DIR
        if raw_dir and raw_dir.strip():
            output_dir = Path(raw_dir)
        return cls(
            context_lines=_env_int(
                CONTEXT_LINES_ENV,
                DEFAULT_CONTEXT_LINES,
                min_value=0,
                max_value=MAX_CONTEXT_LINES,
            ),
            output_dir=output_dir,
        )
