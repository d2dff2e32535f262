"""LOCAL-only CLI to analyze a source file from a checkout without installing."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT.parent / "src"))


def main() -> int:
    from loopsage.cli.main import main as cli_main

    return cli_main(["analyze", *sys.argv[1:]])


if __name__ == "__main__":
    raise SystemExit(main())
