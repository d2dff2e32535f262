"""Command-line entry point: ``loopsage analyze <path>``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..services.analyzer import analyze
from ..services.report_store import serialize_findings, write_report
from ..services.settings import AnalyzerConfig
from ..services.source_reader import UnreadableSourceError, read_source
from . import exit_codes, schema_registry
from .schema_registry import SchemaValidationError

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loopsage",
        description="Detect DML statements and SOQL queries executed inside loops.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each loop that contains an expensive operation.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)
    analyze_cmd = subcommands.add_parser(
        "analyze", help="Analyze a class or trigger file and write a JSON report."
    )
    analyze_cmd.add_argument(
        "path",
        type=Path,
        help="Path to the triggerOrClass source file to analyze.",
    )
    analyze_cmd.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Report directory (defaults to LOOPSAGE_OUTPUT_DIR or output/).",
    )
    return parser


def emit(line: str) -> None:
    """Emit a single line to stdout without using `print`."""

    sys.stdout.write(f"{line}\n")


def fail(message: str, code: int) -> int:
    sys.stderr.write(f"{message}\n")
    return code


def summary_line(path: Path, findings_count: int) -> str:
    """Return the one-line human summary for an analysis run."""

    if findings_count:
        noun = "issue" if findings_count == 1 else "issues"
        return f"Analysis results for {path}: {findings_count} {noun} found."
    return f"Analysis results for {path}: no issues found."


def run_analyze(path: Path, config: AnalyzerConfig) -> int:
    """Analyze one file, validate and persist its report, and print a summary."""

    try:
        source = read_source(path)
    except UnreadableSourceError as exc:
        return fail(str(exc), exit_codes.EXIT_UNREADABLE_SOURCE)

    findings = analyze(source.text, context_lines=config.context_lines)
    document = serialize_findings(findings)

    try:
        schema_registry.validate(schema_registry.REPORT_SCHEMA, document)
    except SchemaValidationError as exc:
        _LOG.error("Report for %s violated the schema: %s", path, exc.message)
        return fail(
            "Report did not meet the report contract; nothing was written.",
            exit_codes.EXIT_REPORT_INVALID,
        )

    try:
        report = write_report(document, source.base_name, config.output_dir)
    except OSError as exc:
        return fail(
            f"Unable to write report to {config.output_dir}: {exc}",
            exit_codes.EXIT_REPORT_WRITE_FAILED,
        )

    emit(summary_line(path, len(findings)))
    emit(f"Report written to {report}")
    return exit_codes.EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the loopsage CLI."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = AnalyzerConfig.from_env()
    if args.output_dir is not None:
        config = AnalyzerConfig(
            context_lines=config.context_lines, output_dir=args.output_dir
        )

    # "analyze" is the only subcommand; argparse rejects anything else.
    return run_analyze(args.path, config)


if __name__ == "__main__":
    raise SystemExit(main())
