"""Process exit codes returned by the LoopSage command."""

from __future__ import annotations

EXIT_OK = 0
"""Analysis ran and the report was written."""

EXIT_UNREADABLE_SOURCE = 1
"""The source file was missing, unreadable, or not UTF-8."""

EXIT_USAGE = 2
"""Arguments were missing or malformed (argparse uses the same code)."""

EXIT_REPORT_INVALID = 3
"""The serialized report violated the report schema."""

EXIT_REPORT_WRITE_FAILED = 4
"""The report could not be written to the results directory."""
