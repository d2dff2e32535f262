"""End-to-end properties of ``analyze`` over in-memory source text."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from typing import Iterator

from loopsage.domain.models import FindingKind, LoopKind
from loopsage.services.analyzer import analyze
from loopsage.services.loop_locator import LoopMatch

FIXED_TIME = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)

SEEDER = """public class Seeder {
    public static void seed(List<Account> accounts) {
        for (Account acc : accounts) {
            insert acc;
        }
    }
}
"""

MIXED = """public class Mixed {
    public static void sync(List<String> names) {
        for (Integer i = 0; i < names.size(); i++) {
            Account a = [SELECT Id FROM Account WHERE Name = :names[i]];
            insert a;
        }
    }
}
"""


def _fixed_clock() -> datetime:
    return FIXED_TIME


def test_loop_free_source_has_no_findings() -> None:
    """Text without iteration constructs yields nothing."""

    assert analyze("public class A {\n    Integer x = 1;\n}\n") == []


def test_single_insert_in_for_loop() -> None:
    """One insert inside a for loop is one mutation finding at the loop line."""

    (finding,) = analyze(SEEDER, clock=_fixed_clock)

    assert finding.kind is FindingKind.MUTATION_IN_LOOP
    assert finding.loop_kind is LoopKind.FOR
    assert finding.line == 3
    assert finding.detected_at == "2026-01-15T09:30:00+00:00"
    assert finding.snippet[0] == "Line   1 | public class Seeder {"
    assert finding.snippet[-1] == "Line   6 |     }"


def test_insert_and_query_follow_table_order() -> None:
    """A body with a query and an insert yields the mutation first."""

    findings = analyze(MIXED, clock=_fixed_clock)

    assert [finding.kind for finding in findings] == [
        FindingKind.MUTATION_IN_LOOP,
        FindingKind.QUERY_IN_LOOP,
    ]
    assert {finding.line for finding in findings} == {3}


def test_dml_outside_loop_is_ignored() -> None:
    """Top-level DML statements are not findings."""

    text = "Account a = new Account(Name = 'x');\ninsert a;\nupdate a;\n"
    assert analyze(text) == []


def test_repeated_analysis_is_idempotent() -> None:
    """Two runs differ only in their timestamps."""

    first = analyze(MIXED)
    second = analyze(MIXED)

    assert [dataclasses.replace(f, detected_at="") for f in first] == [
        dataclasses.replace(f, detected_at="") for f in second
    ]
    assert analyze(MIXED, clock=_fixed_clock) == analyze(MIXED, clock=_fixed_clock)


def test_findings_ordered_by_loop_position() -> None:
    """Findings of an earlier loop precede those of a later one."""

    text = (
        "while (pending > 0) {\n"
        "    delete stale;\n"
        "}\n"
        "for (Lead l : leads) {\n"
        "    upsert l;\n"
        "}\n"
    )
    findings = analyze(text, clock=_fixed_clock)

    assert [(f.loop_kind, f.line, f.message) for f in findings] == [
        (LoopKind.WHILE, 1, "DML operation 'delete' detected inside a loop."),
        (LoopKind.FOR, 4, "DML operation 'upsert' detected inside a loop."),
    ]


def test_nested_block_hides_later_statements() -> None:
    """DML after a nested block inside the loop is not reported."""

    text = (
        "for (Account acc : accounts) {\n"
        "    if (acc.Name != null) {\n"
        "        acc.Name = acc.Name.trim();\n"
        "    }\n"
        "    update acc;\n"
        "}\n"
    )
    assert analyze(text) == []


def test_crlf_source_keeps_raw_line_numbers() -> None:
    """Windows line endings do not affect line numbers or leak into snippets."""

    text = "// header\r\n\r\nfor (Case c : cases) {\r\n\tupdate c;\r\n}\r\n"
    (finding,) = analyze(text, clock=_fixed_clock, context_lines=1)

    assert finding.line == 3
    assert finding.snippet == (
        "Line   2 | ",
        "Line   3 | for (Case c : cases) {",
        "Line   4 |   update c;",
    )


def test_custom_locator_is_used() -> None:
    """A substitute loop locator drives the classifier."""

    class OneLoopLocator:
        def iter_loops(self, text: str) -> Iterator[LoopMatch]:
            yield LoopMatch(
                loop_kind=LoopKind.WHILE, start_line=2, body="merge a b;", offset=0
            )

    (finding,) = analyze("a\nb\nc", clock=_fixed_clock, locator=OneLoopLocator())

    assert finding.loop_kind is LoopKind.WHILE
    assert finding.line == 2
    assert finding.message == "DML operation 'merge' detected inside a loop."


def test_serialized_field_names() -> None:
    """The report mapping uses the documented field names."""

    (finding,) = analyze(SEEDER, clock=_fixed_clock)

    assert finding.to_mapping() == {
        "type": "MUTATION_IN_LOOP",
        "message": "DML operation 'insert' detected inside a loop.",
        "line": 3,
        "loopType": "for",
        "codeSnippet": list(finding.snippet),
        "suggestedFix": "Bulkify by collecting records and insert outside the loop.",
        "docLink": finding.reference_link,
        "timestamp": "2026-01-15T09:30:00+00:00",
    }
