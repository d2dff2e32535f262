"""Locate iteration constructs and their bodies in raw source text.

The locator is a heuristic, not a parser. A single pattern matches the loop
keyword, a one-line parenthesized header and a brace-delimited block, and
stops at the *first* closing brace after the opening one. A loop whose body
contains a nested block is therefore truncated at the nested block's closing
brace; statements after it are not seen by the classifier.

The keyword is not anchored to a word start either, so an identifier ending in
a keyword followed by a parenthesized list and a block, such as the method
declaration ``void redo(List<Account> accs) { ... }``, is reported as a loop
(here a do-while).

Any replacement (for example a balanced-brace scanner) only has to satisfy
:class:`LoopLocator` to be usable by :func:`loopsage.services.analyzer.analyze`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Protocol

from ..domain.models import LoopKind

LOOP_PATTERN = re.compile(r"(for|while|do)\s*\(.*?\)\s*\{([\s\S]*?)\}")
"""Keyword, parenthesized header, then a non-greedy body up to the first ``}``."""


@dataclass(frozen=True)
class LoopMatch:
    """One detected loop: its kind, keyword line, captured body and offset."""

    loop_kind: LoopKind
    start_line: int
    body: str
    offset: int


class LoopLocator(Protocol):
    """Contract for anything that can enumerate loops in source text."""

    def iter_loops(self, text: str) -> Iterator[LoopMatch]: ...


class RegexLoopLocator(LoopLocator):
    """Pattern-based locator with first-closing-brace body capture."""

    def iter_loops(self, text: str) -> Iterator[LoopMatch]:
        for match in LOOP_PATTERN.finditer(text):
            offset = match.start()
            yield LoopMatch(
                loop_kind=LoopKind.from_keyword(match.group(1)),
                start_line=line_number_at(text, offset),
                body=match.group(2),
                offset=offset,
            )


def line_number_at(text: str, offset: int) -> int:
    """Return the 1-based line containing ``offset`` in the raw text."""

    return text.count("\n", 0, offset) + 1


DEFAULT_LOOP_LOCATOR: LoopLocator = RegexLoopLocator()


def iter_loops(text: str) -> Iterator[LoopMatch]:
    """Yield loops in the order their keyword appears, using the default locator."""

    return DEFAULT_LOOP_LOCATOR.iter_loops(text)
