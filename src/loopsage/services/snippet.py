"""Render line-numbered context windows around a source line."""

from __future__ import annotations

DEFAULT_CONTEXT_LINES = 3
"""Lines of context shown before and after the target line."""


def _normalized_lines(text: str) -> list[str]:
    return text.replace("\t", "  ").replace("\r", "").split("\n")


def format_line(number: int, content: str) -> str:
    """Render a single line as ``Line <nnn> | <content>``."""

    return f"Line {number:>3} | {content}"


def render_snippet(
    text: str, line: int, context: int = DEFAULT_CONTEXT_LINES
) -> list[str]:
    """
    Return the lines surrounding ``line`` (1-based), clamped to the file.

    Tabs are expanded to two spaces and carriage returns are dropped in the
    rendered content only; numbering follows the original text.
    """

    lines = _normalized_lines(text)
    start = max(line - context, 1)
    end = min(line + context, len(lines))
    return [format_line(number, lines[number - 1]) for number in range(start, end + 1)]
