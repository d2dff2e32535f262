"""Load source files for analysis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

_LOG = logging.getLogger(__name__)


class UnreadableSourceError(Exception):
    """Raised when a source file is missing, unreadable, or not UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class SourceDocument:
    """Source text plus the base name used to label its report."""

    path: Path
    base_name: str
    text: str


def base_name_for(path: Path) -> str:
    """Return the file name without its final suffix (``Foo.cls`` -> ``Foo``)."""

    return path.stem


def read_source(path: str | Path) -> SourceDocument:
    """
    Read ``path`` as UTF-8 text, raising :class:`UnreadableSourceError`.

    Line endings are kept as stored so loop line numbers match the file.
    """

    source_path = Path(path).resolve()
    try:
        text = source_path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnreadableSourceError(source_path, "not valid UTF-8") from exc
    except OSError as exc:
        raise UnreadableSourceError(source_path, exc.strerror or str(exc)) from exc

    _LOG.debug("Read %d characters from %s", len(text), source_path)
    return SourceDocument(
        path=source_path, base_name=base_name_for(source_path), text=text
    )
