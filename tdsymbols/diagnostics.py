"""Diagnostics and their grouping by file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tdsymbols.file_system import FileId, FileRange, SourceRoot


@dataclass(frozen=True)
class Diagnostic:
    """A message attached to a range of a file."""

    location: FileRange
    message: str


def group_by_file(
    source_root: SourceRoot, diagnostics: Iterable[Diagnostic]
) -> dict[FileId, list[Diagnostic]]:
    """Group diagnostics by file; every file of the source root gets an entry."""
    grouped: dict[FileId, list[Diagnostic]] = {
        file_id: [] for file_id in source_root.iter_files()
    }
    for diagnostic in diagnostics:
        grouped.setdefault(diagnostic.location.file, []).append(diagnostic)
    return grouped