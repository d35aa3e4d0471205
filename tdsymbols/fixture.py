"""In-memory file system built from annotated fixture text."""

from __future__ import annotations

from collections import deque
from itertools import dropwhile
from pathlib import Path
from typing import Optional

from tdsymbols.file_system import (
    FileId,
    FilePosition,
    FileRange,
    FileSet,
    FileSystem,
    PathLike,
    TextRange,
)

DEFAULT_FILE_PATH = "/main.td"
MARKER_INDICATOR = "$"
_HEADER_PREFIX = "; "


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Fixture(FileSystem):
    """Files given as text, with `$` marking cursor positions.

    With several files, each starts with a header line `; <path>`.
    """

    def __init__(self) -> None:
        self._file_contents: dict[Path, str] = {}
        self._file_ids: list[FileId] = []
        self._markers: list[FilePosition] = []
        self._file_set = FileSet()
        self._next_file_id = 0

    @classmethod
    def single_file(cls, fixture: str) -> Fixture:
        this = cls()
        content = this._parse_file(deque(_lines(fixture)))
        this._insert_file(Path(DEFAULT_FILE_PATH), content)
        return this

    @classmethod
    def multiple_files(cls, fixture: str) -> Fixture:
        this = cls()
        lines = deque(
            dropwhile(lambda line: not line.startswith(_HEADER_PREFIX), _lines(fixture))
        )
        while lines:
            header = lines.popleft()
            path = Path(header[len(_HEADER_PREFIX):])
            content = this._parse_file(lines)
            this._insert_file(path, content)
        return this

    def _parse_file(self, lines: deque[str]) -> str:
        content = ""
        while lines and not lines[0].startswith(_HEADER_PREFIX):
            if content:
                content += "\n"
            for char in lines.popleft():
                if char == MARKER_INDICATOR:
                    self._markers.append(
                        FilePosition(FileId(self._next_file_id), len(content))
                    )
                else:
                    content += char
        return content

    def _insert_file(self, path: Path, content: str) -> None:
        if path in self._file_contents:
            raise ValueError(f"duplicate file path: {path}")
        self._file_contents[path] = content
        file_id = self._alloc_file_id()
        self._file_set.insert(file_id, path)
        self._file_ids.append(file_id)

    def _alloc_file_id(self) -> FileId:
        file_id = FileId(self._next_file_id)
        self._next_file_id += 1
        return file_id

    def files(self) -> list[tuple[FileId, str]]:
        """Return every fixture file with its content."""
        return [
            (self._file_set.file_for_path(path), content)
            for path, content in self._file_contents.items()
        ]

    def root_file(self) -> FileId:
        if not self._file_ids:
            raise ValueError("at least one file must exist")
        return self._file_ids[0]

    def marker(self, index: int) -> FilePosition:
        return self._markers[index]

    def full_range(self, file: FileId) -> FileRange:
        return FileRange(file, TextRange(0, len(self.file_content(file))))

    def file_content(self, file_id: FileId) -> str:
        return self._file_contents[self._file_set.path_for_file(file_id)]

    def assign_or_get_file_id(self, path: PathLike) -> FileId:
        file_id = self._file_set.file_for_path(path)
        if file_id is None:
            file_id = self._alloc_file_id()
            self._file_set.insert(file_id, path)
        return file_id

    def path_for_file(self, file_id: FileId) -> Path:
        return self._file_set.path_for_file(file_id)

    def read_content(self, file_path: PathLike) -> Optional[str]:
        return self._file_contents.get(Path(file_path))