"""Files, positions and ranges, and the sets of files a source root spans."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True, order=True)
class FileId:
    """Identifier of a file known to a file system."""

    value: int


@dataclass(frozen=True)
class TextRange:
    """Half-open range of offsets within a text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"invalid range: start {self.start} > end {self.end}")

    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class FilePosition:
    """An offset within a file."""

    file: FileId
    position: int


@dataclass(frozen=True)
class FileRange:
    """A range within a file."""

    file: FileId
    range: TextRange


@dataclass
class FileSet:
    """Two-way mapping between file identifiers and paths."""

    _path_to_id: dict[Path, FileId] = field(default_factory=dict)
    _id_to_path: dict[FileId, Path] = field(default_factory=dict)

    def insert(self, file_id: FileId, path: PathLike) -> None:
        path = Path(path)
        self._path_to_id[path] = file_id
        self._id_to_path[file_id] = path

    def remove(self, file_id: FileId) -> None:
        path = self._id_to_path.pop(file_id, None)
        if path is not None:
            self._path_to_id.pop(path, None)

    def contains(self, file_id: FileId) -> bool:
        return file_id in self._id_to_path

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._id_to_path

    def file_for_path(self, path: PathLike) -> Optional[FileId]:
        return self._path_to_id.get(Path(path))

    def path_for_file(self, file_id: FileId) -> Path:
        """Return the path of a file; raises KeyError for an unknown file."""
        return self._id_to_path[file_id]

    def iter_files(self) -> Iterator[FileId]:
        yield from self._id_to_path


@dataclass
class SourceRoot:
    """The files reachable from one root file."""

    file_set: FileSet
    root: FileId

    def file_for_path(self, path: PathLike) -> Optional[FileId]:
        return self.file_set.file_for_path(path)

    def path_for_file(self, file_id: FileId) -> Path:
        return self.file_set.path_for_file(file_id)

    def iter_files(self) -> Iterator[FileId]:
        return self.file_set.iter_files()


class FileSystem(ABC):
    """Source of file identifiers and file contents."""

    @abstractmethod
    def assign_or_get_file_id(self, path: PathLike) -> FileId:
        """Return the identifier of a path, assigning a new one if needed."""

    @abstractmethod
    def path_for_file(self, file_id: FileId) -> Path:
        """Return the path of a known file."""

    @abstractmethod
    def read_content(self, file_path: PathLike) -> Optional[str]:
        """Return the text of a file, or None if it cannot be read."""