"""File system backed by the disk, and conversion between paths and file URIs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

from tdsymbols.file_system import FileId, FileSet, FileSystem, PathLike

logger = logging.getLogger(__name__)


class Vfs(FileSystem):
    """Assigns file identifiers to paths and reads files from disk."""

    def __init__(self) -> None:
        self._file_set = FileSet()
        self._next_file_id = 0

    def file_for_path(self, path: PathLike) -> Optional[FileId]:
        return self._file_set.file_for_path(path)

    def assign_or_get_file_id(self, path: PathLike) -> FileId:
        file_id = self._file_set.file_for_path(path)
        if file_id is None:
            file_id = FileId(self._next_file_id)
            self._next_file_id += 1
            logger.debug("assign file id: %s -> %r", path, file_id)
            self._file_set.insert(file_id, path)
        return file_id

    def path_for_file(self, file_id: FileId) -> Path:
        return self._file_set.path_for_file(file_id)

    def read_content(self, file_path: PathLike) -> Optional[str]:
        try:
            return Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.info("failed to read file: file_path=%s", file_path)
            return None


def path_from_uri(uri: str) -> Path:
    """Return the path a `file:` URI names; raises ValueError for other URIs."""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise ValueError(f"not a file URI: {uri}")
    if parsed.netloc not in ("", "localhost"):
        raise ValueError(f"file URI with a remote host: {uri}")
    return Path(url2pathname(parsed.path))


def uri_from_path(path: PathLike) -> str:
    """Return the `file:` URI of an absolute path; raises ValueError otherwise."""
    return Path(path).as_uri()