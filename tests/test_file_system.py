from pathlib import Path

import pytest

from tdsymbols.file_system import (
    FileId,
    FilePosition,
    FileRange,
    FileSet,
    FileSystem,
    SourceRoot,
    TextRange,
)


def test_text_range_empty_and_non_empty():
    assert TextRange(3, 3).is_empty() is True
    assert TextRange(3, 7).is_empty() is False


def test_text_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        TextRange(5, 2)


def test_file_range_and_position_compare_by_value():
    r1 = FileRange(FileId(1), TextRange(0, 4))
    r2 = FileRange(FileId(1), TextRange(0, 4))
    assert r1 == r2
    assert hash(r1) == hash(r2)
    assert FilePosition(FileId(2), 9).position == 9


def test_file_id_ordering():
    assert sorted([FileId(2), FileId(0), FileId(1)]) == [FileId(0), FileId(1), FileId(2)]


def test_file_set_round_trip():
    fs = FileSet()
    fs.insert(FileId(0), "/main.td")
    fs.insert(FileId(1), Path("/sub.td"))
    assert fs.file_for_path("/main.td") == FileId(0)
    assert fs.file_for_path(Path("/sub.td")) == FileId(1)
    assert fs.path_for_file(FileId(1)) == Path("/sub.td")
    assert fs.contains(FileId(0))
    assert FileId(1) in fs


def test_file_set_unknown_lookups():
    fs = FileSet()
    assert fs.file_for_path("/nothing.td") is None
    assert fs.contains(FileId(7)) is False
    with pytest.raises(KeyError):
        fs.path_for_file(FileId(7))


def test_file_set_remove():
    fs = FileSet()
    fs.insert(FileId(0), "/a.td")
    fs.remove(FileId(0))
    assert fs.contains(FileId(0)) is False
    assert fs.file_for_path("/a.td") is None
    fs.remove(FileId(0))
    assert list(fs.iter_files()) == []


def test_file_set_iter_files():
    fs = FileSet()
    fs.insert(FileId(0), "/a.td")
    fs.insert(FileId(1), "/b.td")
    assert sorted(fs.iter_files()) == [FileId(0), FileId(1)]


def test_source_root_delegates_to_file_set():
    fs = FileSet()
    fs.insert(FileId(0), "/main.td")
    fs.insert(FileId(1), "/inc/sub.td")
    root = SourceRoot(fs, FileId(0))
    assert root.root == FileId(0)
    assert root.file_for_path("/inc/sub.td") == FileId(1)
    assert root.path_for_file(FileId(0)) == Path("/main.td")
    assert set(root.iter_files()) == {FileId(0), FileId(1)}


def test_file_system_is_abstract():
    with pytest.raises(TypeError):
        FileSystem()


class _MemoryFs(FileSystem):
    def __init__(self, contents):
        self.contents = {Path(p): c for p, c in contents.items()}
        self.files = FileSet()
        self.next_id = 0

    def assign_or_get_file_id(self, path):
        found = self.files.file_for_path(path)
        if found is not None:
            return found
        file_id = FileId(self.next_id)
        self.next_id += 1
        self.files.insert(file_id, path)
        return file_id

    def path_for_file(self, file_id):
        return self.files.path_for_file(file_id)

    def read_content(self, file_path):
        return self.contents.get(Path(file_path))


def test_concrete_file_system():
    fs = _MemoryFs({"/main.td": "class Foo;"})
    first = fs.assign_or_get_file_id("/main.td")
    assert first == FileId(0)
    assert fs.assign_or_get_file_id("/main.td") == FileId(0)
    assert fs.assign_or_get_file_id("/other.td") == FileId(1)
    assert fs.files.file_for_path(Path("/other.td")) == FileId(1)
    assert fs.files.path_for_file(FileId(0)) == Path("/main.td")
    assert fs.path_for_file(first) == Path("/main.td")
    assert fs.read_content("/main.td") == "class Foo;"
    assert fs.read_content("/missing.td") is None