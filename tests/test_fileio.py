import os

import pytest

from reasy.errors import EditorIoError, ErrorType
from reasy.fileio import (
    FileEntry,
    file_entry_from_path,
    read_directory,
    read_serialized_data,
    write_serialized_data,
)


@pytest.fixture
def sample_dir(tmp_path):
    (tmp_path / "file.txt").write_text("hello")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_read_directory_lists_entries(sample_dir):
    entries = read_directory(sample_dir)
    by_name = {entry.name: entry for entry in entries}
    assert set(by_name) == {"file.txt", "sub"}
    assert by_name["sub"].is_dir and not by_name["sub"].is_file
    assert by_name["file.txt"].is_file and not by_name["file.txt"].is_dir
    assert by_name["file.txt"].size == len("hello")


def test_read_directory_parent_is_directory_name(sample_dir):
    entries = read_directory(sample_dir)
    assert all(entry.parent == sample_dir.name for entry in entries)
    assert all(entry.path.parent == sample_dir for entry in entries)


def test_read_directory_does_not_recurse(sample_dir):
    (sample_dir / "sub" / "inner.txt").write_text("x")
    names = {entry.name for entry in read_directory(sample_dir)}
    assert "inner.txt" not in names


def test_read_directory_on_file_raises(sample_dir):
    with pytest.raises(EditorIoError) as info:
        read_directory(sample_dir / "file.txt")
    assert info.value.error_type is ErrorType.NOT_A_DIRECTORY


def test_read_directory_on_missing_path_raises(tmp_path):
    with pytest.raises(EditorIoError) as info:
        read_directory(tmp_path / "missing")
    assert info.value.error_type is ErrorType.NOT_A_DIRECTORY


def test_file_entry_from_path(sample_dir):
    entry = file_entry_from_path(sample_dir / "file.txt")
    assert entry.name == "file.txt"
    assert entry.is_file
    assert not entry.is_symlink
    assert entry.modified == os.lstat(sample_dir / "file.txt").st_mtime


def test_file_entry_repr_shows_name_only(sample_dir):
    entry = file_entry_from_path(sample_dir / "file.txt")
    assert repr(entry) == "FileEntry(name='file.txt')"


def _entry(name):
    stat = os.stat_result((0o100644, 0, 0, 1, 0, 0, 0, 0, 0, 0))
    return FileEntry(
        name=name,
        parent=".",
        path=os.path.join(".", name),
        is_dir=False,
        is_file=True,
        is_symlink=False,
        size=0,
        modified=None,
        stat=stat,
    )


def test_is_hidden_falls_back_to_dotfile():
    assert _entry(".secret_dir").is_hidden()
    assert not _entry("visible.txt").is_hidden()


def test_json_round_trip(tmp_path):
    target = tmp_path / "data.json"
    data = {"a": [1, 2, 3], "b": {"c": True}}
    write_serialized_data(data, target)
    assert read_serialized_data(target) == data


def test_read_missing_file_raises_not_found(tmp_path):
    with pytest.raises(EditorIoError) as info:
        read_serialized_data(tmp_path / "nope.json")
    assert info.value.error_type is ErrorType.NOT_FOUND


def test_read_invalid_json_raises_other(tmp_path):
    target = tmp_path / "bad.json"
    target.write_text("{broken")
    with pytest.raises(EditorIoError) as info:
        read_serialized_data(target)
    assert info.value.error_type is ErrorType.OTHER


def test_write_unserializable_raises(tmp_path):
    with pytest.raises(EditorIoError) as info:
        write_serialized_data({"x": object()}, tmp_path / "out.json")
    assert info.value.error_type is ErrorType.OTHER
    assert not (tmp_path / "out.json").exists()