"""Directory listing and JSON file helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from reasy.errors import EditorIoError, ErrorType, wrap_error

_FILE_ATTRIBUTE_HIDDEN = 0x2


@dataclass
class FileEntry:
    """A directory entry together with its metadata."""

    name: str
    parent: str = field(repr=False)
    path: Path = field(repr=False)
    is_dir: bool = field(repr=False)
    is_file: bool = field(repr=False)
    is_symlink: bool = field(repr=False)
    size: int | None = field(repr=False)
    modified: float | None = field(repr=False)
    stat: os.stat_result = field(repr=False, compare=False)

    def is_hidden(self) -> bool:
        """Whether the entry is hidden (file attribute where available, else dotfile)."""
        attributes = getattr(self.stat, "st_file_attributes", None)
        if attributes is not None:
            return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
        return self.name.startswith(".")


def file_entry_from_path(path: str | os.PathLike[str]) -> FileEntry:
    """Build a :class:`FileEntry` for ``path`` without following symlinks."""
    full_path = Path(path)
    try:
        stat = os.lstat(full_path)
    except OSError as exc:
        raise wrap_error(exc) from exc
    parts = full_path.parts
    parent = parts[-2] if len(parts) >= 2 else "."
    mode = stat.st_mode
    import stat as stat_mod

    return FileEntry(
        name=full_path.name,
        parent=parent,
        path=full_path,
        is_dir=stat_mod.S_ISDIR(mode),
        is_file=stat_mod.S_ISREG(mode),
        is_symlink=stat_mod.S_ISLNK(mode),
        size=stat.st_size,
        modified=stat.st_mtime,
        stat=stat,
    )


def read_directory(path: str | os.PathLike[str]) -> list[FileEntry]:
    """List one directory level; does not recurse."""
    directory = Path(path)
    if not directory.is_dir():
        raise EditorIoError("Path not a directory", ErrorType.NOT_A_DIRECTORY)
    try:
        children = list(directory.iterdir())
    except OSError as exc:
        raise wrap_error(exc) from exc
    return [file_entry_from_path(child) for child in children]


def read_serialized_data(path: str | os.PathLike[str]) -> Any:
    """Read a JSON file and return the decoded value."""
    try:
        content = Path(path).read_text(encoding="utf-8")
        return json.loads(content)
    except (OSError, ValueError) as exc:
        raise wrap_error(exc) from exc


def write_serialized_data(data: Any, path: str | os.PathLike[str]) -> None:
    """Write ``data`` to ``path`` as indented JSON."""
    try:
        content = json.dumps(data, indent=2)
    except (TypeError, ValueError) as exc:
        raise wrap_error(exc) from exc
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise wrap_error(exc) from exc