"""Editor settings and their persistence."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from reasy.errors import EditorIoError, ErrorType, wrap_error
from reasy.fileio import read_serialized_data, write_serialized_data

SETTINGS_FILE_NAME = "settings.json"


@dataclass
class FileTreeSettings:
    """Preferences of the file tree pane."""

    show_hidden_elements: bool = False


@dataclass
class EditorSettings:
    """All persisted preferences of the editor."""

    show_hidden_elements: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {"show_hidden_elements": self.show_hidden_elements}

    def to_file_tree_settings(self) -> FileTreeSettings:
        """Return the part of the settings that concerns the file tree."""
        return FileTreeSettings(show_hidden_elements=self.show_hidden_elements)


def settings_from_dict(data: Any) -> EditorSettings:
    """Build settings from decoded JSON, rejecting missing or mistyped fields."""
    if not isinstance(data, dict):
        raise EditorIoError(
            f"invalid type: expected struct EditorSettings, got {type(data).__name__}",
            ErrorType.OTHER,
        )
    if "show_hidden_elements" not in data:
        raise EditorIoError("missing field `show_hidden_elements`", ErrorType.OTHER)
    value = data["show_hidden_elements"]
    if not isinstance(value, bool):
        raise EditorIoError(
            f"invalid type: {value!r}, expected a boolean", ErrorType.OTHER
        )
    return EditorSettings(show_hidden_elements=value)


def settings_path(root: str | os.PathLike[str]) -> Path:
    """Location of the settings file inside ``root``."""
    return Path(root) / SETTINGS_FILE_NAME


def load_settings(root: str | os.PathLike[str]) -> EditorSettings:
    """Load saved settings from ``root``, or defaults when none are saved."""
    path = settings_path(root)
    try:
        path.stat()
    except FileNotFoundError:
        return EditorSettings()
    except OSError as exc:
        raise wrap_error(exc) from exc
    return settings_from_dict(read_serialized_data(path))


def save_settings(settings: EditorSettings, root: str | os.PathLike[str]) -> None:
    """Write ``settings`` to the settings file inside ``root``."""
    write_serialized_data(settings.to_dict(), settings_path(root))