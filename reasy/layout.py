"""Editor layout: the set of panes, their screen areas and file-drop routing."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from reasy.panes import Pane, PaneKind, create_panes
from reasy.settings import EditorSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned screen rectangle in logical points."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


class EditorLayout:
    """Holds the editor's panes and routes settings changes and dropped files to them."""

    def __init__(
        self,
        settings: EditorSettings,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.panes: list[Pane] = create_panes(settings, path)
        self.dropped_files: list[Path] = []
        self._rects: dict[int, Rect] = {}

    def reload(self, ui_changes: Iterable[PaneKind], settings: EditorSettings) -> None:
        """Reload every pane whose kind appears in ``ui_changes`` with new settings."""
        changed = set(ui_changes)
        targets = [pane for pane in self.panes if pane.kind in changed]
        new_settings = settings.to_file_tree_settings()
        for pane in targets:
            pane.reload_with_settings(new_settings)

    def file_hovered(self, file: str | os.PathLike[str]) -> None:
        """Remember a file being dragged over the window."""
        self.dropped_files.append(Path(file))

    def clear_dropped_list(self) -> None:
        """Forget all files being dragged."""
        self.dropped_files.clear()

    def set_rect(self, index: int, rect: Rect) -> None:
        """Record the screen area occupied by the pane at ``index``."""
        if not 0 <= index < len(self.panes):
            raise IndexError(f"no pane at index {index}")
        self._rects[index] = rect

    def handle_file_drop(self, drop_pos: tuple[float, float] | None) -> list[str]:
        """Deliver remembered files to every pane under ``drop_pos``; returns the reports."""
        if drop_pos is None:
            logger.error("Error: No drop position acquired.")
            return []
        x, y = drop_pos
        files = list(self.dropped_files)
        reports: list[str] = []
        for index, pane in enumerate(self.panes):
            rect = self._rects.get(index)
            if rect is None or not rect.contains(x, y):
                continue
            reports.extend(pane.file_dropped(file) for file in files)
        self.dropped_files.clear()
        return reports