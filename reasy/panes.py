"""Panes of the editor layout and the file tree state they carry."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

from reasy.flat_tree import FlatTree, TreeBuilder, TreeNode
from reasy.settings import EditorSettings, FileTreeSettings

logger = logging.getLogger(__name__)

CONSOLE_HELP = "Available commands: clear, help, hello"
CONSOLE_GREETING = "Hello there!"


@dataclass(frozen=True)
class KeyPress:
    """A key press delivered to the editor as a user event."""

    key: str

    def __str__(self) -> str:
        return f"User key press: {self.key}"


class PaneKind(Enum):
    """Kind of pane, used to tell which panes need reloading."""

    FILE_TREE = "FileTree"
    INSPECTOR = "Inspector"
    CONSOLE = "Console"
    EMPTY = "Empty"


@dataclass(frozen=True)
class Rename:
    """Queued request to rename a node of the file tree."""

    node_id: int
    new_name: str


@dataclass(frozen=True)
class Delete:
    """Queued request to remove a node of the file tree."""

    node_id: int


Operation = Union[Rename, Delete]


@dataclass
class UiDirectory:
    """File tree state: the whole tree plus the cached ids of displayed nodes."""

    flat_tree: FlatTree
    display_tree: list[int] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)
    user_input: str | None = None

    def reload(self, settings: FileTreeSettings) -> None:
        """Collapse hidden directories when hidden items are not shown and recompute the display."""
        to_collapse = [
            node.id
            for node in self.flat_tree.get_visible_items()
            if not (settings.show_hidden_elements or not node.file_entry.is_hidden())
            and node.file_entry.is_dir
            and node.expanded
        ]
        for dir_id in to_collapse:
            self.flat_tree.toggle_visibility(dir_id)

        display: list[int] = []
        shown: set[int] = set()
        for node in self.flat_tree.get_visible_items():
            if node.depth == 0 or node.parent in shown:
                display.append(node.id)
                shown.add(node.id)
        self.display_tree = display

    def queue_operation(self, operation: Operation) -> None:
        """Queue an operation unless an equal one is already queued."""
        if operation not in self.operations:
            self.operations.append(operation)

    def execute_operations(self) -> None:
        """Run queued operations, most recent first; call :meth:`reload` afterwards."""
        while self.operations:
            operation = self.operations.pop()
            if isinstance(operation, Rename):
                old = self.flat_tree.rename(operation.node_id, operation.new_name)
                if old is not None:
                    logger.info(
                        "Renamed node: %s from %s to %s",
                        operation.node_id,
                        old,
                        operation.new_name,
                    )
            else:
                node = self.flat_tree.remove(operation.node_id)
                if node is not None:
                    logger.info("Removed node: %s", node.file_entry.path)

    def toggle_dirs(self, ids: list[int]) -> None:
        """Toggle the given directories and rebuild the displayed order."""
        if not ids:
            return
        for dir_id in ids:
            self.flat_tree.toggle_visibility(dir_id)
        self.display_tree = [node.id for node in self.flat_tree.get_visible_items()]

    def visible_nodes(self) -> list[TreeNode]:
        """Nodes currently displayed, in display order."""
        return self.flat_tree.get_children_from_ids(self.display_tree)


@dataclass
class FileTreePane:
    """Content of the file tree pane."""

    directory: UiDirectory
    settings: FileTreeSettings


@dataclass
class InspectorPane:
    """Content of the variable inspector pane."""

    variables: dict[str, str] = field(default_factory=dict)
    new_key: str = ""
    new_value: str = ""

    def add_variable(self) -> bool:
        """Store the pending key and value; returns whether anything was added."""
        if not self.new_key:
            return False
        self.variables[self.new_key] = self.new_value
        self.new_key = ""
        self.new_value = ""
        return True

    def remove_variable(self, key: str) -> None:
        """Remove a variable if present."""
        self.variables.pop(key, None)


@dataclass
class ConsolePane:
    """Content of the console pane."""

    messages: list[str] = field(default_factory=list)
    input: str = ""

    def submit(self) -> None:
        """Run the command in the input line and clear it."""
        if not self.input:
            return
        command = self.input
        self.messages.append(f"> {command}")
        if command == "clear":
            self.messages.clear()
        elif command == "help":
            self.messages.append(CONSOLE_HELP)
        elif command == "hello":
            self.messages.append(CONSOLE_GREETING)
        else:
            self.messages.append(f"Unknown command: {command}")
        self.input = ""


@dataclass
class EmptyPane:
    """Placeholder pane content."""

    heading: str = "Empty Pane"
    label: str = "This pane is ready for your content!"


PaneContent = Union[FileTreePane, InspectorPane, ConsolePane, EmptyPane]


@dataclass
class Pane:
    """A leaf of the layout tree."""

    pane_id: int
    content: PaneContent
    title: str
    kind: PaneKind

    def tab_title(self) -> str:
        """Title shown on the pane's tab."""
        return f"Pane {self.title}"

    def reload_with_settings(self, new_settings: FileTreeSettings) -> None:
        """Apply new file tree settings and reload the directory view."""
        if not isinstance(self.content, FileTreePane):
            raise ValueError(f"pane {self.title!r} does not take file tree settings")
        self.content.settings = FileTreeSettings(new_settings.show_hidden_elements)
        self.content.directory.reload(new_settings)

    def file_dropped(self, path: str | os.PathLike[str]) -> str:
        """Report a file dropped onto the pane and return the report."""
        shown = str(Path(path))
        if isinstance(self.content, FileTreePane):
            message = f"File dropped in filetree: {shown}"
        elif isinstance(self.content, InspectorPane):
            message = f"File dropped in Inspector: {shown}"
        elif isinstance(self.content, ConsolePane):
            message = f"File dropped in console: {shown}"
        else:
            message = f"File dropped in empty pane: {shown}"
        logger.info(message)
        return message


def create_panes(
    settings: EditorSettings, path: str | os.PathLike[str] | None = None
) -> list[Pane]:
    """Build the editor's panes: file tree, inspector, console and main editor."""
    builder = TreeBuilder(path)
    builder.build()
    tree = builder.get_tree()
    directory = UiDirectory(
        flat_tree=tree,
        display_tree=[node.id for node in tree.get_visible_items()],
    )
    return [
        Pane(
            0,
            FileTreePane(directory, settings.to_file_tree_settings()),
            "File Tree",
            PaneKind.FILE_TREE,
        ),
        Pane(
            1,
            InspectorPane(variables={"debug": "true", "max_iterations": "100"}),
            "Variables",
            PaneKind.INSPECTOR,
        ),
        Pane(
            2,
            ConsolePane(
                messages=[
                    "Console initialized",
                    "Type 'help' for available commands",
                ]
            ),
            "Console",
            PaneKind.INSPECTOR,
        ),
        Pane(3, EmptyPane(), "Main Editor", PaneKind.EMPTY),
    ]