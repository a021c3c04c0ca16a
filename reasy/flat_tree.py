"""Flat, id-indexed representation of a directory tree for the file tree pane."""

from __future__ import annotations

import copy
import dataclasses
import hashlib
import os
from dataclasses import dataclass, field
from pathlib import Path

from reasy.errors import EditorIoError, ErrorType
from reasy.fileio import FileEntry, read_directory

ROOT_PARENT = 0


def path_to_id(path: str | os.PathLike[str]) -> int:
    """Stable numeric id for ``path``, computed from its canonical form when it exists."""
    raw = Path(path)
    try:
        canonical = raw.resolve(strict=True)
    except (OSError, RuntimeError):
        canonical = raw
    digest = hashlib.blake2b(
        os.fsencode(str(canonical)), digest_size=8
    ).digest()
    return int.from_bytes(digest, "big")


@dataclass(eq=False)
class TreeNode:
    """One entry of a :class:`FlatTree`."""

    id: int
    depth: int
    file_entry: FileEntry
    children: list[int] = field(default_factory=list, repr=False)
    parent: int = field(default=ROOT_PARENT, repr=False)
    visible: bool = field(default=False, repr=False)
    expanded: bool = field(default=False, repr=False)

    def sort_key(self) -> tuple[bool, str]:
        """Ordering key: directories first, then by name."""
        return (not self.file_entry.is_dir, self.file_entry.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.id == other.id and self.depth == other.depth

    def __hash__(self) -> int:
        return hash((self.id, self.depth))

    def __lt__(self, other: TreeNode) -> bool:
        return self.sort_key() < other.sort_key()


class FlatTree:
    """Directory tree stored as a flat list of nodes with an id lookup."""

    def __init__(self) -> None:
        self.elements: list[TreeNode] = []
        self._lookup: dict[int, int] = {}

    def __repr__(self) -> str:
        return f"FlatTree(elements={self.elements!r})"

    def __len__(self) -> int:
        return len(self.elements)

    def get_node(self, node_id: int) -> TreeNode | None:
        """Return the node with ``node_id``, or ``None``."""
        index = self._lookup.get(node_id)
        return None if index is None else self.elements[index]

    def _rebuild_index(self) -> None:
        self._lookup = {node.id: index for index, node in enumerate(self.elements)}

    def _append(self, node: TreeNode) -> None:
        self.elements.append(node)
        self._lookup[node.id] = len(self.elements) - 1

    def _find_by_path(self, path: Path) -> TreeNode | None:
        return next(
            (node for node in self.elements if node.file_entry.path == path), None
        )

    def build(self, directory: list[FileEntry]) -> None:
        """Add one layer of entries: roots when empty, otherwise children of known nodes."""
        if not self.elements:
            for entry in directory:
                self._append(
                    TreeNode(
                        id=path_to_id(entry.path),
                        depth=0,
                        file_entry=dataclasses.replace(entry),
                        parent=ROOT_PARENT,
                        visible=True,
                    )
                )
        else:
            for entry in directory:
                node_id = path_to_id(entry.path)
                if node_id in self._lookup:
                    continue
                parent = self._find_by_path(Path(entry.path).parent)
                if parent is None:
                    continue
                self._append(
                    TreeNode(
                        id=node_id,
                        depth=parent.depth + 1,
                        file_entry=dataclasses.replace(entry),
                        parent=parent.id,
                    )
                )
                if node_id not in parent.children:
                    parent.children.append(node_id)
        self._rebuild_index()

    def get_visible_items(self) -> list[TreeNode]:
        """Visible nodes in display order, children placed under expanded parents."""
        structure: list[TreeNode] = []
        max_depth = max((node.depth for node in self.elements), default=0)

        for depth in range(max_depth + 1):
            groups: dict[int, list[TreeNode]] = {}
            for node in self.elements:
                if node.depth == depth and node.visible:
                    groups.setdefault(node.parent, []).append(node)

            for parent_id, items in groups.items():
                items.sort(key=TreeNode.sort_key)
                if parent_id == ROOT_PARENT:
                    structure.extend(items)
                    continue

                parent = self.get_node(parent_id)
                if parent is None or not parent.expanded:
                    continue

                insert_pos = len(structure)
                parent_pos = next(
                    (i for i, node in enumerate(structure) if node.id == parent_id),
                    None,
                )
                if parent_pos is not None:
                    insert_pos = parent_pos + 1
                    for offset, node in enumerate(structure[parent_pos + 1:]):
                        if node.parent != parent_id:
                            break
                        insert_pos = parent_pos + offset + 2
                structure[insert_pos:insert_pos] = items

        return structure

    def toggle_visibility(self, node_id: int) -> None:
        """Expand or collapse a directory; a hidden node is hidden with its subtree."""
        node = self.get_node(node_id)
        if node is None:
            return
        children = list(node.children)
        if node.visible and node.expanded:
            node.expanded = False
            self._set_children_visible(children, False)
            self._set_children_expanded(children, False)
        elif node.visible:
            node.expanded = True
            self._set_children_visible(children, True)
        else:
            node.visible = False
            node.expanded = False
            self._set_children_visible(children, False)

    def _set_children_expanded(self, children: list[int], expanded: bool) -> None:
        for child_id in children:
            child = self.get_node(child_id)
            if child is not None:
                child.expanded = expanded

    def _set_children_visible(self, children: list[int], visible: bool) -> None:
        for child_id in children:
            child = self.get_node(child_id)
            if child is None:
                continue
            child.visible = visible
            if not visible:
                self._set_children_visible(list(child.children), False)

    def get_children_from_ids(self, ids: list[int]) -> list[TreeNode]:
        """Nodes for ``ids`` in the given order, skipping unknown ids."""
        return [node for node in map(self.get_node, ids) if node is not None]

    def remove(self, node_id: int) -> TreeNode | None:
        """Remove a node and, for directories, its whole subtree."""
        node = self.get_node(node_id)
        if node is None:
            return None
        doomed: set[int] = set()
        pending = [node_id]
        while pending:
            current = self.get_node(pending.pop())
            if current is None or current.id in doomed:
                continue
            doomed.add(current.id)
            if current.file_entry.is_dir:
                pending.extend(current.children)
        self.elements = [n for n in self.elements if n.id not in doomed]
        self._rebuild_index()
        parent = self.get_node(node.parent)
        if parent is not None and node_id in parent.children:
            parent.children.remove(node_id)
        return node

    def rename(self, node_id: int, new_name: str) -> str | None:
        """Rename a node and update the paths below it; returns the old path."""
        node = self.get_node(node_id)
        if node is None:
            return None
        old_path = str(node.file_entry.path)
        new_path = Path(node.file_entry.path).with_name(new_name)
        node.file_entry.name = new_name
        node.file_entry.path = new_path
        if node.file_entry.is_dir:
            self._move_children(node, new_path)
        return old_path

    def _move_children(self, node: TreeNode, new_parent_path: Path) -> None:
        for child in self.get_children_from_ids(node.children):
            child.file_entry.path = new_parent_path / child.file_entry.name
            child.file_entry.parent = str(new_parent_path)
            if child.file_entry.is_dir:
                self._move_children(child, child.file_entry.path)


class TreeBuilder:
    """Builds a :class:`FlatTree` breadth-first, one directory level at a time."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        root = Path(path) if path is not None else Path.cwd()
        entries = read_directory(root)
        self._current: list[FileEntry] | None = entries
        self._next: list[FileEntry] | None = [e for e in entries if e.is_dir]
        self._tree = FlatTree()

    def _build_layer(self) -> bool:
        if self._current is None:
            return False
        current, self._current = self._current, None
        self._tree.build(current)
        return True

    def _advance(self) -> None:
        if self._current is not None:
            raise EditorIoError("Overwriting file entries", ErrorType.INTERRUPTED)
        next_items: list[FileEntry] = []
        next_dirs: list[FileEntry] = []
        pending, self._next = self._next or [], None
        for item in pending:
            if not item.is_dir:
                continue
            for entry in read_directory(item.path):
                if entry.is_dir:
                    next_dirs.append(entry)
                next_items.append(entry)
        self._current = next_items or None
        self._next = next_dirs or None

    def build(self) -> None:
        """Read every level below the root into the tree."""
        while self._build_layer():
            self._advance()
            if self._current is None:
                break

    def get_tree(self) -> FlatTree:
        """Return an independent copy of the built tree."""
        return copy.deepcopy(self._tree)