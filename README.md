# reasy

The workspace model behind an IDE-style editor. It keeps the state that an editor interface reads and changes:

- a flat, layered tree of a project directory, with expand, collapse, rename and delete (`reasy.flat_tree`);
- the editor's panes: file tree, variable inspector, console and an empty main pane (`reasy.panes`);
- a layout that sends settings changes and dropped files to the right panes (`reasy.layout`);
- editor settings stored as JSON (`reasy.settings`), with directory and JSON helpers (`reasy.fileio`) and one error type (`reasy.errors`).

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Building a file tree

```python
from reasy.flat_tree import TreeBuilder

builder = TreeBuilder("path/to/project")   # defaults to the current directory
builder.build()
tree = builder.get_tree()

for node in tree.get_visible_items():
    print("  " * node.depth + node.file_entry.name)
```

The builder reads the directory one level at a time, breadth first. Each node has an `id` from `path_to_id(path)`, a stable number computed from the resolved path. It also has a `depth`, a `parent` id (`0` for top-level entries), and `visible` and `expanded` flags.

`get_visible_items()` lists the visible nodes in display order. Under each parent, directories come before files, and each group is sorted by name. Children appear directly below their parent, and only when that parent is expanded. At first only the top-level entries are visible.

- `tree.toggle_visibility(node_id)` expands a visible, collapsed directory and shows its children. Called on an expanded directory, it collapses it, hides everything below it, and marks its direct children as collapsed.
- `tree.rename(node_id, new_name)` renames a node and updates the paths of every node below it. It returns the old path, or `None` for an unknown id.
- `tree.remove(node_id)` removes a node, together with its subtree if it is a directory, and returns the removed node.
- `tree.get_node(node_id)` looks a node up. `tree.get_children_from_ids(ids)` returns the nodes for a list of ids, in that order, and skips unknown ids.

Rename and remove change only the tree in memory. They never touch the disk.

## Panes

`create_panes(settings, path=None)` builds the four panes. Each `Pane` has a `pane_id`, a `title`, a `kind` (`PaneKind`) and a `content`:

- `FileTreePane`: holds a `UiDirectory` and the pane's `FileTreeSettings`.
  - `queue_operation(Rename(node_id, new_name))` and `queue_operation(Delete(node_id))` queue changes and ignore duplicates.
  - `execute_operations()` applies the queue, most recent first.
  - `reload(settings)` collapses expanded hidden directories when hidden items are not shown, then recomputes the displayed ids.
  - `toggle_dirs(ids)` toggles several directories at once.
  - `visible_nodes()` returns the displayed nodes in order.
- `InspectorPane`: holds key/value `variables`, starting as `debug=true` and `max_iterations=100`.
  - `add_variable()` stores `new_key`/`new_value` if a key is set, then clears both fields.
  - `remove_variable(key)` removes a variable.
- `ConsolePane`: `submit()` echoes the input line as `> command` and runs it:
  - `clear` empties the messages;
  - `help` lists the commands;
  - `hello` answers `Hello there!`;
  - anything else produces `Unknown command: ...`.
- `EmptyPane`: the main editor placeholder.

`Pane.tab_title()` returns `"Pane <title>"`.

`Pane.file_dropped(path)` returns a line reporting the drop and logs it.

`Pane.reload_with_settings(settings)` applies new file-tree settings. It raises `ValueError` for a pane that is not a file tree.

`KeyPress(key)` represents a key press event. Its string form is `User key press: <key>`.

## Layout

```python
from reasy.layout import EditorLayout, Rect
from reasy.panes import PaneKind
from reasy.settings import EditorSettings

settings = EditorSettings(show_hidden_elements=True)
layout = EditorLayout(settings, "path/to/project")

layout.reload([PaneKind.FILE_TREE], settings)   # reload every file-tree pane

layout.set_rect(0, Rect(0, 0, 200, 600))       # screen area of pane 0
layout.file_hovered("notes.txt")
reports = layout.handle_file_drop((50, 100))   # deliver to panes under the point
```

`EditorLayout.panes` holds the panes from `create_panes`.

`reload` passes the settings to every pane whose kind is in the list. The console pane has kind `PaneKind.INSPECTOR`, and a non-file-tree pane raises `ValueError` on reload.

`set_rect` raises `IndexError` for an index with no pane. `Rect.contains(x, y)` counts the edges as inside.

`handle_file_drop` returns the drop reports and clears the remembered files. Given `None`, it logs an error and returns an empty list.

## Settings and files

```python
from reasy.settings import load_settings, save_settings

settings = load_settings("path/to/editor/root")
save_settings(settings, "path/to/editor/root")
```

Settings live in `settings.json` under the given root; `settings_path(root)` returns that location. If the file does not exist, `load_settings` returns the defaults (`show_hidden_elements=False`). A file with a missing or non-boolean field raises an error.

`reasy.fileio` provides:

- `read_directory(path)`: lists one level as `FileEntry` objects. A path that is not a directory raises an error of type `NOT_A_DIRECTORY`.
- `file_entry_from_path(path)`: builds a single `FileEntry`.
- `read_serialized_data(path)` and `write_serialized_data(data, path)`: read and write indented JSON.

`FileEntry.is_hidden()` uses the hidden file attribute where the platform reports one. Elsewhere it treats dotfiles as hidden.

All read and write failures are raised as `reasy.errors.EditorIoError`. Its `error_type` is an `ErrorType` worked out from the underlying exception by `error_type_for`. `wrap_error(exc)` converts any exception the same way. The string form is `ERROR: <type> msg: <message>`.

## What it does not do

This package holds state only. It opens no window, draws no interface, and has no command to start an editor. Renames and deletes in the file tree are not carried out on disk.