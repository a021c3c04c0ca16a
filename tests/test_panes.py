import pytest

from reasy.flat_tree import path_to_id
from reasy.panes import (
    ConsolePane,
    Delete,
    EmptyPane,
    FileTreePane,
    InspectorPane,
    KeyPress,
    Pane,
    PaneKind,
    Rename,
    create_panes,
)
from reasy.settings import EditorSettings, FileTreeSettings


@pytest.fixture
def project(tmp_path):
    (tmp_path / "alpha").mkdir()
    (tmp_path / "alpha" / "inner.txt").write_text("x")
    (tmp_path / "beta.txt").write_text("y")
    return tmp_path


def _file_tree(project):
    panes = create_panes(EditorSettings(), project)
    return panes[0]


def _names(directory):
    return [node.file_entry.name for node in directory.visible_nodes()]


def test_create_panes_layout(project):
    panes = create_panes(EditorSettings(), project)
    assert [p.title for p in panes] == ["File Tree", "Variables", "Console", "Main Editor"]
    assert [p.pane_id for p in panes] == [0, 1, 2, 3]
    assert panes[0].kind is PaneKind.FILE_TREE
    assert panes[3].kind is PaneKind.EMPTY
    assert panes[1].content.variables == {"debug": "true", "max_iterations": "100"}
    assert panes[2].content.messages == [
        "Console initialized",
        "Type 'help' for available commands",
    ]
    assert isinstance(panes[3].content, EmptyPane)


def test_tab_title(project):
    pane = _file_tree(project)
    assert pane.tab_title() == "Pane File Tree"


def test_initial_display_shows_roots_dirs_first(project):
    directory = _file_tree(project).content.directory
    assert _names(directory) == ["alpha", "beta.txt"]


def test_toggle_dirs_expands_and_collapses(project):
    directory = _file_tree(project).content.directory
    alpha_id = path_to_id(project / "alpha")
    directory.toggle_dirs([alpha_id])
    assert _names(directory) == ["alpha", "inner.txt", "beta.txt"]
    directory.toggle_dirs([alpha_id])
    assert _names(directory) == ["alpha", "beta.txt"]


def test_queue_operation_deduplicates(project):
    directory = _file_tree(project).content.directory
    directory.queue_operation(Delete(5))
    directory.queue_operation(Delete(5))
    directory.queue_operation(Rename(5, "n"))
    assert directory.operations == [Delete(5), Rename(5, "n")]


def test_execute_rename(project):
    pane = _file_tree(project)
    directory = pane.content.directory
    inner_id = path_to_id(project / "alpha" / "inner.txt")
    directory.queue_operation(Rename(inner_id, "renamed.txt"))
    directory.execute_operations()
    node = directory.flat_tree.get_node(inner_id)
    assert node.file_entry.name == "renamed.txt"
    assert node.file_entry.path.parent == project / "alpha"
    assert directory.operations == []


def test_execute_delete_removes_subtree(project):
    directory = _file_tree(project).content.directory
    alpha_id = path_to_id(project / "alpha")
    inner_id = path_to_id(project / "alpha" / "inner.txt")
    directory.queue_operation(Delete(alpha_id))
    directory.execute_operations()
    directory.reload(FileTreeSettings())
    assert directory.flat_tree.get_node(alpha_id) is None
    assert directory.flat_tree.get_node(inner_id) is None
    assert _names(directory) == ["beta.txt"]


def test_reload_collapses_hidden_directories(project):
    (project / ".hid").mkdir()
    (project / ".hid" / "x").write_text("z")
    pane = create_panes(EditorSettings(), project)[0]
    directory = pane.content.directory
    hid_id = path_to_id(project / ".hid")
    x_id = path_to_id(project / ".hid" / "x")
    directory.toggle_dirs([hid_id])
    assert x_id in directory.display_tree

    pane.reload_with_settings(FileTreeSettings(show_hidden_elements=True))
    assert x_id in directory.display_tree
    assert pane.content.settings.show_hidden_elements is True

    pane.reload_with_settings(FileTreeSettings(show_hidden_elements=False))
    assert x_id not in directory.display_tree
    assert hid_id in directory.display_tree
    assert directory.flat_tree.get_node(hid_id).expanded is False


def test_reload_with_settings_rejects_other_panes():
    pane = Pane(3, EmptyPane(), "Main Editor", PaneKind.EMPTY)
    with pytest.raises(ValueError):
        pane.reload_with_settings(FileTreeSettings())


def test_inspector_add_and_remove():
    inspector = InspectorPane(new_key="k", new_value="v")
    assert inspector.add_variable() is True
    assert inspector.variables == {"k": "v"}
    assert (inspector.new_key, inspector.new_value) == ("", "")
    assert inspector.add_variable() is False
    inspector.remove_variable("k")
    assert inspector.variables == {}


def test_console_commands():
    console = ConsolePane()
    console.input = "help"
    console.submit()
    assert console.messages == ["> help", "Available commands: clear, help, hello"]
    console.input = "hello"
    console.submit()
    assert console.messages[-1] == "Hello there!"
    console.input = "bogus"
    console.submit()
    assert console.messages[-1] == "Unknown command: bogus"
    assert console.input == ""
    console.input = "clear"
    console.submit()
    assert console.messages == []


def test_console_ignores_empty_input():
    console = ConsolePane(messages=["a"])
    console.submit()
    assert console.messages == ["a"]


def test_file_dropped_messages(project, tmp_path):
    panes = create_panes(EditorSettings(), project)
    dropped = tmp_path / "f.txt"
    assert panes[0].file_dropped(dropped) == f"File dropped in filetree: {dropped}"
    assert panes[1].file_dropped(dropped) == f"File dropped in Inspector: {dropped}"
    assert panes[2].file_dropped(dropped) == f"File dropped in console: {dropped}"
    assert panes[3].file_dropped(dropped) == f"File dropped in empty pane: {dropped}"


def test_file_tree_pane_uses_settings(project):
    pane = create_panes(EditorSettings(show_hidden_elements=True), project)[0]
    assert isinstance(pane.content, FileTreePane)
    assert pane.content.settings == FileTreeSettings(show_hidden_elements=True)


def test_key_press_text():
    assert str(KeyPress("a")) == "User key press: a"