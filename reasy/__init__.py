"""Workspace model for an IDE-style editor: file trees, panes, layout and JSON settings."""

__version__ = "0.1.0"