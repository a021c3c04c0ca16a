[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reasy"
version = "0.1.0"
description = "Workspace model for an IDE-style editor: flat file trees, panes, layout and JSON settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "ide", "file-tree", "layout", "panes", "settings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reasy"]

[tool.pytest.ini_options]
addopts = "-ra"
