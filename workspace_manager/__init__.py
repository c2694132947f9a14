"""workspace-manager - keep a VS Code ``.code-workspace`` file in sync with a folder tree."""

__version__ = "0.1.0"
