"""Folder entry construction.

Entry paths are expressed relative to the workspace root (the directory that
holds the ``.code-workspace`` file) using real relative-path arithmetic, so a
scan root outside the workspace root yields ``..`` segments rather than a
broken concatenation.
"""

from __future__ import annotations

import os
from pathlib import Path

from workspace_manager.errors import FolderEntryError
from workspace_manager.models import WorkspaceFolder

DEFAULT_FOLDER_EMBLEM = "📦"
DEFAULT_CURRENT_EMBLEM = "🏗️"


def _display_name(emblem: str, name: str) -> str:
    return f"{emblem} {name}"


def relative_folder_path(path: Path, base_path: Path, scan_path: Path | None = None) -> str:
    """Return *path* relative to *base_path*.

    The scan root itself maps to its position under *base_path*, or to ``"."``
    when it does not live under it.  Raises ``FolderEntryError`` when no
    relative path exists (different drives on Windows).
    """
    if scan_path is not None and path == scan_path:
        try:
            return str(scan_path.relative_to(base_path))
        except ValueError:
            return "."

    try:
        return os.path.relpath(path, base_path)
    except ValueError as exc:
        msg = f"Failed to calculate relative path from {base_path} to {path}: {exc}"
        raise FolderEntryError(msg) from None


def create_workspace_folder(
    path: Path,
    base_path: Path,
    scan_path: Path | None = None,
    *,
    emblem: str = DEFAULT_FOLDER_EMBLEM,
) -> WorkspaceFolder:
    """Build the entry for a scanned directory.  Raises ``FolderEntryError``."""
    if not path.name:
        msg = f"Invalid folder name: {path}"
        raise FolderEntryError(msg)

    return WorkspaceFolder(
        path=relative_folder_path(path, base_path, scan_path),
        name=_display_name(emblem, path.name),
    )


def create_current_folder(workspace_name: str, *, emblem: str = DEFAULT_CURRENT_EMBLEM) -> WorkspaceFolder:
    """Build the entry for the workspace root itself."""
    return WorkspaceFolder(path=".", name=_display_name(emblem, workspace_name))
