"""Assemble the workspace document for one run.

Existing file handling:

- no file: fresh document with a fresh task section
- file parses: keep its extra sections; keep its tasks unless an update was
  requested or it has none
- file does not parse: same as no file (or ``WorkspaceParseError`` in strict mode)

The folder list is rebuilt from scratch on every run, never diffed against
the previous one, so removed directories do not linger.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from workspace_manager.folders import (
    DEFAULT_CURRENT_EMBLEM,
    DEFAULT_FOLDER_EMBLEM,
    create_current_folder,
    create_workspace_folder,
)
from workspace_manager.models import Task, WorkspaceDocument, WorkspaceFolder
from workspace_manager.scanner import scan_directories
from workspace_manager.settings import WorkspaceSettings, get_settings
from workspace_manager.store import load_workspace, workspace_filename
from workspace_manager.tasks import TaskOptions, build_update_task, merge_tasks


def default_workspace_name(cwd: Path) -> str:
    """The workspace is named after the directory it lives in."""
    return cwd.name


def merge_workspace(
    existing: WorkspaceDocument | None,
    folders: list[WorkspaceFolder],
    update_task_entry: Task,
    *,
    update_task: bool,
) -> WorkspaceDocument:
    """Combine a previously written document with this run's folders and task."""
    if existing is None:
        logger.debug("Creating fresh workspace document")
        document = WorkspaceDocument(folders=[], tasks=merge_tasks(None, update_task_entry))
    else:
        document = existing.model_copy(deep=True)
        logger.debug("Keeping extra sections: {}", list(document.extraneous))
        if update_task or document.tasks is None:
            logger.debug("Refreshing '{}' task", update_task_entry.label)
            document.tasks = merge_tasks(document.tasks, update_task_entry)
        else:
            logger.debug("Keeping existing tasks: {}", document.tasks.labels())

    document.folders = list(folders)
    return document


def build_folders(
    scan_path: Path,
    workspace_name: str,
    *,
    base_path: Path,
    include_current: bool,
    folder_emblem: str = DEFAULT_FOLDER_EMBLEM,
    current_emblem: str = DEFAULT_CURRENT_EMBLEM,
) -> list[WorkspaceFolder]:
    """Current-directory entry first (if requested), then scanned folders in scan order.

    Raises ``OSError`` if *scan_path* cannot be listed and ``FolderEntryError``
    for the first folder that cannot be expressed relative to *base_path*.
    """
    folders: list[WorkspaceFolder] = []
    if include_current:
        folders.append(create_current_folder(workspace_name, emblem=current_emblem))

    for directory in scan_directories(scan_path):
        folders.append(create_workspace_folder(directory, base_path, scan_path, emblem=folder_emblem))
    return folders


def create_workspace(
    scan_path: Path,
    workspace_name: str,
    options: TaskOptions,
    *,
    base_path: Path,
    command: list[str],
    update_task: bool = False,
    workspace_file: Path | None = None,
    strict: bool = False,
    settings: WorkspaceSettings | None = None,
) -> WorkspaceDocument:
    """Scan *scan_path* and merge the result into the existing workspace file.

    *base_path* is the workspace root that folder paths are relative to, and
    *workspace_file* defaults to ``<base_path>/<workspace_name>.code-workspace``.
    *command* is the launcher prefix from ``resolve_command``.  Nothing is
    written; see ``store.write_workspace``.
    """
    settings = settings or get_settings()
    if workspace_file is None:
        workspace_file = base_path / workspace_filename(workspace_name)

    folders = build_folders(
        scan_path,
        workspace_name,
        base_path=base_path,
        include_current=not options.exclude_current,
        folder_emblem=settings.folder_emblem,
        current_emblem=settings.current_emblem,
    )

    existing = load_workspace(workspace_file, strict=strict or settings.strict_parse)
    return merge_workspace(existing, folders, build_update_task(options, command), update_task=update_task)
