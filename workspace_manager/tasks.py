"""The "Update Workspace" maintenance task.

The task re-runs this tool with the arguments that produced the current file,
so VS Code can refresh the folder list from the command palette.  Building it
is pure: the command that launches the tool is resolved once by the caller
(``resolve_command``) and passed in.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from pydantic import BaseModel

from workspace_manager.models import TASK_TYPE, TASKS_VERSION, UPDATE_TASK_LABEL, Task, TaskSet

DEFAULT_COMMAND = "workspace-manager"
MODULE_NAME = "workspace_manager"


class TaskOptions(BaseModel):
    """The effective configuration the maintenance task reproduces."""

    path: str = "."
    name: str | None = None
    exclude_current: bool = False


def task_arguments(options: TaskOptions) -> list[str]:
    """Rebuild the command-line arguments in a fixed order: name, exclude flag, path."""
    args: list[str] = []
    if options.name is not None:
        args.extend(["--name", options.name])
    if options.exclude_current:
        args.append("--exclude-current")
    args.extend(["--path", options.path])
    return args


def resolve_command(argv0: str | None = None) -> list[str]:
    """Return the command prefix that launches this tool again.

    - console script: ``[/abs/path/to/workspace-manager]``
    - ``python -m workspace_manager``: ``[sys.executable, "-m", "workspace_manager"]``
    - anything unresolvable: ``["workspace-manager"]``
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        return [DEFAULT_COMMAND]

    if Path(argv0).suffix == ".py":
        if sys.executable:
            return [sys.executable, "-m", MODULE_NAME]
        return [DEFAULT_COMMAND]

    found = shutil.which(argv0)
    if found is None:
        return [DEFAULT_COMMAND]
    return [str(Path(found).resolve())]


def build_update_task(options: TaskOptions, command: list[str]) -> Task:
    return Task(
        label=UPDATE_TASK_LABEL,
        task_type=TASK_TYPE,
        command=command[0],
        args=[*command[1:], *task_arguments(options)],
    )


def merge_tasks(existing: TaskSet | None, new_task: Task) -> TaskSet:
    """Replace the maintenance task in *existing*, keeping every other task.

    Any task labelled "Update Workspace" is dropped and *new_task* is appended,
    so the set never holds two.  *existing* is not modified.
    """
    if existing is None:
        tasks = TaskSet(version=TASKS_VERSION, tasks=[])
    else:
        tasks = existing.model_copy(deep=True)

    tasks.tasks = [task for task in tasks.tasks if task.label != UPDATE_TASK_LABEL]
    tasks.tasks.append(new_task)
    return tasks
