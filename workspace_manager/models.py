"""Workspace document models.

Mirrors the subset of the VS Code ``.code-workspace`` format this tool
manages::

    {
      "folders": [{"path": "...", "name": "..."}],
      "tasks": {"version": "2.0.0", "tasks": [{"label", "type", "command", "args"}]},
      ...any other top-level keys, passed through unchanged
    }

Keys the models do not declare are kept in ``model_extra`` and written back
verbatim, so settings, launch configs and hand-written task fields survive a
rewrite.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

UPDATE_TASK_LABEL = "Update Workspace"
TASK_TYPE = "process"
TASKS_VERSION = "2.0.0"


class _PassthroughModel(BaseModel):
    """Base for models that round-trip unknown keys."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Declared fields first (by alias, ``None`` omitted), then extras in parse order."""
        data: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            data[field.alias or name] = _to_json(value)
        data.update(self.model_extra or {})
        return data


def _to_json(value: Any) -> Any:
    if isinstance(value, _PassthroughModel):
        return value.to_json_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value


class WorkspaceFolder(BaseModel):
    """One folder entry.  Built entries always carry a display name."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path relative to the workspace file, or '.'")
    name: str | None = Field(default=None, description="Emblem-decorated display name")


_FolderItem = Annotated[WorkspaceFolder | dict[str, Any], Field(union_mode="left_to_right")]


class Task(_PassthroughModel):
    """A task entry.  Every field is optional so user-written tasks always parse."""

    label: str | None = None
    task_type: str | None = Field(default=None, alias="type")
    command: Any = None
    args: list[Any] | None = None


class TaskSet(_PassthroughModel):
    """The ``tasks`` section: schema version plus ordered tasks."""

    version: str = TASKS_VERSION
    tasks: list[Task] = Field(default_factory=list)

    def labels(self) -> list[str | None]:
        return [task.label for task in self.tasks]


class WorkspaceDocument(_PassthroughModel):
    """A whole workspace file.

    Folders read from disk that are not plain ``{path, name}`` entries (``uri``
    folders, for one) stay as raw dicts; the list is replaced on every run anyway.
    """

    folders: list[_FolderItem] = Field(default_factory=list)
    tasks: TaskSet | None = None

    @property
    def extraneous(self) -> dict[str, Any]:
        """Top-level keys this tool does not manage."""
        return dict(self.model_extra or {})
