"""Domain exceptions.

Filesystem failures are not wrapped: they surface as ``OSError`` and the CLI
reports them as-is.
"""

from __future__ import annotations


class WorkspaceError(Exception):
    """Base class for workspace-manager errors."""


class FolderEntryError(WorkspaceError, ValueError):
    """Raised when a directory cannot be turned into a workspace folder entry."""


class WorkspaceParseError(WorkspaceError, ValueError):
    """Raised when an existing workspace file cannot be parsed (strict mode only)."""
