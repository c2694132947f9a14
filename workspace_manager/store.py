"""Reading and writing workspace files.

Writes are atomic: data is written to a temporary file in the same directory,
then renamed over the target.  The write is the last step of a run, so any
earlier failure leaves the previous file untouched.

A file that exists but cannot be parsed is treated as absent and replaced by
a fresh document.  Strict mode turns that into a ``WorkspaceParseError``.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from workspace_manager.errors import WorkspaceParseError
from workspace_manager.models import WorkspaceDocument

WORKSPACE_SUFFIX = ".code-workspace"


def workspace_filename(workspace_name: str) -> str:
    return f"{workspace_name}{WORKSPACE_SUFFIX}"


# -- Read ----------------------------------------------------------------------


def parse_workspace(raw: str) -> WorkspaceDocument:
    """Parse workspace JSON.  Raises ``ValueError`` (JSON or schema) on bad input."""
    return WorkspaceDocument.model_validate(json.loads(raw))


def load_workspace(path: Path, *, strict: bool = False) -> WorkspaceDocument | None:
    """Load an existing workspace file.

    Returns ``None`` if the file does not exist, or if it cannot be parsed and
    *strict* is off.  Errors opening an existing file propagate as ``OSError``.
    """
    if not path.exists():
        return None

    raw_bytes = path.read_bytes()
    try:
        return parse_workspace(raw_bytes.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        if strict:
            msg = f"Cannot parse existing workspace file {path}: {exc}"
            raise WorkspaceParseError(msg) from None
        logger.warning("Existing workspace file {} is not valid, replacing it: {}", path, exc)
        return None


# -- Write ---------------------------------------------------------------------


def dump_workspace(document: WorkspaceDocument) -> str:
    return json.dumps(document.to_json_dict(), indent=2, ensure_ascii=False) + "\n"


def write_workspace(path: Path, document: WorkspaceDocument) -> None:
    """Overwrite *path* with the serialised document in one atomic step."""
    _atomic_write(path, dump_workspace(document))


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename.

    The temp file is created in the same directory so ``os.replace`` is atomic
    on POSIX.
    """
    mode = path.stat().st_mode & 0o777 if path.exists() else _default_mode()
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up temp file on any failure.
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def _default_mode() -> int:
    """Permissions a plain ``open(path, "w")`` would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
