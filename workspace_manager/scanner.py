"""Directory scanning: immediate, non-hidden subdirectories of a path."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

HIDDEN_PREFIX = "."


def is_hidden(path: Path) -> bool:
    """Return True when the final path segment starts with a dot.

    A path with no final segment (``/``) is never hidden.
    """
    return path.name.startswith(HIDDEN_PREFIX)


def scan_directories(base_path: Path) -> list[Path]:
    """List the immediate child directories of *base_path*, skipping hidden ones.

    Does not recurse.  Entries are sorted by name so repeated runs produce the
    same folder order.  Raises ``OSError`` if *base_path* cannot be listed.
    """
    dirs = [path for path in base_path.iterdir() if path.is_dir() and not is_hidden(path)]
    dirs.sort(key=lambda p: p.name)
    logger.debug("Scanned {}: {} folder(s)", base_path, len(dirs))
    return dirs
