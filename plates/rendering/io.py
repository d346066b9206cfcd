"""File output for rendered blocks."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..errors import MaterializeError


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def write_artifact(path: Path, text: str, mode: int = 0o644) -> None:
    """Create or truncate ``path`` with ``text``, creating missing parents.

    The content goes to a temporary sibling first and replaces ``path`` in
    one step, so a failed write never leaves a half-written file behind.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)

    Raises:
        MaterializeError: If a directory or the file cannot be written
    """
    try:
        ensure_parent(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(text)
            os.replace(tmp_name, path)
            os.chmod(path, mode)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
    except OSError as e:
        raise MaterializeError(f"Cannot write {path}: {e}") from e
