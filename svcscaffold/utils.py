"""Shared utility functions for svcscaffold.

Provides the file-system primitives the scaffolder writes through (directory
creation, atomic text writes) and the Rich-based console helpers used for all
user-facing output.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from rich.console import Console

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def file_exists(path: str | Path) -> bool:
    """Return ``True`` if *path* exists and is a regular file."""
    return Path(path).is_file()


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


def write_text_atomic(path: str | Path, content: str) -> Path:
    """Write *content* to *path* without ever exposing a partial file.

    The content is written to a temporary file in the same directory and then
    moved over the destination with :func:`os.replace`.  The parent directory
    must already exist.

    Args:
        path: Destination file path.
        content: Text to write (UTF-8).

    Returns:
        The destination ``Path``.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")

