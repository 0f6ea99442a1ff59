"""Git repository root discovery."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


GIT_MARKER = ".git"


def find_repo_root(path: Path | str) -> Optional[Path]:
    """Return the first directory at or above ``path`` holding a ``.git`` entry.

    ``.git`` may be a directory or a file (worktrees, submodules). Returns
    None when the filesystem root is reached without finding one. No git
    command is run.
    """
    start = Path(path).resolve()
    if start.is_file():
        start = start.parent
    for candidate in [start, *start.parents]:
        if (candidate / GIT_MARKER).exists():
            return candidate
    return None
