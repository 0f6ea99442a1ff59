"""
Find JSON/YAML files under a project root that look like config files.
"""
from __future__ import annotations

import glob
import os
from pathlib import Path


# Glob patterns to try (in priority order), relative to the root
CANDIDATE_PATTERNS = [
    "**/*config*.json",
    "**/*.json",
    "**/*.yaml",
    "**/*.yml",
]

IGNORED_DIRS = {"node_modules"}


def find_candidate_files(root: Path | str) -> list[str]:
    """
    Return absolute paths of candidate config files under `root`.

    Results from all patterns are merged in pattern order and de-duplicated
    by resolved path. Files whose name contains "config" (any case) sort
    first; otherwise the merged order is kept. Returns [] if nothing matches.
    """
    root_path = Path(root).resolve()

    seen: set[str] = set()
    merged: list[str] = []
    for pattern in CANDIDATE_PATTERNS:
        for match in _glob_pattern(root_path, pattern):
            absolute = str((root_path / match).resolve())
            if absolute in seen:
                continue
            seen.add(absolute)
            merged.append(absolute)

    # sorted() is stable, so ties keep their merged order
    return sorted(merged, key=lambda path: 0 if is_config_named(path) else 1)


def is_config_named(path: str) -> bool:
    return "config" in os.path.basename(path).lower()


def relative_choices(root: Path | str, paths: list[str]) -> list[str]:
    """Render candidate paths relative to the root, for display."""
    return [os.path.relpath(path, root) for path in paths]


def _glob_pattern(root: Path, pattern: str) -> list[str]:
    """
    Expand one pattern relative to root, skipping ignored directories.

    A pattern that fails to expand is logged and yields no matches, so the
    remaining patterns still contribute.
    """
    try:
        matches = glob.glob(pattern, root_dir=root, recursive=True)
    except (OSError, ValueError) as glob_error:
        print(f"[FlagPR] ⚠️ Skipping glob pattern {pattern!r}: {glob_error}")
        return []

    kept = []
    for match in sorted(matches):
        parts = Path(match).parts
        if IGNORED_DIRS.intersection(parts[:-1]):
            continue
        if not (root / match).is_file():
            continue
        kept.append(match)
    return kept
