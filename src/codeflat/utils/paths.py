# src/codeflat/utils/paths.py
"""
paths – Small, centralized path helpers for codeflat.

Provides:
  • display_relpath(path, root)   – header text for a walked entry
  • has_component(path, name)     – exact path-segment check
  • ancestors_within(path, root)  – directories from *root* down to *path*'s parent
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List


def display_relpath(path: Path, root: Path) -> str:
    """Return *path* relative to *root*, or the absolute path when outside it.

    Undecodable filename bytes are rendered as U+FFFD so the result can always
    be written as UTF-8.
    """
    try:
        shown = path.relative_to(root)
    except ValueError:
        shown = path.absolute()
    return os.fsencode(shown).decode("utf-8", "replace")


def has_component(path: Path, name: str) -> bool:
    """Return True if any segment of *path* is exactly *name*."""
    return name in path.parts


def ancestors_within(path: Path, root: Path) -> List[Path]:
    """Return the directories from *root* down to the parent of *path*.

    *path* must lie under *root*; the list always starts with *root*.
    """
    rel = path.relative_to(root)
    dirs = [root]
    for part in rel.parts[:-1]:
        dirs.append(dirs[-1] / part)
    return dirs
