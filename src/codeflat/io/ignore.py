from __future__ import annotations

"""Cascading `.gitignore` matcher.

Each directory under the traversal root may contribute one layer of
gitignore patterns, compiled with :mod:`pathspec` and matched against paths
relative to that directory. A path is decided by the deepest layer that has
an opinion about it (last matching pattern inside the layer wins, `!`
patterns re-include), so a nested `.gitignore` overrides its ancestors for
everything below it.

On top of the patterns two rules are hardwired: any `.git` path segment
prunes the entry unconditionally, and the `.gitignore` files themselves are
never emitted even though their rules are applied.
"""

import enum
import logging
from pathlib import Path
from typing import Dict, List, Optional

from pathspec import GitIgnoreSpec

from codeflat.constants import IGNORE_FILENAME, VCS_DIRNAME
from codeflat.core.interfaces.walker import IgnoreMatcherProtocol
from codeflat.logging.helpers import get_logger
from codeflat.utils.paths import ancestors_within, has_component


class Decision(enum.Enum):
    INCLUDE = 'include'
    IGNORED = 'ignored'
    VCS = 'vcs'
    IGNORE_FILE = 'ignore-file'

    @property
    def excluded(self) -> bool:
        return self is not Decision.INCLUDE


class IgnoreLayer:
    """Immutable set of patterns loaded from one directory's ignore file."""

    def __init__(self, directory: Path, spec: GitIgnoreSpec) -> None:
        self.directory = directory
        self._spec = spec

    @classmethod
    def from_lines(cls, directory: Path, lines: List[str]) -> 'IgnoreLayer':
        return cls(directory, GitIgnoreSpec.from_lines(lines))

    def __len__(self) -> int:
        return len(self._spec.patterns)

    def check(self, path: Path, is_dir: bool) -> Optional[bool]:
        """Return True (ignored), False (re-included) or None (no pattern matched)."""
        rel = path.relative_to(self.directory).as_posix()
        if is_dir:
            rel += '/'
        verdict: Optional[bool] = None
        for pattern in self._spec.patterns:
            if pattern.include is None:
                continue
            if pattern.match_file(rel) is not None:
                verdict = bool(pattern.include)
        return verdict


class IgnoreRuleSet(IgnoreMatcherProtocol):
    """Layered ignore rules for one traversal root.

    Layers are loaded lazily, the first time a path below a directory is
    decided, and cached for the rest of the walk.
    """

    def __init__(
        self,
        root: Path,
        *,
        filename: str = IGNORE_FILENAME,
        vcs_dirname: str = VCS_DIRNAME,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.root = Path(root)
        self.filename = filename
        self.vcs_dirname = vcs_dirname
        self._log = logger or get_logger('io.ignore')
        self._layers: Dict[Path, Optional[IgnoreLayer]] = {}

    def layer(self, directory: Path) -> Optional[IgnoreLayer]:
        """Return the (cached) layer for *directory*, or None if it has no ignore file."""
        if directory in self._layers:
            return self._layers[directory]
        layer = self._load(directory)
        self._layers[directory] = layer
        return layer

    def _load(self, directory: Path) -> Optional[IgnoreLayer]:
        source = directory / self.filename
        try:
            raw = source.read_bytes()
        except (FileNotFoundError, IsADirectoryError):
            return None
        except OSError as exc:
            self._log.warning('(error) cannot read %s: %s', source, exc)
            return None
        lines = raw.decode('utf-8', 'replace').splitlines()
        layer = IgnoreLayer.from_lines(directory, lines)
        self._log.debug('loaded %d pattern(s) from %s', len(layer), source)
        return layer

    def decision(self, path: Path, is_dir: bool) -> Decision:
        """Decide whether *path* (a strict descendant of the root) is walked/emitted."""
        rel = path.relative_to(self.root)
        if has_component(rel, self.vcs_dirname):
            return Decision.VCS

        for directory in reversed(ancestors_within(path, self.root)):
            layer = self.layer(directory)
            if layer is None:
                continue
            verdict = layer.check(path, is_dir)
            if verdict is not None:
                if verdict:
                    return Decision.IGNORED
                break

        if not is_dir and path.name == self.filename:
            return Decision.IGNORE_FILE
        return Decision.INCLUDE

    def is_excluded(self, path: Path, is_dir: bool) -> bool:
        return self.decision(path, is_dir).excluded
