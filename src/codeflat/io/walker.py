from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set, Tuple

from codeflat.constants import IGNORE_FILENAME, VCS_DIRNAME
from codeflat.core.interfaces.walker import IgnoreMatcherProtocol, WalkerProtocol
from codeflat.core.models import Entry, FlattenReport
from codeflat.io.ignore import Decision, IgnoreRuleSet
from codeflat.logging.helpers import get_logger
from codeflat.utils.paths import display_relpath, has_component

_SKIP_LABELS = {
    Decision.VCS: '.git',
    Decision.IGNORE_FILE: '.gitignore',
    Decision.IGNORED: 'ignored',
}


class DirectoryWalker(WalkerProtocol):
    """Depth-first, sorted, lazy walk of *root* yielding regular files only.

    Directories are pruned before being listed when the matcher excludes
    them. Symlinks are never followed. Errors raised while listing or
    stat-ing an entry are logged and skipped; they do not stop the walk.
    """

    def __init__(
        self,
        root: Path,
        *,
        matcher: Optional[IgnoreMatcherProtocol] = None,
        exclude_files: Iterable[Path] = (),
        logger: Optional[logging.Logger] = None,
        report: Optional[FlattenReport] = None,
    ) -> None:
        self.root = Path(root)
        self._log = logger or get_logger('io.walker')
        self._matcher = matcher or IgnoreRuleSet(self.root, logger=self._log)
        self._report = report or FlattenReport()
        self._excluded_ids = self._file_ids(exclude_files)

    @staticmethod
    def _file_ids(paths: Iterable[Path]) -> Set[Tuple[int, int]]:
        ids: Set[Tuple[int, int]] = set()
        for p in paths:
            try:
                st = os.stat(p)
            except OSError:
                continue
            ids.add((st.st_dev, st.st_ino))
        return ids

    def _decide(self, path: Path, is_dir: bool) -> Decision:
        if has_component(path.relative_to(self.root), VCS_DIRNAME):
            return Decision.VCS
        if isinstance(self._matcher, IgnoreRuleSet):
            return self._matcher.decision(path, is_dir)
        if self._matcher.is_excluded(path, is_dir):
            return Decision.IGNORED
        if not is_dir and path.name == IGNORE_FILENAME:
            return Decision.IGNORE_FILE
        return Decision.INCLUDE

    def _skip(self, decision: Decision, rel: str) -> None:
        if decision is Decision.VCS:
            self._report.skipped_vcs += 1
        else:
            self._report.skipped_ignored += 1
        label = _SKIP_LABELS[decision]
        self._log.info('(skip – %s) %s', label, rel, extra={'context': {'path': rel, 'reason': label}})

    def _on_error(self, exc: OSError) -> None:
        self._report.errors.append(str(exc))
        self._log.warning('(error) %s', exc)

    def walk(self) -> Iterator[Entry]:
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=self._on_error):
            base = Path(dirpath)

            kept = []
            for name in sorted(dirnames):
                sub = base / name
                rel = display_relpath(sub, self.root)
                if sub.is_symlink():
                    self._report.skipped_other += 1
                    self._log.info('(skip – symlink) %s', rel)
                    continue
                decision = self._decide(sub, True)
                if decision.excluded:
                    self._skip(decision, rel)
                    continue
                kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                fp = base / name
                rel = display_relpath(fp, self.root)
                try:
                    st = os.lstat(fp)
                except OSError as exc:
                    self._on_error(exc)
                    continue
                if not stat.S_ISREG(st.st_mode):
                    self._report.skipped_other += 1
                    self._log.info('(skip – not a regular file) %s', rel)
                    continue
                if (st.st_dev, st.st_ino) in self._excluded_ids:
                    self._report.skipped_other += 1
                    self._log.info('(skip – output file) %s', rel)
                    continue
                decision = self._decide(fp, False)
                if decision.excluded:
                    self._skip(decision, rel)
                    continue
                yield Entry(path=fp, relpath=rel, is_file=True, is_dir=False)
