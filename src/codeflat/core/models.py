from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

from codeflat.constants import DEFAULT_OUTPUT
from codeflat.core.errors import FlattenError


@dataclass(frozen=True)
class FlattenConfig:
    """Immutable configuration for a single flatten run."""
    root: Path
    output: Path = Path(DEFAULT_OUTPUT)
    include_binary: bool = False
    verbose: bool = False
    json_logs: bool = False

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> 'FlattenConfig':
        """Build a config from the namespace produced by the CLI parser."""
        return cls(
            root=Path(ns.folder),
            output=Path(ns.output),
            include_binary=bool(getattr(ns, 'include_binary', False)),
            verbose=bool(getattr(ns, 'verbose', False)),
            json_logs=bool(getattr(ns, 'json_logs', False)),
        )

    def validate(self) -> None:
        """Raise FlattenError unless *root* is an existing directory."""
        if not self.root.is_dir():
            raise FlattenError(f"'{self.root}' is not a directory")


@dataclass(frozen=True)
class Entry:
    """A filesystem entry produced by the walker; never persisted."""
    path: Path
    relpath: str
    is_file: bool = True
    is_dir: bool = False


@dataclass
class FlattenReport:
    """Per-run counters. Logged in verbose mode, never written to the output."""
    written: int = 0
    skipped_binary: int = 0
    skipped_ignored: int = 0
    skipped_vcs: int = 0
    skipped_other: int = 0
    errors: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f'{self.written} written, {self.skipped_binary} binary, '
            f'{self.skipped_ignored} ignored, {self.skipped_vcs} vcs, '
            f'{self.skipped_other} other, {len(self.errors)} walk errors'
        )
