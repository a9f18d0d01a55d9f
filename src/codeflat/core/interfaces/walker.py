from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Protocol, runtime_checkable

from codeflat.core.models import Entry


@runtime_checkable
class IgnoreMatcherProtocol(Protocol):
    """Answers whether a path under the traversal root is excluded."""

    def is_excluded(self, path: Path, is_dir: bool) -> bool:
        ...


@runtime_checkable
class WalkerProtocol(Protocol):
    """Lazy producer of file entries under a root."""

    def walk(self) -> Iterator[Entry]:
        """Yield every qualifying file entry, depth-first."""
        ...


@runtime_checkable
class ConcatenatorProtocol(Protocol):
    """Streams headers and file contents into an output sink."""

    def write_entry(self, entry: Entry) -> bool:
        """Write one entry; return False when it was skipped."""
        ...

    def write_all(self, entries: Iterable[Entry]) -> int:
        """Write every entry in order and return how many were written."""
        ...
