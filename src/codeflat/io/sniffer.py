from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from codeflat.constants import SNIFF_BYTES
from codeflat.core.interfaces.sniffer import BinarySnifferProtocol


def looks_binary(path: Path, *, sample_size: int = SNIFF_BYTES) -> bool:
    """Heuristic: treat a file as binary when its first bytes are not UTF-8 text.

    The prefix counts as binary when it holds a NUL byte or is not valid
    UTF-8 on its own, including a multi-byte character cut by the sample
    boundary. OSError from opening or reading propagates to the caller.
    """
    with open(path, 'rb') as fh:
        head = fh.read(sample_size)
    if b'\x00' in head:
        return True
    try:
        head.decode('utf-8')
    except UnicodeDecodeError:
        return True
    return False


@dataclass(frozen=True)
class Utf8BinarySniffer(BinarySnifferProtocol):
    """Default sniffer backed by :func:`looks_binary`."""

    sample_size: int = SNIFF_BYTES

    def is_binary(self, path: Path) -> bool:
        return looks_binary(path, sample_size=self.sample_size)
