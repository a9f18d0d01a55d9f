from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class BinarySnifferProtocol(Protocol):
    """Classifies a file as text or binary from a bounded prefix."""

    def is_binary(self, path: Path) -> bool:
        ...
