from __future__ import annotations

"""Public surface for codeflat.core: models, errors and protocol types."""

from codeflat.core.errors import FlattenError
from codeflat.core.models import Entry, FlattenConfig, FlattenReport

__all__ = [
    "Entry",
    "FlattenConfig",
    "FlattenError",
    "FlattenReport",
]
